r"""Built-in retry conditions.

A retry condition is a predicate ``(result, error) -> bool`` evaluated
after every attempt. Exactly one of ``result``/``error`` is meaningful:
``error`` is ``None`` when the operation returned, and ``result`` is
``None`` when it raised. Returning ``True`` asks for another attempt.

Example:
    ```pycon
    >>> from aretry.conditions import on_any_error, on_null_result
    >>> on_any_error(None, ValueError("boom"))
    True
    >>> on_any_error(42, None)
    False
    >>> on_null_result(None, None)
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "RetryCondition",
    "always",
    "any_of",
    "never",
    "on_any_error",
    "on_error_types",
    "on_null_result",
]

from collections.abc import Callable
from typing import Any, Union

RetryCondition = Callable[[Any, Union[BaseException, None]], bool]


def on_any_error(result: Any, error: BaseException | None) -> bool:  # noqa: ARG001
    r"""Retry iff the attempt raised an error."""
    return error is not None


def always(result: Any, error: BaseException | None) -> bool:  # noqa: ARG001
    r"""Retry unconditionally, until the attempt bound is reached."""
    return True


def never(result: Any, error: BaseException | None) -> bool:  # noqa: ARG001
    r"""Never retry."""
    return False


def on_null_result(result: Any, error: BaseException | None) -> bool:
    r"""Retry iff the attempt returned without error and the result is
    ``None``."""
    return error is None and result is None


def on_error_types(*types: type[BaseException]) -> RetryCondition:
    r"""Create a condition that retries only on the given error types.

    Args:
        *types: The exception classes that should trigger a retry.

    Returns:
        A retry condition.

    Raises:
        ValueError: If no exception type is given.

    Example:
        ```pycon
        >>> from aretry.conditions import on_error_types
        >>> condition = on_error_types(TimeoutError, ConnectionError)
        >>> condition(None, TimeoutError())
        True
        >>> condition(None, KeyError("x"))
        False

        ```
    """
    if not types:
        msg = "on_error_types requires at least one exception type"
        raise ValueError(msg)

    def condition(result: Any, error: BaseException | None) -> bool:  # noqa: ARG001
        return isinstance(error, types)

    condition.__qualname__ = f"on_error_types({', '.join(t.__name__ for t in types)})"
    return condition


def any_of(*conditions: RetryCondition) -> RetryCondition:
    r"""Combine conditions: retry when at least one of them asks for it.

    Example:
        ```pycon
        >>> from aretry.conditions import any_of, on_any_error, on_null_result
        >>> condition = any_of(on_any_error, on_null_result)
        >>> condition(None, None)
        True
        >>> condition(1, None)
        False

        ```
    """
    if not conditions:
        msg = "any_of requires at least one condition"
        raise ValueError(msg)

    def condition(result: Any, error: BaseException | None) -> bool:
        return any(cond(result, error) for cond in conditions)

    return condition
