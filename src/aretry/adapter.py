r"""Adapters routing function and method calls through the executor.

``with_retry`` composes a callable with a retry policy and returns a new
coroutine function with the same signature. ``retry`` is its decorator
form. Neither contains retry logic: each call builds a zero-argument
closure over the original arguments and hands it to ``RetryExecutor``,
then returns (or raises) exactly what the executor resolves to.

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import retry
    >>> from aretry.conditions import on_null_result
    >>> class Repository:
    ...     def __init__(self) -> None:
    ...         self.calls = 0
    ...
    ...     @retry(retry_when=on_null_result, max_retries=2)
    ...     async def load(self, key: str) -> str | None:
    ...         self.calls += 1
    ...         return None if self.calls < 2 else key.upper()
    ...
    >>> repo = Repository()
    >>> asyncio.run(repo.load("abc"))
    'ABC'
    >>> repo.calls
    2

    ```
"""

from __future__ import annotations

__all__ = ["retry", "with_retry"]

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.config import RetryConfig, resolve_config
from aretry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.callbacks import CallbackConfig
    from aretry.conditions import RetryCondition

T = TypeVar("T")


def _resolve_config(
    func: Callable[..., Any],
    config: RetryConfig | None,
    retry_when: RetryCondition | None,
    overrides: dict[str, Any],
) -> RetryConfig:
    config = resolve_config(config, retry_when, **overrides)
    if config.operation_name is None:
        config = config.merge(operation_name=getattr(func, "__qualname__", repr(func)))
    return config


def with_retry(
    func: Callable[..., T | Awaitable[T]],
    config: RetryConfig | None = None,
    *,
    retry_when: RetryCondition | None = None,
    callbacks: CallbackConfig | None = None,
    **overrides: Any,
) -> Callable[..., Awaitable[T]]:
    """Wrap a callable so every call goes through the retry executor.

    The wrapped callable is re-invoked with the original positional and
    keyword arguments on every attempt. When ``func`` is defined in a class
    body, the receiver is part of those arguments, so the adapted function
    works as a method. ``func`` may be a coroutine function or a plain
    function.

    When the configuration has no ``operation_name``, the qualified name of
    ``func`` is used.

    Args:
        func: The function to wrap.
        config: The retry policy.
        retry_when: The retry condition, when ``config`` is not given.
        callbacks: Optional lifecycle callbacks shared by every call.
        **overrides: Values for the other ``RetryConfig`` fields.

    Returns:
        A coroutine function with the signature of ``func``. The resolved
        configuration is available as its ``__retry_config__`` attribute.

    Raises:
        ValueError: If neither ``config`` nor ``retry_when`` is given.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import with_retry
        >>> from aretry.conditions import on_any_error
        >>> attempts = []
        >>> def parse(text: str) -> int:
        ...     attempts.append(text)
        ...     return int(text)
        ...
        >>> safe_parse = with_retry(parse, retry_when=on_any_error, max_retries=2)
        >>> asyncio.run(safe_parse("12"))
        12
        >>> safe_parse.__retry_config__.operation_name
        'parse'

        ```
    """
    resolved = _resolve_config(func, config, retry_when, overrides)
    executor = RetryExecutor(resolved, callbacks)

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        return await executor.execute(functools.partial(func, *args, **kwargs))

    wrapper.__retry_config__ = resolved  # type: ignore[attr-defined]
    return wrapper


def retry(
    config: RetryConfig | None = None,
    *,
    retry_when: RetryCondition | None = None,
    callbacks: CallbackConfig | None = None,
    **overrides: Any,
) -> Callable[[Callable[..., T | Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorator form of ``with_retry``.

    Args:
        config: The retry policy.
        retry_when: The retry condition, when ``config`` is not given.
        callbacks: Optional lifecycle callbacks.
        **overrides: Values for the other ``RetryConfig`` fields.

    Returns:
        A decorator.

    Example:
        ```pycon
        >>> from aretry import delay, retry
        >>> from aretry.conditions import on_any_error
        >>> @retry(retry_when=on_any_error, max_retries=3, delay=delay.linear(100))
        ... async def fetch(url: str) -> bytes: ...
        ...
        >>> fetch.__retry_config__.max_retries
        3

        ```
    """

    def decorator(func: Callable[..., T | Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        return with_retry(func, config, retry_when=retry_when, callbacks=callbacks, **overrides)

    return decorator
