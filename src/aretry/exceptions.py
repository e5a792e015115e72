r"""Exceptions raised by the retry executor."""

from __future__ import annotations

__all__ = ["RetryError", "RetryExhaustedError"]

import functools
from typing import Any


class RetryError(Exception):
    r"""Base class of the errors raised by ``aretry`` itself."""


class RetryExhaustedError(RetryError):
    """Raised when the attempt bound is reached and the retry condition
    still asks for another attempt.

    It is only raised when the configuration opted in with
    ``throw_exhaustion_error=True``. Otherwise the executor returns the last
    result or re-raises the last error unchanged.

    Args:
        message: Human-readable description of the exhaustion.
        attempts: The total number of times the operation was invoked.
        operation_name: Optional label of the operation.
        cause: The error raised by the last attempt, if any.
        last_result: The value returned by the last attempt when it did not
            raise.

    Attributes:
        message: Human-readable description of the exhaustion.
        attempts: The total number of times the operation was invoked.
        operation_name: Optional label of the operation.
        cause: The error raised by the last attempt, or ``None`` when the
            last attempt returned a value that still satisfied the retry
            condition.
        last_result: The value returned by the last attempt.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryExhaustedError
        >>> error = RetryExhaustedError(
        ...     "fetch failed after 4 attempts", attempts=4, cause=ValueError("x")
        ... )
        >>> error.attempts
        4
        >>> error.cause
        ValueError('x')

        ```
    """

    def __init__(
        self,
        message: str,
        *,
        attempts: int,
        operation_name: str | None = None,
        cause: BaseException | None = None,
        last_result: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.attempts = attempts
        self.operation_name = operation_name
        self.cause = cause
        self.last_result = last_result
        if cause is not None:
            self.__cause__ = cause

    def __reduce__(self) -> tuple[Any, ...]:
        # The keyword-only arguments are not part of ``args``
        rebuild = functools.partial(
            self.__class__,
            attempts=self.attempts,
            operation_name=self.operation_name,
            cause=self.cause,
            last_result=self.last_result,
        )
        return rebuild, (self.message,), self.__dict__

    @classmethod
    def build(
        cls,
        *,
        attempts: int,
        operation_name: str | None = None,
        cause: BaseException | None = None,
        last_result: Any = None,
    ) -> RetryExhaustedError:
        r"""Create the error with the standard message.

        Example:
            ```pycon
            >>> from aretry.exceptions import RetryExhaustedError
            >>> RetryExhaustedError.build(attempts=3, operation_name="fetch").message
            'fetch: retries exhausted after 3 attempts'

            ```
        """
        label = operation_name or "operation"
        message = f"{label}: retries exhausted after {attempts} attempts"
        if cause is not None:
            message = f"{message}: {cause!r}"
        return cls(
            message,
            attempts=attempts,
            operation_name=operation_name,
            cause=cause,
            last_result=last_result,
        )
