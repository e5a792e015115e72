r"""Callback types and data structures for observability.

This module lets users hook into the retry lifecycle for logging,
metrics or alerting. Four hooks are available:

- on_attempt: Called after each attempt resolves
- on_retry: Called before waiting for the next attempt
- on_resolved: Called when the retry condition stops the loop before
  exhaustion, whether the last attempt returned or raised
- on_exhausted: Called when the attempt bound is reached while the retry
  condition still asks for another attempt

Callbacks are plain synchronous callables and should be fast. An error
raised by a callback propagates to the caller of the executor.

Example:
    ```pycon
    >>> from aretry.callbacks import CallbackConfig, RetryInfo
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"retry {info.attempt}/{info.max_retries} in {info.delay_ms}ms")
    ...
    >>> callbacks = CallbackConfig(on_retry=log_retry)

    ```
"""

from __future__ import annotations

__all__ = [
    "AttemptInfo",
    "CallbackConfig",
    "CallbackManager",
    "ResolutionInfo",
    "RetryInfo",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.outcome import AttemptOutcome


@dataclass(frozen=True)
class AttemptInfo:
    """Information passed to on_attempt callback.

    Attributes:
        operation_name: The label of the operation, if any.
        attempt: The attempt number (1-indexed).
        max_retries: Maximum number of retries configured.
        outcome: The outcome of the attempt.
        retry: Whether the retry condition asked for another attempt.
    """

    operation_name: str | None
    attempt: int
    max_retries: int
    outcome: AttemptOutcome
    retry: bool


@dataclass(frozen=True)
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        operation_name: The label of the operation, if any.
        attempt: The number of the upcoming retry (1-indexed). The first
            retry is 1.
        max_retries: Maximum number of retries configured.
        delay_ms: The wait in milliseconds before the retry.
        error: The error that triggered the retry (if any).
        result: The result that triggered the retry (if no error).
    """

    operation_name: str | None
    attempt: int
    max_retries: int
    delay_ms: float
    error: BaseException | None
    result: Any


@dataclass(frozen=True)
class ResolutionInfo:
    """Information passed to on_resolved and on_exhausted callbacks.

    Attributes:
        operation_name: The label of the operation, if any.
        attempts: The total number of invocations of the operation.
        max_retries: Maximum number of retries configured.
        outcome: The outcome of the last attempt.
        total_time: Total time spent on all attempts including delays
            (seconds).
    """

    operation_name: str | None
    attempts: int
    max_retries: int
    outcome: AttemptOutcome
    total_time: float


@dataclass
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_attempt: Optional callback invoked after each attempt.
        on_retry: Optional callback invoked before each retry.
        on_resolved: Optional callback invoked when an execution resolves
            without exhausting the attempt bound.
        on_exhausted: Optional callback invoked when the attempt bound is
            exhausted.
    """

    on_attempt: Callable[[AttemptInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_resolved: Callable[[ResolutionInfo], None] | None = None
    on_exhausted: Callable[[ResolutionInfo], None] | None = None


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Args:
        callbacks: Callback configuration. Defaults to no callbacks.
        operation_name: The label forwarded to every info object.
        max_retries: Maximum number of retries forwarded to every info
            object.
    """

    def __init__(
        self,
        callbacks: CallbackConfig | None = None,
        operation_name: str | None = None,
        max_retries: int = 0,
    ) -> None:
        self.callbacks = callbacks if callbacks is not None else CallbackConfig()
        self.operation_name = operation_name
        self.max_retries = max_retries

    def on_attempt(self, outcome: AttemptOutcome, retry: bool) -> None:
        if self.callbacks.on_attempt is not None:
            self.callbacks.on_attempt(
                AttemptInfo(
                    operation_name=self.operation_name,
                    attempt=outcome.attempt,
                    max_retries=self.max_retries,
                    outcome=outcome,
                    retry=retry,
                )
            )

    def on_retry(self, attempt: int, delay_ms: float, outcome: AttemptOutcome) -> None:
        if self.callbacks.on_retry is not None:
            self.callbacks.on_retry(
                RetryInfo(
                    operation_name=self.operation_name,
                    attempt=attempt,
                    max_retries=self.max_retries,
                    delay_ms=delay_ms,
                    error=outcome.error,
                    result=outcome.result,
                )
            )

    def on_resolved(self, outcome: AttemptOutcome, start_time: float) -> None:
        if self.callbacks.on_resolved is not None:
            self.callbacks.on_resolved(self._resolution(outcome, start_time))

    def on_exhausted(self, outcome: AttemptOutcome, start_time: float) -> None:
        if self.callbacks.on_exhausted is not None:
            self.callbacks.on_exhausted(self._resolution(outcome, start_time))

    def _resolution(self, outcome: AttemptOutcome, start_time: float) -> ResolutionInfo:
        return ResolutionInfo(
            operation_name=self.operation_name,
            attempts=outcome.attempt,
            max_retries=self.max_retries,
            outcome=outcome,
            total_time=time.monotonic() - start_time,
        )
