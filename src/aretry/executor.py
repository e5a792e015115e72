r"""Asynchronous retry executor.

This module provides the RetryExecutor class that invokes an operation
until its retry condition is satisfied or the attempt bound is reached,
and the ``execute`` shortcut.
"""

from __future__ import annotations

__all__ = ["RetryExecutor", "execute"]

import inspect
import logging
import time
from typing import TYPE_CHECKING, Any

from aretry.callbacks import CallbackManager
from aretry.config import RetryConfig, resolve_config
from aretry.exceptions import RetryExhaustedError
from aretry.outcome import AttemptOutcome
from aretry.utils.sleep import calculate_delay_ms, sleep_ms
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.callbacks import CallbackConfig
    from aretry.conditions import RetryCondition

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes an operation with automatic retry logic.

    The executor is stateless between calls: every ``execute`` call owns
    its attempt counter and outcome, so one executor can serve any number
    of concurrent executions.

    The loop suspends at exactly two points, while awaiting the operation
    and while waiting out the delay. Attempts never overlap: attempt n+1
    starts only after attempt n has resolved and its delay has elapsed.

    Args:
        config: The retry policy.
        callbacks: Optional lifecycle callbacks.

    Attributes:
        config: The retry policy.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import delay
        >>> from aretry.conditions import on_any_error
        >>> from aretry.config import RetryConfig
        >>> from aretry.executor import RetryExecutor
        >>> calls = []
        >>> async def flaky() -> str:
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("unavailable")
        ...     return "ok"
        ...
        >>> executor = RetryExecutor(
        ...     RetryConfig(retry_when=on_any_error, max_retries=5, delay=delay.constant(1))
        ... )
        >>> asyncio.run(executor.execute(flaky))
        'ok'
        >>> len(calls)
        3

        ```
    """

    def __init__(self, config: RetryConfig, callbacks: CallbackConfig | None = None) -> None:
        self.config = config
        self.callbacks: CallbackManager = CallbackManager(
            callbacks,
            operation_name=config.operation_name,
            max_retries=config.max_retries,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self.config!r})"

    async def execute(self, operation: Callable[[], Any | Awaitable[Any]]) -> Any:
        """Invoke the operation until the retry condition is satisfied.

        The operation is invoked at most ``max_retries + 1`` times. After
        each attempt ``retry_when(result, error)`` is evaluated; when it
        returns ``False`` the call resolves. When it returns ``True`` and
        retries remain, the executor waits ``delay(attempts, last_error)``
        milliseconds and tries again. When it returns ``True`` on the last
        allowable attempt, the bound takes precedence and the call resolves
        as exhausted.

        Args:
            operation: Zero-argument callable returning a value or an
                awaitable. It may raise instead of returning.

        Returns:
            The result of the last attempt.

        Raises:
            RetryExhaustedError: If the bound was reached while
                ``retry_when`` still asked for a retry and the configuration
                set ``throw_exhaustion_error``.
            Exception: The error raised by the last attempt, unchanged,
                otherwise.
        """
        config = self.config
        label = config.operation_name or "operation"
        start_time = time.monotonic()
        attempts = 0

        while True:
            outcome = await self._attempt(operation, attempts + 1)
            retry = bool(config.retry_when(outcome.result, outcome.error))
            self.callbacks.on_attempt(outcome, retry)

            if not retry:
                log_structured(
                    logger,
                    logging.DEBUG,
                    f"{label}: resolved on attempt {outcome.attempt} ({outcome.status.value})",
                    operation=config.operation_name,
                    attempt=outcome.attempt,
                    max_retries=config.max_retries,
                )
                self.callbacks.on_resolved(outcome, start_time)
                return outcome.resolve()

            if attempts >= config.max_retries:
                return self._exhausted(outcome, start_time)

            attempts += 1
            delay_ms = calculate_delay_ms(config.delay, attempts, outcome.error)
            log_structured(
                logger,
                logging.DEBUG,
                f"{label}: attempt {outcome.attempt}/{config.max_attempts} "
                f"({outcome.status.value}) will be retried in {delay_ms}ms",
                operation=config.operation_name,
                attempt=outcome.attempt,
                max_retries=config.max_retries,
                delay_ms=delay_ms,
            )
            self.callbacks.on_retry(attempts, delay_ms, outcome)
            await sleep_ms(delay_ms)

    async def _attempt(
        self, operation: Callable[[], Any | Awaitable[Any]], attempt: int
    ) -> AttemptOutcome:
        try:
            result = operation()
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:  # noqa: BLE001
            return AttemptOutcome.from_error(attempt, exc)
        return AttemptOutcome.from_result(attempt, result)

    def _exhausted(self, outcome: AttemptOutcome, start_time: float) -> Any:
        config = self.config
        log_structured(
            logger,
            logging.WARNING,
            f"{config.operation_name or 'operation'}: retries exhausted after "
            f"{outcome.attempt} attempts",
            operation=config.operation_name,
            attempt=outcome.attempt,
            max_retries=config.max_retries,
        )
        self.callbacks.on_exhausted(outcome, start_time)
        if config.throw_exhaustion_error:
            raise RetryExhaustedError.build(
                attempts=outcome.attempt,
                operation_name=config.operation_name,
                cause=outcome.error,
                last_result=outcome.result,
            ) from outcome.error
        return outcome.resolve()


async def execute(
    operation: Callable[[], Any | Awaitable[Any]],
    config: RetryConfig | None = None,
    *,
    retry_when: RetryCondition | None = None,
    callbacks: CallbackConfig | None = None,
    **overrides: Any,
) -> Any:
    """Run an operation with retry logic.

    Either pass a full ``config``, or a ``retry_when`` condition plus any
    ``RetryConfig`` field as keyword argument. Keyword arguments override
    the matching fields of ``config`` when both are given.

    Args:
        operation: Zero-argument callable returning a value or an awaitable.
        config: The retry policy.
        retry_when: The retry condition, when ``config`` is not given.
        callbacks: Optional lifecycle callbacks.
        **overrides: Values for the other ``RetryConfig`` fields.

    Returns:
        The result of the last attempt.

    Raises:
        ValueError: If neither ``config`` nor ``retry_when`` is given.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import execute
        >>> from aretry.conditions import on_null_result
        >>> asyncio.run(execute(lambda: 42, retry_when=on_null_result, max_retries=3))
        42

        ```
    """
    config = resolve_config(config, retry_when, **overrides)
    return await RetryExecutor(config, callbacks).execute(operation)
