r"""aretry - Asynchronous retry execution with pluggable conditions and
delays.

This package re-invokes an operation until a retry condition is satisfied
or an attempt bound is exhausted, waiting between attempts according to a
delay strategy. The wait suspends the current task only, so other
coroutines keep running.

Key Features:
    - Retry conditions over ``(result, error)``: on any error, on ``None``
      results, always, on specific error types, or any custom predicate
    - Delay strategies in milliseconds: none, constant, linear, quadratic
      (potential), exponential, or any custom function
    - Strict attempt bound: at most ``max_retries + 1`` invocations
    - Silent exhaustion by default, or an opt-in ``RetryExhaustedError``
      chaining the last error
    - ``with_retry``/``retry`` to route function and method calls through
      the executor
    - Callback system and structured logging for observability

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import delay, execute
    >>> from aretry.conditions import on_any_error
    >>> async def fetch() -> str:
    ...     return "payload"
    ...
    >>> asyncio.run(
    ...     execute(fetch, retry_when=on_any_error, max_retries=3, delay=delay.linear(100))
    ... )
    'payload'

    ```
"""

from __future__ import annotations

__all__ = [
    "AttemptOutcome",
    "CallbackConfig",
    "DEFAULT_MAX_RETRIES",
    "RetryConfig",
    "RetryError",
    "RetryExecutor",
    "RetryExhaustedError",
    "__version__",
    "conditions",
    "default_config",
    "delay",
    "execute",
    "retry",
    "with_retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry import conditions, delay
from aretry.adapter import retry, with_retry
from aretry.callbacks import CallbackConfig
from aretry.config import DEFAULT_MAX_RETRIES, RetryConfig, default_config
from aretry.exceptions import RetryError, RetryExhaustedError
from aretry.executor import RetryExecutor, execute
from aretry.outcome import AttemptOutcome

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
