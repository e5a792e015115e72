r"""Delay calculation and suspension utilities.

This module provides the helpers used by the executor to turn a delay
strategy's output into a non-negative wait, and to suspend the current
task without blocking the event loop.
"""

from __future__ import annotations

__all__ = ["calculate_delay_ms", "sleep_ms"]

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.delay.base import DelayFunc

logger: logging.Logger = logging.getLogger(__name__)


def calculate_delay_ms(
    delay: DelayFunc,
    attempts: int,
    error: BaseException | None = None,
) -> float:
    """Calculate the wait before the next attempt.

    Negative values returned by custom strategies are clamped to zero.

    Args:
        delay: The delay strategy.
        attempts: The number of retry-worthy attempts so far (1-indexed).
        error: The error raised by the last attempt, if any.

    Returns:
        The delay in milliseconds, never negative.

    Example:
        ```pycon
        >>> from aretry.delay import linear
        >>> from aretry.utils.sleep import calculate_delay_ms
        >>> calculate_delay_ms(linear(100), attempts=2)
        200
        >>> calculate_delay_ms(lambda attempts, error: -5, attempts=1)
        0

        ```
    """
    delay_ms = delay(attempts, error)
    if delay_ms < 0:
        logger.debug(f"Clamping negative delay {delay_ms}ms to 0ms")
        return 0
    return delay_ms


async def sleep_ms(delay_ms: float) -> None:
    """Suspend the current task for ``delay_ms`` milliseconds.

    A zero delay returns immediately without suspending.

    Args:
        delay_ms: The delay in milliseconds.
    """
    if delay_ms <= 0:
        return
    logger.debug(f"Waiting {delay_ms}ms before retry")
    await asyncio.sleep(delay_ms / 1000)
