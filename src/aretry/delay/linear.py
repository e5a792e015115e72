r"""Linear delay strategy."""

from __future__ import annotations

__all__ = ["LinearDelay"]

from aretry.delay.base import BaseDelayStrategy, check_delay_params


class LinearDelay(BaseDelayStrategy):
    """Linear delay strategy.

    Calculates delay as: base_delay * attempts, with optional max_delay cap.

    This strategy provides evenly spaced growth of the waiting time, which
    suits operations that recover quickly or need predictable timing.

    Args:
        base_delay: The base delay in milliseconds. The actual delay
            is calculated as base_delay * attempts.
        max_delay: Optional maximum delay cap in milliseconds.

    Example:
        ```pycon
        >>> from aretry.delay import LinearDelay
        >>> strategy = LinearDelay(base_delay=100)
        >>> strategy.calculate(1)  # First retry: 100 * 1
        100
        >>> strategy.calculate(3)  # Third retry: 100 * 3
        300
        >>> # With max_delay cap
        >>> strategy = LinearDelay(base_delay=200, max_delay=500)
        >>> strategy.calculate(6)  # Would be 1200, but capped
        500

        ```
    """

    def __init__(self, base_delay: int = 1000, max_delay: int | None = None) -> None:
        check_delay_params(base_delay, max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def calculate(self, attempts: int, error: BaseException | None = None) -> int:  # noqa: ARG002
        """Calculate linear delay.

        Args:
            attempts: The number of retry-worthy attempts so far (1-indexed).
            error: The last error (unused).

        Returns:
            The calculated delay: base_delay * attempts,
            capped at max_delay if set.
        """
        delay = self.base_delay * attempts
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
