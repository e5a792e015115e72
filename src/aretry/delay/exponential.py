r"""Exponential delay strategy."""

from __future__ import annotations

__all__ = ["ExponentialDelay"]

from aretry.delay.base import BaseDelayStrategy, check_delay_params


class ExponentialDelay(BaseDelayStrategy):
    """Exponential delay strategy.

    Calculates delay as: base_delay * (2 ** (attempts - 1)), with optional
    max_delay cap. The first retry waits exactly ``base_delay``.

    Args:
        base_delay: The base delay in milliseconds.
        max_delay: Optional maximum delay cap in milliseconds. Setting a cap
            is recommended since the delay doubles on every retry.

    Example:
        ```pycon
        >>> from aretry.delay import ExponentialDelay
        >>> strategy = ExponentialDelay(base_delay=300)
        >>> strategy.calculate(1)
        300
        >>> strategy.calculate(2)
        600
        >>> strategy.calculate(3)
        1200
        >>> strategy = ExponentialDelay(base_delay=1000, max_delay=5000)
        >>> strategy.calculate(10)  # Would be 512000, but capped
        5000

        ```
    """

    def __init__(self, base_delay: int = 300, max_delay: int | None = None) -> None:
        check_delay_params(base_delay, max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def calculate(self, attempts: int, error: BaseException | None = None) -> int:  # noqa: ARG002
        """Calculate exponential delay.

        Args:
            attempts: The number of retry-worthy attempts so far (1-indexed).
            error: The last error (unused).

        Returns:
            The calculated delay: base_delay * (2 ** (attempts - 1)),
            capped at max_delay if set.
        """
        delay = self.base_delay * (2 ** max(attempts - 1, 0))
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
