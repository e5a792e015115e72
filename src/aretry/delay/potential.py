r"""Quadratic ("potential") delay strategy."""

from __future__ import annotations

__all__ = ["PotentialDelay"]

from aretry.delay.base import BaseDelayStrategy, check_delay_params


class PotentialDelay(BaseDelayStrategy):
    """Quadratic delay strategy.

    Calculates delay as: base_delay * attempts ** 2, with optional
    max_delay cap. Grows faster than ``LinearDelay`` but slower than
    ``ExponentialDelay`` for the first handful of retries.

    Args:
        base_delay: The base delay in milliseconds.
        max_delay: Optional maximum delay cap in milliseconds.

    Example:
        ```pycon
        >>> from aretry.delay import PotentialDelay
        >>> strategy = PotentialDelay(base_delay=10)
        >>> strategy.calculate(1)
        10
        >>> strategy.calculate(2)
        40
        >>> strategy.calculate(3)
        90

        ```
    """

    def __init__(self, base_delay: int = 1000, max_delay: int | None = None) -> None:
        check_delay_params(base_delay, max_delay)
        self.base_delay = base_delay
        self.max_delay = max_delay

    def calculate(self, attempts: int, error: BaseException | None = None) -> int:  # noqa: ARG002
        delay = self.base_delay * attempts * attempts
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
