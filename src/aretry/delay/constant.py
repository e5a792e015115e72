r"""Fixed delay strategies."""

from __future__ import annotations

__all__ = ["ConstantDelay", "NoDelay"]

from aretry.delay.base import BaseDelayStrategy, check_delay_params


class NoDelay(BaseDelayStrategy):
    """Delay strategy that never waits.

    This is the default strategy of ``RetryConfig``: retries start as soon
    as the previous attempt has resolved.

    Example:
        ```pycon
        >>> from aretry.delay import NoDelay
        >>> NoDelay().calculate(1)
        0
        >>> NoDelay()(7)
        0

        ```
    """

    def calculate(self, attempts: int, error: BaseException | None = None) -> int:  # noqa: ARG002
        return 0


class ConstantDelay(BaseDelayStrategy):
    """Constant/fixed delay strategy.

    Returns the same delay for every retry, regardless of the attempt number.

    Args:
        delay: The fixed delay in milliseconds to use for every retry.

    Example:
        ```pycon
        >>> from aretry.delay import ConstantDelay
        >>> strategy = ConstantDelay(delay=250)
        >>> strategy.calculate(1)
        250
        >>> strategy.calculate(10)
        250

        ```
    """

    def __init__(self, delay: int = 1000) -> None:
        check_delay_params(delay)
        self.delay = delay

    def calculate(self, attempts: int, error: BaseException | None = None) -> int:  # noqa: ARG002
        """Calculate constant delay.

        Args:
            attempts: The number of retry-worthy attempts so far (unused).
            error: The last error (unused).

        Returns:
            The fixed delay value.
        """
        return self.delay
