r"""Abstract base class for delay strategies."""

from __future__ import annotations

__all__ = ["BaseDelayStrategy", "DelayFunc"]

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Union

# Any callable ``(attempts, last_error) -> milliseconds`` is a valid delay.
DelayFunc = Callable[[int, Union[BaseException, None]], Union[int, float]]


class BaseDelayStrategy(ABC):
    """Abstract base class for delay strategies.

    A delay strategy determines how many milliseconds to wait before the
    next attempt, given the number of retry-worthy attempts so far.
    Strategies hold no per-call state, so one instance can be shared by
    any number of concurrent executions.
    """

    @abstractmethod
    def calculate(self, attempts: int, error: BaseException | None = None) -> int:
        """Calculate the delay before the next attempt.

        Args:
            attempts: The number of retry-worthy attempts so far (1-indexed).
                For example, attempts=1 is the delay before the first retry.
            error: The error raised by the last attempt, if any. Ignored by
                all the built-in strategies.

        Returns:
            The delay in milliseconds.
        """

    def __call__(self, attempts: int, error: BaseException | None = None) -> int:
        return self.calculate(attempts, error)

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{self.__class__.__qualname__}({args})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), tuple(vars(self).items())))


def check_delay_params(base_delay: int | float, max_delay: int | float | None = None) -> None:
    r"""Validate the parameters shared by the built-in strategies.

    Raises:
        ValueError: If base_delay is negative or max_delay is non-positive.
    """
    if base_delay < 0:
        msg = f"base_delay must be non-negative, got {base_delay}"
        raise ValueError(msg)
    if max_delay is not None and max_delay <= 0:
        msg = f"max_delay must be positive if specified, got {max_delay}"
        raise ValueError(msg)
