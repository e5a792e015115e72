r"""Delay strategies for waiting between retry attempts.

This package provides the built-in delay strategies (none, constant,
linear, potential/quadratic and exponential) together with short factory
functions. Every strategy maps ``(attempts, last_error)`` to a delay in
milliseconds, and any plain function with that signature can be used in
place of a built-in one.

Example:
    ```pycon
    >>> from aretry import delay
    >>> delay.none()(3)
    0
    >>> delay.constant(10)(3)
    10
    >>> delay.linear(10)(3)
    30
    >>> delay.potential(10)(3)
    90

    ```
"""

from __future__ import annotations

__all__ = [
    "BaseDelayStrategy",
    "ConstantDelay",
    "DelayFunc",
    "ExponentialDelay",
    "LinearDelay",
    "NoDelay",
    "PotentialDelay",
    "constant",
    "exponential",
    "linear",
    "none",
    "potential",
]

from aretry.delay.base import BaseDelayStrategy, DelayFunc
from aretry.delay.constant import ConstantDelay, NoDelay
from aretry.delay.exponential import ExponentialDelay
from aretry.delay.linear import LinearDelay
from aretry.delay.potential import PotentialDelay


def none() -> NoDelay:
    r"""Return a strategy that never waits."""
    return NoDelay()


def constant(delay: int) -> ConstantDelay:
    r"""Return a strategy that always waits ``delay`` milliseconds."""
    return ConstantDelay(delay)


def linear(base_delay: int, max_delay: int | None = None) -> LinearDelay:
    r"""Return a strategy that waits ``base_delay * attempts`` milliseconds."""
    return LinearDelay(base_delay, max_delay=max_delay)


def potential(base_delay: int, max_delay: int | None = None) -> PotentialDelay:
    r"""Return a strategy that waits ``base_delay * attempts ** 2`` milliseconds."""
    return PotentialDelay(base_delay, max_delay=max_delay)


def exponential(base_delay: int, max_delay: int | None = None) -> ExponentialDelay:
    r"""Return a strategy that doubles the wait on every retry."""
    return ExponentialDelay(base_delay, max_delay=max_delay)
