r"""Shared operations used by the executor and adapter tests."""

from __future__ import annotations

from typing import Any


class FlakyOperation:
    """Async operation failing a fixed number of times before returning.

    Args:
        failures: Number of initial calls that raise ``error``.
        result: The value returned once the failures are spent.
        error: The error raised by the failing calls.
    """

    def __init__(self, failures: int, result: Any = True, error: Exception | None = None) -> None:
        self.failures = failures
        self.result = result
        self.error = error if error is not None else RuntimeError("x")
        self.calls = 0

    async def __call__(self) -> Any:
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error
        return self.result


class SequenceOperation:
    """Sync operation returning the given values one per call."""

    def __init__(self, *values: Any) -> None:
        self.values = list(values)
        self.calls = 0

    def __call__(self) -> Any:
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value
