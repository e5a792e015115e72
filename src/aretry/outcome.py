r"""Record of a single attempt."""

from __future__ import annotations

__all__ = ["AttemptOutcome", "AttemptStatus"]

from dataclasses import dataclass
from enum import Enum
from typing import Any


class AttemptStatus(str, Enum):
    r"""Whether an attempt returned a value or raised an error."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class AttemptOutcome:
    """Outcome of one invocation of the operation.

    Exactly one of ``result``/``error`` is meaningful: an outcome holding
    an error always has ``result=None``. Outcomes only live for the
    duration of one execution.

    Attributes:
        attempt: The attempt number (1-indexed). The initial attempt is 1.
        result: The value returned by the operation.
        error: The error raised by the operation, if any.

    Example:
        ```pycon
        >>> from aretry.outcome import AttemptOutcome
        >>> outcome = AttemptOutcome.from_result(1, 42)
        >>> outcome.status.value
        'success'
        >>> outcome.resolve()
        42
        >>> AttemptOutcome.from_error(2, ValueError("x")).failed
        True

        ```
    """

    attempt: int
    result: Any = None
    error: BaseException | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.result is not None:
            msg = "an attempt outcome cannot hold both a result and an error"
            raise ValueError(msg)

    @classmethod
    def from_result(cls, attempt: int, result: Any) -> AttemptOutcome:
        return cls(attempt=attempt, result=result)

    @classmethod
    def from_error(cls, attempt: int, error: BaseException) -> AttemptOutcome:
        return cls(attempt=attempt, error=error)

    @property
    def status(self) -> AttemptStatus:
        return AttemptStatus.FAILURE if self.error is not None else AttemptStatus.SUCCESS

    @property
    def failed(self) -> bool:
        return self.error is not None

    def resolve(self) -> Any:
        """Return the result, or raise the error.

        Raises:
            BaseException: The error raised by the attempt, if any.
        """
        if self.error is not None:
            raise self.error
        return self.result
