r"""Retry configuration dataclass and defaults.

This module provides the immutable ``RetryConfig`` describing one retry
policy, the default constants, and ``default_config`` which documents how
a configuration is built when only the retry condition is known.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_THROW_EXHAUSTION_ERROR",
    "RetryConfig",
    "default_config",
    "resolve_config",
]

from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any

from aretry.delay.constant import NoDelay
from aretry.utils.validation import validate_retry_params

if TYPE_CHECKING:
    from aretry.conditions import RetryCondition
    from aretry.delay.base import DelayFunc

# Default maximum number of retries after the initial attempt
# Total attempts = max_retries + 1, so the default runs the operation once
DEFAULT_MAX_RETRIES = 0

# By default exhaustion is silent: the last result is returned or the last
# error is re-raised as the operation produced it
DEFAULT_THROW_EXHAUSTION_ERROR = False


@dataclass(frozen=True)
class RetryConfig:
    """Configuration of one retry policy.

    A configuration is read-only for the duration of an execution and
    carries no state between executions, so the same instance can be
    shared by concurrent calls.

    Args:
        retry_when: Predicate ``(result, error) -> bool`` evaluated after
            every attempt. Returning ``True`` asks for another attempt.
        max_retries: Number of retries beyond the initial attempt.
            Must be >= 0.
        delay: Function ``(attempts, last_error) -> milliseconds`` giving
            the wait before each retry. Defaults to no delay.
        throw_exhaustion_error: Whether to raise ``RetryExhaustedError`` when
            the bound is reached while ``retry_when`` still asks for a retry.
        operation_name: Optional label used in log records and error
            messages. Has no effect on behavior.

    Example:
        ```pycon
        >>> from aretry import delay
        >>> from aretry.conditions import on_any_error
        >>> from aretry.config import RetryConfig
        >>> config = RetryConfig(retry_when=on_any_error, max_retries=3, delay=delay.linear(100))
        >>> config.max_retries
        3
        >>> config.merge(max_retries=5).max_retries
        5
        >>> config.max_retries  # Original unchanged
        3

        ```
    """

    retry_when: RetryCondition
    max_retries: int = DEFAULT_MAX_RETRIES
    delay: DelayFunc = field(default_factory=NoDelay)
    throw_exhaustion_error: bool = DEFAULT_THROW_EXHAUSTION_ERROR
    operation_name: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            TypeError: If a parameter has the wrong type.
            ValueError: If max_retries is negative.
        """
        # None means no delay, as with merge() and the keyword overrides
        if self.delay is None:
            object.__setattr__(self, "delay", NoDelay())
        validate_retry_params(
            max_retries=self.max_retries,
            retry_when=self.retry_when,
            delay=self.delay,
        )

    @property
    def max_attempts(self) -> int:
        r"""The maximum number of times the operation can be invoked."""
        return self.max_retries + 1

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with the given parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        if not filtered_overrides:
            return self
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary.

        Returns:
            A dictionary with one entry per configuration field.

        Example:
            ```pycon
            >>> from aretry.conditions import always
            >>> from aretry.config import RetryConfig
            >>> sorted(RetryConfig(retry_when=always).to_dict())
            ['delay', 'max_retries', 'operation_name', 'retry_when', 'throw_exhaustion_error']

            ```
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}


def default_config(retry_when: RetryCondition, **overrides: Any) -> RetryConfig:
    """Build a configuration from the defaults.

    Unless overridden, the policy makes ``DEFAULT_MAX_RETRIES`` (0)
    retries, never waits between attempts, does not raise
    ``RetryExhaustedError`` and has no operation name.

    Args:
        retry_when: The retry condition.
        **overrides: Values for the other ``RetryConfig`` fields. ``None``
            values are ignored.

    Returns:
        The configuration.

    Example:
        ```pycon
        >>> from aretry.conditions import on_any_error
        >>> from aretry.config import default_config
        >>> config = default_config(on_any_error)
        >>> config.max_retries, config.throw_exhaustion_error
        (0, False)
        >>> default_config(on_any_error, max_retries=2).max_retries
        2

        ```
    """
    return RetryConfig(retry_when=retry_when).merge(**overrides)


def resolve_config(
    config: RetryConfig | None = None,
    retry_when: RetryCondition | None = None,
    **overrides: Any,
) -> RetryConfig:
    """Resolve the configuration of a call from a config and/or overrides.

    Args:
        config: A full configuration. When given, the non-None overrides
            (including ``retry_when``) replace its fields.
        retry_when: The retry condition, required when ``config`` is None.
        **overrides: Values for the other ``RetryConfig`` fields.

    Returns:
        The configuration.

    Raises:
        ValueError: If neither ``config`` nor ``retry_when`` is given.
    """
    if config is None:
        if retry_when is None:
            msg = "either a config or a retry_when condition is required"
            raise ValueError(msg)
        return default_config(retry_when, **overrides)
    return config.merge(retry_when=retry_when, **overrides)
