r"""Parameter validation utilities for retry configurations.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before a configuration is used by the
executor.
"""

from __future__ import annotations

__all__ = ["validate_retry_params"]

from typing import Any


def validate_retry_params(
    max_retries: int,
    retry_when: Any,
    delay: Any = None,
) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retries after the initial attempt.
            Must be an integer >= 0. A value of 0 means no retries (only the
            initial attempt).
        retry_when: The retry condition. Must be callable.
        delay: The delay strategy. Must be callable if provided.

    Raises:
        TypeError: If max_retries is not an integer, or if retry_when or
            delay are not callable.
        ValueError: If max_retries is negative.

    Example:
        ```pycon
        >>> from aretry.conditions import on_any_error
        >>> from aretry.utils.validation import validate_retry_params
        >>> validate_retry_params(max_retries=3, retry_when=on_any_error)
        >>> validate_retry_params(max_retries=-1, retry_when=on_any_error)  # doctest: +SKIP

        ```
    """
    if isinstance(max_retries, bool) or not isinstance(max_retries, int):
        msg = f"max_retries must be an int, got {type(max_retries).__name__}"
        raise TypeError(msg)
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if not callable(retry_when):
        msg = f"retry_when must be callable, got {retry_when!r}"
        raise TypeError(msg)
    if delay is not None and not callable(delay):
        msg = f"delay must be callable, got {delay!r}"
        raise TypeError(msg)
