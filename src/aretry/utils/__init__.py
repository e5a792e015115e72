r"""Utility functions for the retry executor.

This package contains the helpers shared by the executor: parameter
validation, delay clamping and suspension, and structured logging.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "calculate_delay_ms",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
    "sleep_ms",
    "validate_retry_params",
]

from aretry.utils.sleep import calculate_delay_ms, sleep_ms
from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
from aretry.utils.validation import validate_retry_params
