r"""Structured logging utilities for machine-readable retry logs.

The executor logs every retry decision with structured fields
(``operation``, ``attempt``, ``max_retries``, ``delay_ms``). With the
default formatter these fields are only visible as record attributes;
``StructuredFormatter`` renders them, and the correlation ID of the
current context, as one JSON object per line.

The structured output is opt-in:

```python
import logging

from aretry.utils.structured_logging import StructuredFormatter

handler = logging.StreamHandler()
handler.setFormatter(StructuredFormatter())

logger = logging.getLogger("aretry")
logger.addHandler(handler)
logger.setLevel(logging.DEBUG)
```

Correlation IDs tie the retries of one logical call together:

```python
from aretry.utils.structured_logging import clear_correlation_id, set_correlation_id

set_correlation_id("job-42")
try:
    await execute(fetch, retry_when=on_any_error, max_retries=3)
finally:
    clear_correlation_id()
```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import Any

# Context variable, so each asyncio task sees its own correlation ID
_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_correlation_id", default=None
)

# Attributes every LogRecord carries; anything else came from ``extra``
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Returns:
        The current correlation ID, or None if not set.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("job-1")
        >>> get_correlation_id()
        'job-1'
        >>> clear_correlation_id()

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The correlation ID to set (e.g., job ID, trace ID).
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    r"""Clear the correlation ID for the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record is rendered as a single JSON object with the fields
    ``timestamp`` (ISO 8601, UTC), ``level``, ``logger``, ``message``,
    ``module``, ``function`` and ``line``, followed by the correlation ID
    (if set), the formatted exception (if any) and every field passed
    through ``extra``. Values that are not JSON serializable are rendered
    with ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured_formatter")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("retrying", extra={"attempt": 2})
        >>> json.loads(stream.getvalue())["attempt"]
        2

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data.update(
            {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}
        )
        return json.dumps(log_data, default=repr)

    def formatTime(  # noqa: N802
        self,
        record: logging.LogRecord,
        datefmt: str | None = None,  # noqa: ARG002
    ) -> str:
        r"""Format the record timestamp as ISO 8601 with millisecond
        precision."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    Fields whose value is ``None`` are dropped so optional labels such as
    ``operation`` do not clutter the output.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.DEBUG).
        message: Log message.
        **extra: Additional structured fields to include in the record.

    Example:
        ```pycon
        >>> import logging
        >>> from aretry.utils.structured_logging import log_structured
        >>> logger = logging.getLogger("doctest_log_structured")
        >>> log_structured(logger, logging.DEBUG, "attempt failed", attempt=1, operation=None)

        ```
    """
    if not logger.isEnabledFor(level):
        return
    fields = {key: value for key, value in extra.items() if value is not None}
    logger.log(level, message, extra=fields)
