r"""Retry conditions for operations performing HTTP calls with httpx.

This module requires the ``http`` extra (``pip install aretry[http]``).

Example:
    ```pycon
    >>> import httpx
    >>> from aretry.contrib.httpx_conditions import on_retryable_http
    >>> on_retryable_http(httpx.Response(503), None)
    True
    >>> on_retryable_http(httpx.Response(404), None)
    False
    >>> on_retryable_http(None, httpx.ConnectTimeout("timed out"))
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "RETRY_STATUS_CODES",
    "on_retryable_http",
    "on_status_codes",
    "on_transport_error",
]

from typing import TYPE_CHECKING, Any

import httpx

from aretry.conditions import any_of

if TYPE_CHECKING:
    from aretry.conditions import RetryCondition

# HTTP status codes that usually indicate a transient failure
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def on_status_codes(*status_codes: int) -> RetryCondition:
    """Create a condition that retries responses with the given status
    codes.

    Args:
        *status_codes: The retryable status codes. Defaults to
            ``RETRY_STATUS_CODES``.

    Returns:
        A retry condition. Results that are not ``httpx.Response`` never
        trigger a retry.
    """
    codes = frozenset(status_codes or RETRY_STATUS_CODES)

    def condition(result: Any, error: BaseException | None) -> bool:
        return error is None and isinstance(result, httpx.Response) and result.status_code in codes

    return condition


def on_transport_error(result: Any, error: BaseException | None) -> bool:  # noqa: ARG001
    r"""Retry on timeouts and network errors raised by httpx."""
    return isinstance(error, (httpx.TimeoutException, httpx.TransportError))


on_retryable_http: RetryCondition = any_of(on_status_codes(), on_transport_error)
