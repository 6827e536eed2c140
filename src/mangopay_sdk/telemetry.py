"""Record of the most recent request/response exchange.

The API clients keep a single :class:`ExchangeRecord` in ``last_request_info``
and replace it after every call, successful or not. The slot is shared by all
calls made through one client: with concurrent calls the last one to finish
wins, so callers relying on it must not issue calls concurrently.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

RATE_LIMIT_LIMIT_HEADER = "X-RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"


@dataclass(frozen=True)
class ExchangeRecord:
    """Snapshot of one exchange.

    Attributes:
        request: The request as sent
        response: The response, or None when the transport failed
        rate_limit_limit: Calls allowed in the current window
        rate_limit_remaining: Calls left in the current window
        rate_limit_reset: Time until the window resets
    """

    request: Optional[httpx.Request] = None
    response: Optional[httpx.Response] = None
    rate_limit_limit: Optional[str] = None
    rate_limit_remaining: Optional[str] = None
    rate_limit_reset: Optional[str] = None


def _exact_header(response: httpx.Response, name: str) -> Optional[str]:
    # httpx.Headers lookups ignore case; the raw list keeps names as received.
    wanted = name.encode("latin-1")
    for raw_name, raw_value in response.headers.raw:
        if raw_name == wanted:
            return raw_value.decode("latin-1")
    return None


def record_exchange(
    request: Optional[httpx.Request],
    response: Optional[httpx.Response],
) -> ExchangeRecord:
    """Build the record for an exchange, reading the rate-limit headers."""
    if response is None:
        return ExchangeRecord(request=request)

    return ExchangeRecord(
        request=request,
        response=response,
        rate_limit_limit=_exact_header(response, RATE_LIMIT_LIMIT_HEADER),
        rate_limit_remaining=_exact_header(response, RATE_LIMIT_REMAINING_HEADER),
        rate_limit_reset=_exact_header(response, RATE_LIMIT_RESET_HEADER),
    )
