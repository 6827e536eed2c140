"""Error models for the MangoPay SDK.

Every failure surfaced by the SDK is one of the classes below. HTTP outcomes are
classified exactly once, by the request executor, right after an exchange:

- 401 raises :class:`AuthenticationError`
- a transport timeout raises :class:`TimeoutError`
- any other non-2xx status raises :class:`ResponseError`

Malformed pagination headers raise :class:`HeaderParseError`.
"""
from __future__ import annotations

import json
from typing import Any, Optional


class MangoPayError(Exception):
    """Base exception for the MangoPay SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "MANGOPAY_ERROR"
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class AuthenticationError(MangoPayError):
    """The API rejected the credentials (HTTP 401).

    ``body`` holds the raw response body exactly as the server sent it.
    """

    def __init__(self, body: str = ""):
        super().__init__(body or "Unauthorized", code="AUTHENTICATION_ERROR")
        self.body = body


class TimeoutError(MangoPayError):
    """The transport gave up waiting for the exchange to complete."""

    def __init__(self, message: str = "Request timed out"):
        super().__init__(message, code="TIMEOUT")


class ResponseError(MangoPayError):
    """Any non-2xx outcome other than 401.

    The status code and the raw body are the only discriminants; validation
    failures, missing resources and rate limiting all land here. A status of
    ``0`` means no HTTP response was received at all.
    """

    def __init__(self, body: str, status_code: int, message: Optional[str] = None):
        super().__init__(
            message or body or f"HTTP {status_code}",
            code="RESPONSE_ERROR",
            details={"status_code": status_code},
        )
        self.body = body
        self.status_code = status_code

    def json(self) -> Any:
        """Decode the body as JSON, or return None when it is not JSON."""
        try:
            return json.loads(self.body)
        except ValueError:
            return None


class HeaderParseError(MangoPayError, ValueError):
    """A numeric pagination header carried a non-numeric value."""

    def __init__(self, header: str, value: str):
        super().__init__(
            f"Invalid value for header {header}: {value!r}",
            code="HEADER_PARSE_ERROR",
            details={"header": header, "value": value},
        )
        self.header = header
        self.value = value
