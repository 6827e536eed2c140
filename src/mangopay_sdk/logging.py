"""
Logging helpers for the MangoPay SDK with sensitive data masking.

The SDK logs every exchange at DEBUG level through standard-library loggers
named after the emitting module. Credentials never reach the log: the
``Authorization`` header and sensitive JSON fields are replaced by a mask.

Usage:
    import logging

    logging.getLogger("mangopay_sdk").setLevel(logging.DEBUG)
"""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

MASK_PATTERN = "***REDACTED***"
MAX_BODY_LOG_LENGTH = 2000

SENSITIVE_FIELDS = frozenset({
    "password",
    "secret",
    "token",
    "access_token",
    "api_key",
    "authorization",
    "cardnumber",
    "card_number",
    "cvx",
    "cvv",
    "iban",
    "accountnumber",
    "account_number",
})

SENSITIVE_HEADERS = frozenset({
    "authorization",
    "cookie",
    "set-cookie",
})


def is_sensitive_key(key: str) -> bool:
    """Check if a key name indicates sensitive data."""
    key_lower = key.lower().replace("-", "_")
    return key_lower in SENSITIVE_FIELDS or any(
        sensitive in key_lower for sensitive in ("secret", "password", "token")
    )


def mask_sensitive_data(data: Any, _depth: int = 0, _max_depth: int = 10) -> Any:
    """Recursively mask sensitive values in a JSON-like structure.

    Args:
        data: The data structure to mask (dict, list, or scalar)

    Returns:
        Copy of data with sensitive values masked
    """
    if _depth > _max_depth:
        return data

    if isinstance(data, dict):
        return {
            key: MASK_PATTERN if is_sensitive_key(str(key))
            else mask_sensitive_data(value, _depth + 1, _max_depth)
            for key, value in data.items()
        }

    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item, _depth + 1, _max_depth) for item in data)

    return data


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Mask sensitive HTTP headers."""
    return {
        key: MASK_PATTERN if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def _body_for_log(body: Optional[bytes]) -> Optional[str]:
    if not body:
        return None
    text = body.decode("utf-8", errors="replace")
    try:
        text = json.dumps(mask_sensitive_data(json.loads(text)), default=str)
    except ValueError:
        pass
    if len(text) > MAX_BODY_LOG_LENGTH:
        text = text[:MAX_BODY_LOG_LENGTH] + "..."
    return text


def log_request(
    logger: logging.Logger,
    method: str,
    url: str,
    headers: Mapping[str, str],
    body: Optional[bytes] = None,
) -> None:
    """Log an outgoing HTTP request with masked headers and body."""
    if not logger.isEnabledFor(logging.DEBUG):
        return

    logger.debug(
        "HTTP %s %s",
        method,
        url,
        extra={
            "data": {
                "direction": "request",
                "headers": mask_headers(headers),
                "body": _body_for_log(body),
            }
        },
    )


def log_response(
    logger: logging.Logger,
    status_code: int,
    body: Optional[bytes] = None,
    duration_ms: Optional[float] = None,
) -> None:
    """Log an HTTP response; error statuses go out at WARNING."""
    level = logging.DEBUG if status_code in (200, 204) else logging.WARNING
    if not logger.isEnabledFor(level):
        return

    message = f"HTTP {status_code}"
    if duration_ms is not None:
        message += f" ({duration_ms:.0f}ms)"

    logger.log(
        level,
        message,
        extra={
            "data": {
                "direction": "response",
                "status_code": status_code,
                "body": _body_for_log(body),
            }
        },
    )
