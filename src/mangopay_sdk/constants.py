"""Wire-level constants for the MangoPay SDK."""
from __future__ import annotations

from typing import Final

SDK_VERSION: Final[str] = "0.1.0"
USER_AGENT: Final[str] = f"MangoPay V2 SDK Python {SDK_VERSION}"

APPLICATION_JSON: Final[str] = "application/json"

CONTENT_TYPE_HEADER: Final[str] = "Content-Type"
USER_AGENT_HEADER: Final[str] = "User-Agent"
AUTHORIZATION_HEADER: Final[str] = "Authorization"
IDEMPOTENCY_KEY_HEADER: Final[str] = "Idempotency-Key"

PAGE_PARAMETER: Final[str] = "page"
PER_PAGE_PARAMETER: Final[str] = "per_page"
SORT_PARAMETER: Final[str] = "Sort"
