"""Stored responses of idempotent calls."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from .base import MangoPayModel


class IdempotencyResponse(MangoPayModel):
    """Response MangoPay stored for a call made with an idempotency key.

    ``resource`` holds the original response body, left undecoded.
    """

    status_code: Optional[str] = None
    content_length: Optional[str] = None
    content_type: Optional[str] = None
    date: Optional[str] = None
    resource: Optional[Any] = None
    request_url: Optional[str] = Field(default=None, alias="RequestURL")
