"""Idempotency resource for the MangoPay SDK."""
from __future__ import annotations

from typing import Optional

from ..endpoints import MethodKey
from ..models import IdempotencyResponse
from ..rest_tool import RequestContext
from .base import BaseResource


class IdempotencyResource(BaseResource):
    """Resource for the stored responses of calls made with an idempotency key."""

    def get(self, idempotency_key: str, context: Optional[RequestContext] = None):
        """Get the response stored for an idempotency key."""
        return self._get_object(
            MethodKey.IDEMPOTENCY_RESPONSE_GET,
            IdempotencyResponse,
            context=context,
            idempotency_key=idempotency_key,
        )
