"""Pay-outs resource for the MangoPay SDK."""
from __future__ import annotations

from typing import Optional

from ..endpoints import MethodKey
from ..models import PayOut, PayOutBankWirePost
from ..rest_tool import RequestContext
from .base import BaseResource


class PayOutsResource(BaseResource):
    """Resource for bank wire pay-outs from a wallet to a bank account."""

    def create_bank_wire(
        self,
        payout: PayOutBankWirePost,
        idempotency_key: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ):
        """Create a bank wire pay-out.

        Args:
            payout: Pay-out details
            idempotency_key: Optional key making the call safe to repeat
            context: Optional request context

        Returns:
            The created PayOut
        """
        return self._create_object(
            MethodKey.PAYOUTS_BANKWIRE_CREATE,
            PayOut,
            payout,
            idempotency_key=idempotency_key,
            context=context,
        )

    def get(self, payout_id: str, context: Optional[RequestContext] = None):
        return self._get_object(MethodKey.PAYOUTS_GET, PayOut, context=context, payout_id=payout_id)
