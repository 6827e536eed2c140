"""
Disputes resource for the MangoPay SDK.

Disputes are opened by the cardholder's bank. A contestable dispute is
answered with :meth:`DisputesResource.contest`; closing it accepts the loss.
"""
from __future__ import annotations

from typing import Optional

from ..endpoints import MethodKey
from ..models import (
    Dispute,
    DisputeContestPut,
    DisputeTagPut,
    FilterDisputes,
    FilterTransactions,
    Money,
    Transaction,
)
from ..pagination import Pagination, Sort
from ..rest_tool import RequestContext
from .base import BaseResource


class DisputesResource(BaseResource):
    """Resource for disputes."""

    def get(self, dispute_id: str, context: Optional[RequestContext] = None):
        return self._get_object(
            MethodKey.DISPUTES_GET, Dispute, context=context, dispute_id=dispute_id
        )

    def get_all(
        self,
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterDisputes] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List all disputes."""
        return self._get_list(
            MethodKey.DISPUTES_GET_ALL,
            Dispute,
            pagination=pagination,
            filters=filters,
            sort=sort,
            context=context,
        )

    def update_tag(self, dispute_id: str, tag: str, context: Optional[RequestContext] = None):
        """Replace the custom tag of a dispute."""
        return self._update_object(
            MethodKey.DISPUTES_SAVE_TAG,
            Dispute,
            DisputeTagPut(tag=tag),
            context=context,
            dispute_id=dispute_id,
        )

    def contest(
        self,
        dispute_id: str,
        contested_funds: Optional[Money] = None,
        tag: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ):
        """Contest a dispute.

        Args:
            dispute_id: Dispute to contest
            contested_funds: Amount contested; omitted for retrieval requests
            tag: Optional custom tag
            context: Optional request context

        Returns:
            The updated Dispute
        """
        return self._update_object(
            MethodKey.DISPUTES_SAVE_CONTEST_FUNDS,
            Dispute,
            DisputeContestPut(contested_funds=contested_funds, tag=tag),
            context=context,
            dispute_id=dispute_id,
        )

    def close(self, dispute_id: str, context: Optional[RequestContext] = None):
        """Close a dispute without contesting it."""
        return self._update_object(
            MethodKey.DISPUTES_SAVE_CLOSE, Dispute, None, context=context, dispute_id=dispute_id
        )

    def get_transactions(
        self,
        dispute_id: str,
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterTransactions] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List the transactions linked to a dispute."""
        return self._get_list(
            MethodKey.DISPUTES_GET_TRANSACTIONS,
            Transaction,
            pagination=pagination,
            filters=filters,
            sort=sort,
            context=context,
            dispute_id=dispute_id,
        )

    def get_for_wallet(
        self,
        wallet_id: str,
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterDisputes] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        return self._get_list(
            MethodKey.DISPUTES_GET_FOR_WALLET,
            Dispute,
            pagination=pagination,
            filters=filters,
            sort=sort,
            context=context,
            wallet_id=wallet_id,
        )

    def get_for_user(
        self,
        user_id: str,
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterDisputes] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        return self._get_list(
            MethodKey.DISPUTES_GET_FOR_USER,
            Dispute,
            pagination=pagination,
            filters=filters,
            sort=sort,
            context=context,
            user_id=user_id,
        )
