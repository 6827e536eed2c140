"""Direct-debit mandates resource for the MangoPay SDK."""
from __future__ import annotations

from typing import Optional

from ..endpoints import MethodKey
from ..models import FilterTransactions, Mandate, MandatePost, Transaction
from ..pagination import Pagination, Sort
from ..rest_tool import RequestContext
from .base import BaseResource


class MandatesResource(BaseResource):
    """Resource for direct-debit mandates.

    A mandate is created against a bank account; the user confirms it by
    following the returned ``redirect_url``.
    """

    def create(
        self,
        mandate: MandatePost,
        idempotency_key: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ):
        """Create a web direct-debit mandate."""
        return self._create_object(
            MethodKey.MANDATE_CREATE,
            Mandate,
            mandate,
            idempotency_key=idempotency_key,
            context=context,
        )

    def get(self, mandate_id: str, context: Optional[RequestContext] = None):
        return self._get_object(
            MethodKey.MANDATE_GET, Mandate, context=context, mandate_id=mandate_id
        )

    def cancel(self, mandate_id: str, context: Optional[RequestContext] = None):
        """Cancel an active or submitted mandate."""
        return self._update_object(
            MethodKey.MANDATE_CANCEL, Mandate, None, context=context, mandate_id=mandate_id
        )

    def get_all(
        self,
        pagination: Optional[Pagination] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        return self._get_list(
            MethodKey.MANDATES_GET_ALL,
            Mandate,
            pagination=pagination,
            sort=sort,
            context=context,
        )

    def get_for_user(
        self,
        user_id: str,
        pagination: Optional[Pagination] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        return self._get_list(
            MethodKey.MANDATES_GET_FOR_USER,
            Mandate,
            pagination=pagination,
            sort=sort,
            context=context,
            user_id=user_id,
        )

    def get_transactions(
        self,
        mandate_id: str,
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterTransactions] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List the transactions made under a mandate."""
        return self._get_list(
            MethodKey.MANDATES_GET_TRANSACTIONS,
            Transaction,
            pagination=pagination,
            filters=filters,
            sort=sort,
            context=context,
            mandate_id=mandate_id,
        )
