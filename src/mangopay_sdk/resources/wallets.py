"""Wallets resource for the MangoPay SDK."""
from __future__ import annotations

from typing import Optional

from ..endpoints import MethodKey
from ..models import FilterTransactions, Transaction, Wallet, WalletPost, WalletPut
from ..pagination import Pagination, Sort
from ..rest_tool import RequestContext
from .base import BaseResource


class WalletsResource(BaseResource):
    """Resource for user wallets.

    Example:
        ```python
        wallet = api.wallets.create(
            WalletPost(owners=["user_123"], description="Main", currency=CurrencyIso.EUR)
        )
        ```
    """

    def create(
        self,
        wallet: WalletPost,
        idempotency_key: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ):
        """Create a wallet."""
        return self._create_object(
            MethodKey.WALLETS_CREATE,
            Wallet,
            wallet,
            idempotency_key=idempotency_key,
            context=context,
        )

    def get(self, wallet_id: str, context: Optional[RequestContext] = None):
        return self._get_object(MethodKey.WALLETS_GET, Wallet, context=context, wallet_id=wallet_id)

    def save(self, wallet_id: str, wallet: WalletPut, context: Optional[RequestContext] = None):
        """Update a wallet's description or tag."""
        return self._update_object(
            MethodKey.WALLETS_SAVE, Wallet, wallet, context=context, wallet_id=wallet_id
        )

    def get_transactions(
        self,
        wallet_id: str,
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterTransactions] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List the transactions of a wallet."""
        return self._get_list(
            MethodKey.WALLETS_ALL_TRANSACTIONS,
            Transaction,
            pagination=pagination,
            filters=filters,
            sort=sort,
            context=context,
            wallet_id=wallet_id,
        )
