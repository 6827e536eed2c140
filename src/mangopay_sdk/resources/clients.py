"""
Clients resource for the MangoPay SDK.

The client is the platform account the SDK authenticates as. Besides its own
profile it owns one wallet per funds type and currency (default, fees and
credit wallets).
"""
from __future__ import annotations

from typing import Optional, Union

from ..endpoints import MethodKey
from ..models import (
    Client,
    ClientBankWireDirectPost,
    ClientLogoPut,
    ClientPut,
    CurrencyIso,
    FilterKycDocuments,
    FilterTransactions,
    FundsType,
    KycDocument,
    PayInBankWireDirect,
    Transaction,
    Wallet,
)
from ..pagination import Pagination, Sort
from ..rest_tool import RequestContext
from .base import BaseResource

_WALLET_LISTS = {
    FundsType.DEFAULT: MethodKey.CLIENT_GET_WALLETS_DEFAULT,
    FundsType.FEES: MethodKey.CLIENT_GET_WALLETS_FEES,
    FundsType.CREDIT: MethodKey.CLIENT_GET_WALLETS_CREDIT,
}

_WALLETS_BY_CURRENCY = {
    FundsType.DEFAULT: MethodKey.CLIENT_GET_WALLETS_DEFAULT_WITH_CURRENCY,
    FundsType.FEES: MethodKey.CLIENT_GET_WALLETS_FEES_WITH_CURRENCY,
    FundsType.CREDIT: MethodKey.CLIENT_GET_WALLETS_CREDIT_WITH_CURRENCY,
}


def _funds_type(value: Union[FundsType, str]) -> FundsType:
    # Raises ValueError for unknown values
    return FundsType(value)


def _currency(value: Union[CurrencyIso, str]) -> CurrencyIso:
    currency = CurrencyIso(value)
    if currency is CurrencyIso.NOT_SPECIFIED:
        raise ValueError("A currency must be specified")
    return currency


class ClientsResource(BaseResource):
    """Resource for the platform client.

    Example:
        ```python
        fees_wallet = api.clients.get_wallet(FundsType.FEES, CurrencyIso.EUR)
        ```
    """

    def get(self, context: Optional[RequestContext] = None):
        """Get the client's profile."""
        return self._get_object(MethodKey.CLIENT_GET, Client, context=context)

    def save(self, client: ClientPut, context: Optional[RequestContext] = None):
        """Update the client's profile."""
        return self._update_object(MethodKey.CLIENT_SAVE, Client, client, context=context)

    def upload_logo(self, logo: ClientLogoPut, context: Optional[RequestContext] = None):
        """Upload a base64-encoded logo; the API answers with no content."""
        return self._update_object(MethodKey.CLIENT_UPLOAD_LOGO, Client, logo, context=context)

    def get_wallets(
        self,
        funds_type: Union[FundsType, str],
        pagination: Optional[Pagination] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List the client's wallets of one funds type.

        Raises:
            ValueError: If ``funds_type`` is not a known funds type
        """
        return self._get_list(
            _WALLET_LISTS[_funds_type(funds_type)],
            Wallet,
            pagination=pagination,
            sort=sort,
            context=context,
        )

    def get_wallet(
        self,
        funds_type: Union[FundsType, str],
        currency: Union[CurrencyIso, str],
        context: Optional[RequestContext] = None,
    ):
        """Get the client's wallet for a funds type and currency.

        Raises:
            ValueError: If ``funds_type`` is unknown or ``currency`` is
                unknown or not specified
        """
        key = _WALLETS_BY_CURRENCY[_funds_type(funds_type)]
        return self._get_object(key, Wallet, context=context, currency=_currency(currency).value)

    def get_wallet_transactions(
        self,
        funds_type: Union[FundsType, str],
        currency: Union[CurrencyIso, str],
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterTransactions] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List the transactions of one of the client's wallets."""
        return self._get_list(
            MethodKey.CLIENT_GET_WALLET_TRANSACTIONS,
            Transaction,
            pagination=pagination,
            filters=filters,
            sort=sort,
            context=context,
            funds_type=_funds_type(funds_type).value,
            currency=_currency(currency).value,
        )

    def get_transactions(
        self,
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterTransactions] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List all transactions of the client's wallets."""
        return self._get_list(
            MethodKey.CLIENT_GET_TRANSACTIONS,
            Transaction,
            pagination=pagination,
            filters=filters,
            sort=sort,
            context=context,
        )

    def get_kyc_documents(
        self,
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterKycDocuments] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List the KYC documents of all users."""
        return self._get_list(
            MethodKey.CLIENT_GET_KYC_DOCUMENTS,
            KycDocument,
            pagination=pagination,
            filters=filters,
            sort=sort,
            context=context,
        )

    def create_bank_wire_direct(
        self,
        pay_in: ClientBankWireDirectPost,
        idempotency_key: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ):
        """Create a bank wire pay-in to one of the client's wallets."""
        return self._create_object(
            MethodKey.CLIENT_CREATE_BANKWIRE_DIRECT,
            PayInBankWireDirect,
            pay_in,
            idempotency_key=idempotency_key,
            context=context,
        )
