"""Endpoint table for the MangoPay API.

Each remote operation is described once by a :class:`MethodDescriptor`. URL
templates are relative to ``/{api_version}/{client_id}`` and use named
placeholders filled from path arguments.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict
from urllib.parse import quote


class HttpVerb(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class MethodDescriptor:
    """Static description of one remote operation.

    Attributes:
        http_verb: HTTP method
        url_template: Path template, e.g. ``/users/{user_id}/wallets``
        requires_client_id: Whether the client id is part of the path
    """

    http_verb: HttpVerb
    url_template: str
    requires_client_id: bool = True

    def resolve(self, **path_params: Any) -> str:
        """Fill placeholders with percent-encoded path arguments."""
        encoded = {name: quote(str(value), safe="") for name, value in path_params.items()}
        return self.url_template.format(**encoded)


class MethodKey(str, Enum):
    AUTHENTICATION_OAUTH = "authentication_oauth"

    CLIENT_GET = "client_get"
    CLIENT_SAVE = "client_save"
    CLIENT_UPLOAD_LOGO = "client_upload_logo"
    CLIENT_GET_WALLETS_DEFAULT = "client_get_wallets_default"
    CLIENT_GET_WALLETS_FEES = "client_get_wallets_fees"
    CLIENT_GET_WALLETS_CREDIT = "client_get_wallets_credit"
    CLIENT_GET_WALLETS_DEFAULT_WITH_CURRENCY = "client_get_wallets_default_with_currency"
    CLIENT_GET_WALLETS_FEES_WITH_CURRENCY = "client_get_wallets_fees_with_currency"
    CLIENT_GET_WALLETS_CREDIT_WITH_CURRENCY = "client_get_wallets_credit_with_currency"
    CLIENT_GET_TRANSACTIONS = "client_get_transactions"
    CLIENT_GET_WALLET_TRANSACTIONS = "client_get_wallet_transactions"
    CLIENT_CREATE_BANKWIRE_DIRECT = "client_create_bankwire_direct"
    CLIENT_GET_KYC_DOCUMENTS = "client_get_kyc_documents"

    USERS_CREATE_NATURALS = "users_create_naturals"
    USERS_CREATE_LEGALS = "users_create_legals"
    USERS_GET = "users_get"
    USERS_GET_NATURALS = "users_get_naturals"
    USERS_GET_LEGALS = "users_get_legals"
    USERS_SAVE_NATURALS = "users_save_naturals"
    USERS_ALL = "users_all"
    USERS_ALL_WALLETS = "users_all_wallets"
    USERS_ALL_TRANSACTIONS = "users_all_transactions"

    WALLETS_CREATE = "wallets_create"
    WALLETS_GET = "wallets_get"
    WALLETS_SAVE = "wallets_save"
    WALLETS_ALL_TRANSACTIONS = "wallets_all_transactions"

    KYC_DOCUMENT_GET = "kyc_document_get"
    USERS_CREATE_KYC_DOCUMENT = "users_create_kyc_document"
    USERS_CREATE_KYC_PAGE = "users_create_kyc_page"
    USERS_SAVE_KYC_DOCUMENT = "users_save_kyc_document"

    DISPUTES_GET = "disputes_get"
    DISPUTES_SAVE_TAG = "disputes_save_tag"
    DISPUTES_SAVE_CONTEST_FUNDS = "disputes_save_contest_funds"
    DISPUTES_SAVE_CLOSE = "disputes_save_close"
    DISPUTES_GET_TRANSACTIONS = "disputes_get_transactions"
    DISPUTES_GET_ALL = "disputes_get_all"
    DISPUTES_GET_FOR_WALLET = "disputes_get_for_wallet"
    DISPUTES_GET_FOR_USER = "disputes_get_for_user"

    MANDATE_CREATE = "mandate_create"
    MANDATE_GET = "mandate_get"
    MANDATE_CANCEL = "mandate_cancel"
    MANDATES_GET_ALL = "mandates_get_all"
    MANDATES_GET_FOR_USER = "mandates_get_for_user"
    MANDATES_GET_TRANSACTIONS = "mandates_get_transactions"

    PAYOUTS_BANKWIRE_CREATE = "payouts_bankwire_create"
    PAYOUTS_GET = "payouts_get"

    IDEMPOTENCY_RESPONSE_GET = "idempotency_response_get"

    HOOKS_CREATE = "hooks_create"
    HOOKS_GET = "hooks_get"
    HOOKS_SAVE = "hooks_save"
    HOOKS_ALL = "hooks_all"

    EVENTS_ALL = "events_all"


_GET, _POST, _PUT = HttpVerb.GET, HttpVerb.POST, HttpVerb.PUT

ENDPOINTS: Dict[MethodKey, MethodDescriptor] = {
    MethodKey.AUTHENTICATION_OAUTH: MethodDescriptor(_POST, "/oauth/token", requires_client_id=False),

    MethodKey.CLIENT_GET: MethodDescriptor(_GET, "/clients"),
    MethodKey.CLIENT_SAVE: MethodDescriptor(_PUT, "/clients"),
    MethodKey.CLIENT_UPLOAD_LOGO: MethodDescriptor(_PUT, "/clients/logo"),
    MethodKey.CLIENT_GET_WALLETS_DEFAULT: MethodDescriptor(_GET, "/clients/wallets"),
    MethodKey.CLIENT_GET_WALLETS_FEES: MethodDescriptor(_GET, "/clients/wallets/fees"),
    MethodKey.CLIENT_GET_WALLETS_CREDIT: MethodDescriptor(_GET, "/clients/wallets/credit"),
    MethodKey.CLIENT_GET_WALLETS_DEFAULT_WITH_CURRENCY: MethodDescriptor(_GET, "/clients/wallets/{currency}"),
    MethodKey.CLIENT_GET_WALLETS_FEES_WITH_CURRENCY: MethodDescriptor(_GET, "/clients/wallets/fees/{currency}"),
    MethodKey.CLIENT_GET_WALLETS_CREDIT_WITH_CURRENCY: MethodDescriptor(_GET, "/clients/wallets/credit/{currency}"),
    MethodKey.CLIENT_GET_TRANSACTIONS: MethodDescriptor(_GET, "/clients/transactions"),
    MethodKey.CLIENT_GET_WALLET_TRANSACTIONS: MethodDescriptor(
        _GET, "/clients/wallets/{funds_type}/{currency}/transactions"
    ),
    MethodKey.CLIENT_CREATE_BANKWIRE_DIRECT: MethodDescriptor(_POST, "/clients/payins/bankwire/direct"),
    MethodKey.CLIENT_GET_KYC_DOCUMENTS: MethodDescriptor(_GET, "/KYC/documents"),

    MethodKey.USERS_CREATE_NATURALS: MethodDescriptor(_POST, "/users/natural"),
    MethodKey.USERS_CREATE_LEGALS: MethodDescriptor(_POST, "/users/legal"),
    MethodKey.USERS_GET: MethodDescriptor(_GET, "/users/{user_id}"),
    MethodKey.USERS_GET_NATURALS: MethodDescriptor(_GET, "/users/natural/{user_id}"),
    MethodKey.USERS_GET_LEGALS: MethodDescriptor(_GET, "/users/legal/{user_id}"),
    MethodKey.USERS_SAVE_NATURALS: MethodDescriptor(_PUT, "/users/natural/{user_id}"),
    MethodKey.USERS_ALL: MethodDescriptor(_GET, "/users"),
    MethodKey.USERS_ALL_WALLETS: MethodDescriptor(_GET, "/users/{user_id}/wallets"),
    MethodKey.USERS_ALL_TRANSACTIONS: MethodDescriptor(_GET, "/users/{user_id}/transactions"),

    MethodKey.WALLETS_CREATE: MethodDescriptor(_POST, "/wallets"),
    MethodKey.WALLETS_GET: MethodDescriptor(_GET, "/wallets/{wallet_id}"),
    MethodKey.WALLETS_SAVE: MethodDescriptor(_PUT, "/wallets/{wallet_id}"),
    MethodKey.WALLETS_ALL_TRANSACTIONS: MethodDescriptor(_GET, "/wallets/{wallet_id}/transactions"),

    MethodKey.KYC_DOCUMENT_GET: MethodDescriptor(_GET, "/KYC/documents/{document_id}"),
    MethodKey.USERS_CREATE_KYC_DOCUMENT: MethodDescriptor(_POST, "/users/{user_id}/KYC/documents"),
    MethodKey.USERS_CREATE_KYC_PAGE: MethodDescriptor(
        _POST, "/users/{user_id}/KYC/documents/{document_id}/pages"
    ),
    MethodKey.USERS_SAVE_KYC_DOCUMENT: MethodDescriptor(_PUT, "/users/{user_id}/KYC/documents/{document_id}"),

    MethodKey.DISPUTES_GET: MethodDescriptor(_GET, "/disputes/{dispute_id}"),
    MethodKey.DISPUTES_SAVE_TAG: MethodDescriptor(_PUT, "/disputes/{dispute_id}"),
    MethodKey.DISPUTES_SAVE_CONTEST_FUNDS: MethodDescriptor(_PUT, "/disputes/{dispute_id}/submit"),
    MethodKey.DISPUTES_SAVE_CLOSE: MethodDescriptor(_PUT, "/disputes/{dispute_id}/close"),
    MethodKey.DISPUTES_GET_TRANSACTIONS: MethodDescriptor(_GET, "/disputes/{dispute_id}/transactions"),
    MethodKey.DISPUTES_GET_ALL: MethodDescriptor(_GET, "/disputes"),
    MethodKey.DISPUTES_GET_FOR_WALLET: MethodDescriptor(_GET, "/wallets/{wallet_id}/disputes"),
    MethodKey.DISPUTES_GET_FOR_USER: MethodDescriptor(_GET, "/users/{user_id}/disputes"),

    MethodKey.MANDATE_CREATE: MethodDescriptor(_POST, "/mandates/directdebit/web"),
    MethodKey.MANDATE_GET: MethodDescriptor(_GET, "/mandates/{mandate_id}"),
    MethodKey.MANDATE_CANCEL: MethodDescriptor(_PUT, "/mandates/{mandate_id}/cancel"),
    MethodKey.MANDATES_GET_ALL: MethodDescriptor(_GET, "/mandates"),
    MethodKey.MANDATES_GET_FOR_USER: MethodDescriptor(_GET, "/users/{user_id}/mandates"),
    MethodKey.MANDATES_GET_TRANSACTIONS: MethodDescriptor(_GET, "/mandates/{mandate_id}/transactions"),

    MethodKey.PAYOUTS_BANKWIRE_CREATE: MethodDescriptor(_POST, "/payouts/bankwire"),
    MethodKey.PAYOUTS_GET: MethodDescriptor(_GET, "/payouts/{payout_id}"),

    MethodKey.IDEMPOTENCY_RESPONSE_GET: MethodDescriptor(_GET, "/responses/{idempotency_key}"),

    MethodKey.HOOKS_CREATE: MethodDescriptor(_POST, "/hooks"),
    MethodKey.HOOKS_GET: MethodDescriptor(_GET, "/hooks/{hook_id}"),
    MethodKey.HOOKS_SAVE: MethodDescriptor(_PUT, "/hooks/{hook_id}"),
    MethodKey.HOOKS_ALL: MethodDescriptor(_GET, "/hooks"),

    MethodKey.EVENTS_ALL: MethodDescriptor(_GET, "/events"),
}


def get_endpoint(key: MethodKey) -> MethodDescriptor:
    return ENDPOINTS[key]
