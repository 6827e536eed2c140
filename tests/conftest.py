"""
Pytest configuration and fixtures for MangoPay SDK tests.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from mangopay_sdk import (
    AsyncMangoPayApi,
    MangoPayApi,
    MangoPaySettings,
    StaticTokenProvider,
)

BASE_URL = "https://api.test.mangopay.com"
CLIENT_ID = "test-client"
API_ROOT = f"{BASE_URL}/v2.01/{CLIENT_ID}"


@dataclass
class _MockEntry:
    method: str
    url: str
    status_code: int = 200
    content: bytes = b""
    headers: list = field(default_factory=list)
    exception: Optional[Exception] = None


class _LocalHTTPXMock:
    """Queue of canned responses served through an ``httpx.MockTransport``.

    The same transport works for ``httpx.Client`` and ``httpx.AsyncClient``.
    Every request that reaches the transport is kept in ``requests``.
    """

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        response_headers = list((headers or {}).items())
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers.insert(0, ("Content-Type", "application/json"))

        self._entries.append(
            _MockEntry(
                method=method.upper(),
                url=url,
                status_code=status_code,
                content=content or b"",
                headers=response_headers,
            )
        )

    def add_exception(
        self,
        exception: Exception,
        *,
        url: str,
        method: str = "GET",
    ) -> None:
        self._entries.append(
            _MockEntry(method=method.upper(), url=url, exception=exception)
        )

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        entry = self._pop_match(request.method, str(request.url))
        if entry.exception is not None:
            raise entry.exception
        return httpx.Response(
            status_code=entry.status_code,
            headers=entry.headers,
            content=entry.content,
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


@pytest.fixture
def httpx_mock() -> _LocalHTTPXMock:
    return _LocalHTTPXMock()


# Mock response data
MOCK_RESPONSES = {
    "user_natural": {
        "Id": "user_123",
        "Tag": "custom",
        "CreationDate": 1700000000,
        "PersonType": "NATURAL",
        "Email": "jane@example.com",
        "KycLevel": "LIGHT",
        "FirstName": "Jane",
        "LastName": "Doe",
        "Birthday": 188352000,
        "Nationality": "FR",
        "CountryOfResidence": "FR",
    },
    "user_legal": {
        "Id": "user_456",
        "CreationDate": 1700000100,
        "PersonType": "LEGAL",
        "Email": "billing@acme.test",
        "Name": "Acme",
        "LegalPersonType": "BUSINESS",
        "LegalRepresentativeFirstName": "John",
        "LegalRepresentativeLastName": "Smith",
    },
    "wallet": {
        "Id": "wallet_123",
        "CreationDate": 1700000200,
        "Owners": ["user_123"],
        "Description": "Main wallet",
        "Balance": {"Currency": "EUR", "Amount": 12500},
        "Currency": "EUR",
        "FundsType": "DEFAULT",
    },
    "transaction": {
        "Id": "tx_123",
        "CreationDate": 1700000300,
        "AuthorId": "user_123",
        "DebitedFunds": {"Currency": "EUR", "Amount": 1000},
        "CreditedFunds": {"Currency": "EUR", "Amount": 950},
        "Fees": {"Currency": "EUR", "Amount": 50},
        "Status": "SUCCEEDED",
        "Type": "PAYIN",
        "Nature": "REGULAR",
        "CreditedWalletId": "wallet_123",
    },
    "kyc_document": {
        "Id": "kyc_123",
        "CreationDate": 1700000400,
        "Type": "IDENTITY_PROOF",
        "Status": "CREATED",
        "UserId": "user_123",
    },
    "dispute": {
        "Id": "dispute_123",
        "CreationDate": 1700000500,
        "InitialTransactionId": "tx_123",
        "DisputeType": "CONTESTABLE",
        "Status": "PENDING_CLIENT_ACTION",
        "DisputedFunds": {"Currency": "EUR", "Amount": 1000},
    },
    "mandate": {
        "Id": "mandate_123",
        "CreationDate": 1700000600,
        "BankAccountId": "bank_123",
        "UserId": "user_123",
        "ReturnUrl": "https://example.com/return",
        "RedirectUrl": "https://mangopay.test/mandate",
        "Culture": "EN",
        "Scheme": "SEPA",
        "Status": "CREATED",
    },
    "payout": {
        "Id": "payout_123",
        "CreationDate": 1700000700,
        "AuthorId": "user_123",
        "DebitedFunds": {"Currency": "EUR", "Amount": 5000},
        "Fees": {"Currency": "EUR", "Amount": 0},
        "Status": "CREATED",
        "Type": "PAYOUT",
        "DebitedWalletId": "wallet_123",
        "PaymentType": "BANK_WIRE",
        "BankAccountId": "bank_123",
    },
    "hook": {
        "Id": "hook_123",
        "CreationDate": 1700000800,
        "Url": "https://example.com/hooks",
        "Status": "ENABLED",
        "Validity": "VALID",
        "EventType": "PAYIN_NORMAL_SUCCEEDED",
    },
    "event": {
        "ResourceId": "tx_123",
        "EventType": "PAYIN_NORMAL_SUCCEEDED",
        "Date": 1700000900,
    },
    "client": {
        "ClientId": "test-client",
        "Name": "Test Platform",
        "TechEmails": ["tech@example.com"],
        "PlatformURL": "https://example.com",
    },
    "idempotency_response": {
        "StatusCode": "200",
        "ContentLength": "120",
        "ContentType": "application/json; charset=utf-8",
        "Date": "Mon, 20 Nov 2023 10:00:00 GMT",
        "Resource": {"Id": "user_123"},
        "RequestURL": "https://api.test.mangopay.com/v2.01/test-client/users/natural",
    },
}


@pytest.fixture
def mock_responses() -> dict[str, Any]:
    """Canned API payloads."""
    return MOCK_RESPONSES


@pytest.fixture
def settings() -> MangoPaySettings:
    """Test configuration."""
    return MangoPaySettings(
        client_id=CLIENT_ID,
        client_api_key="test-api-key",
        base_url=BASE_URL,
    )


@pytest.fixture
def credentials() -> StaticTokenProvider:
    return StaticTokenProvider("test-token")


@pytest.fixture
def api(settings, credentials, httpx_mock) -> MangoPayApi:
    """Blocking client wired to the mock transport."""
    client = MangoPayApi(settings, credentials=credentials, transport=httpx_mock.transport)
    yield client
    client.close()


@pytest.fixture
def async_api(settings, credentials, httpx_mock) -> AsyncMangoPayApi:
    """Asynchronous client wired to the mock transport."""
    return AsyncMangoPayApi(settings, credentials=credentials, transport=httpx_mock.transport)
