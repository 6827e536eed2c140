"""
MangoPay Python SDK

Typed client for the MangoPay payment API.

Example usage:
    ```python
    from mangopay_sdk import MangoPayApi, AsyncMangoPayApi

    with MangoPayApi(client_id="my-client", client_api_key="my-api-key") as api:
        wallet = api.wallets.get("wallet_123")
        print(api.last_request_info.rate_limit_remaining)

    async with AsyncMangoPayApi(client_id="my-client", client_api_key="my-api-key") as api:
        users = await api.users.get_all(Pagination(page=1, items_per_page=50))
    ```
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import httpx

from .auth import CredentialProvider, OAuthCredentialProvider
from .config import MangoPaySettings
from .endpoints import MethodKey, get_endpoint
from .pagination import AsyncPaginator, Pagination, SyncPaginator
from .resources.clients import ClientsResource
from .resources.disputes import DisputesResource
from .resources.events import EventsResource
from .resources.hooks import HooksResource
from .resources.idempotency import IdempotencyResource
from .resources.kyc import KycResource
from .resources.mandates import MandatesResource
from .resources.payouts import PayOutsResource
from .resources.users import UsersResource
from .resources.wallets import WalletsResource
from .rest_tool import ExchangeFlow, RestTool, run_async, run_sync
from .telemetry import ExchangeRecord

logger = logging.getLogger(__name__)


def _build_settings(settings: Optional[MangoPaySettings], overrides: Dict[str, Any]) -> MangoPaySettings:
    if settings is None:
        return MangoPaySettings(**overrides)
    if overrides:
        return MangoPaySettings(**{**settings.model_dump(), **overrides})
    return settings


def _timeout_config(settings: MangoPaySettings) -> Dict[str, Any]:
    # 0 keeps the httpx default
    if settings.timeout > 0:
        return {"timeout": httpx.Timeout(settings.timeout)}
    return {}


class BaseMangoPayApi:
    """
    Shared state of the blocking and asynchronous clients.

    Provides access to all MangoPay API resources:
    - clients: The platform account, its wallets and transactions
    - users: Natural and legal users
    - wallets: Wallets and their transactions
    - kyc: KYC documents and pages
    - disputes: Disputes and their resolution
    - mandates: Direct-debit mandates
    - payouts: Bank wire pay-outs
    - idempotency: Stored responses of idempotent calls
    - hooks: Webhook subscriptions
    - events: Event log

    Args:
        settings: Configuration; read from ``MANGOPAY_*`` variables if omitted
        credentials: Credential provider; an OAuth provider built from the
            settings is used if omitted
        **overrides: Individual settings, e.g. ``client_id`` or ``timeout``
    """

    def __init__(
        self,
        settings: Optional[MangoPaySettings] = None,
        *,
        credentials: Optional[CredentialProvider] = None,
        **overrides: Any,
    ):
        self._settings = _build_settings(settings, overrides)
        if not self._settings.client_id:
            raise ValueError("Client id is required")

        if credentials is None:
            if not self._settings.client_api_key.get_secret_value():
                raise ValueError("API key is required when no credential provider is given")
            credentials = OAuthCredentialProvider.from_settings(self._settings)

        self._credentials = credentials
        self._rest_tool = RestTool(self._settings, credentials)

        # Initialize resources
        self.clients = ClientsResource(self)
        self.users = UsersResource(self)
        self.wallets = WalletsResource(self)
        self.kyc = KycResource(self)
        self.disputes = DisputesResource(self)
        self.mandates = MandatesResource(self)
        self.payouts = PayOutsResource(self)
        self.idempotency = IdempotencyResource(self)
        self.hooks = HooksResource(self)
        self.events = EventsResource(self)

    @property
    def settings(self) -> MangoPaySettings:
        return self._settings

    @property
    def credentials(self) -> CredentialProvider:
        return self._credentials

    @property
    def last_request_info(self) -> Optional[ExchangeRecord]:
        """Record of the most recent exchange made through this client.

        Shared by all calls: with concurrent calls, the last one to complete
        wins.
        """
        return self._rest_tool.last_request_info

    def _request(self, key: MethodKey, result_type: Any, **kwargs: Any) -> Any:
        flow = self._rest_tool.exchange_flow(get_endpoint(key), result_type, **kwargs)
        return self._drive(flow)

    def _drive(self, flow: ExchangeFlow) -> Any:
        raise NotImplementedError

    def _page_fetcher(self, method: Callable[..., Any], args: tuple, kwargs: Dict[str, Any]):
        def fetch_page(pagination: Pagination) -> Any:
            return method(*args, pagination=pagination, **kwargs)

        return fetch_page


class MangoPayApi(BaseMangoPayApi):
    """Blocking MangoPay API client.

    Example:
        ```python
        with MangoPayApi(client_id="my-client", client_api_key="key") as api:
            for wallet in api.paginate(api.users.get_wallets, "user_123"):
                print(wallet.balance)
        ```
    """

    def __init__(
        self,
        settings: Optional[MangoPaySettings] = None,
        *,
        credentials: Optional[CredentialProvider] = None,
        transport: Optional[httpx.BaseTransport] = None,
        **overrides: Any,
    ):
        super().__init__(settings, credentials=credentials, **overrides)
        self._http = httpx.Client(transport=transport, **_timeout_config(self._settings))

    def _drive(self, flow: ExchangeFlow) -> Any:
        return run_sync(flow, self._http)

    def paginate(
        self,
        method: Callable[..., Any],
        *args: Any,
        items_per_page: Optional[int] = None,
        max_pages: Optional[int] = None,
        **kwargs: Any,
    ) -> SyncPaginator[Any]:
        """Iterate every item of a list method, page by page."""
        return SyncPaginator(
            self._page_fetcher(method, args, kwargs),
            items_per_page=items_per_page or self._settings.default_items_per_page,
            max_pages=max_pages,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._http.close()

    def __enter__(self) -> "MangoPayApi":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncMangoPayApi(BaseMangoPayApi):
    """Asynchronous MangoPay API client.

    Every resource method returns an awaitable.

    Example:
        ```python
        async with AsyncMangoPayApi(client_id="my-client", client_api_key="key") as api:
            async for dispute in api.paginate(api.disputes.get_all, items_per_page=50):
                print(dispute.status)
        ```
    """

    def __init__(
        self,
        settings: Optional[MangoPaySettings] = None,
        *,
        credentials: Optional[CredentialProvider] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **overrides: Any,
    ):
        super().__init__(settings, credentials=credentials, **overrides)
        self._http = httpx.AsyncClient(transport=transport, **_timeout_config(self._settings))

    def _drive(self, flow: ExchangeFlow) -> Any:
        return run_async(flow, self._http)

    def paginate(
        self,
        method: Callable[..., Any],
        *args: Any,
        items_per_page: Optional[int] = None,
        max_pages: Optional[int] = None,
        **kwargs: Any,
    ) -> AsyncPaginator[Any]:
        """Iterate every item of a list method, page by page."""
        return AsyncPaginator(
            self._page_fetcher(method, args, kwargs),
            items_per_page=items_per_page or self._settings.default_items_per_page,
            max_pages=max_pages,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._http.aclose()

    async def __aenter__(self) -> "AsyncMangoPayApi":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
