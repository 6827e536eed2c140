"""
MangoPay Python SDK

Typed client for the MangoPay payment API, with a blocking and an
asynchronous flavour sharing one request engine.
"""
from .auth import (
    CredentialProvider,
    InMemoryTokenStorage,
    OAuthCredentialProvider,
    OAuthToken,
    StaticTokenProvider,
)
from .client import AsyncMangoPayApi, BaseMangoPayApi, MangoPayApi
from .config import PRODUCTION_BASE_URL, SANDBOX_BASE_URL, MangoPaySettings
from .constants import SDK_VERSION
from .endpoints import ENDPOINTS, HttpVerb, MethodDescriptor, MethodKey
from .headers import parse_link_header, read_pagination_headers
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all
from .pagination import (
    AsyncPaginator,
    ListPaginated,
    Pagination,
    PaginationResult,
    Sort,
    SortDirection,
    SyncPaginator,
)
from .rest_tool import RequestContext, RestTool
from .telemetry import ExchangeRecord, record_exchange

__version__ = SDK_VERSION

__all__ = [
    # Clients
    "MangoPayApi",
    "AsyncMangoPayApi",
    "BaseMangoPayApi",
    "MangoPaySettings",
    "SANDBOX_BASE_URL",
    "PRODUCTION_BASE_URL",
    # Auth
    "CredentialProvider",
    "StaticTokenProvider",
    "OAuthCredentialProvider",
    "OAuthToken",
    "InMemoryTokenStorage",
    # Engine
    "RestTool",
    "RequestContext",
    "ExchangeRecord",
    "record_exchange",
    "HttpVerb",
    "MethodDescriptor",
    "MethodKey",
    "ENDPOINTS",
    "parse_link_header",
    "read_pagination_headers",
    # Pagination
    "Pagination",
    "PaginationResult",
    "ListPaginated",
    "Sort",
    "SortDirection",
    "SyncPaginator",
    "AsyncPaginator",
    *_models_all,
]
