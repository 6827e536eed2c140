"""
Request execution engine for the MangoPay SDK.

One API call is one *exchange flow*: a generator that builds the request,
yields it to a driver, receives the response, records it, classifies the
outcome and maps the body into the result type. The same flow runs under the
blocking client through :func:`run_sync` and under the asynchronous client
through :func:`run_async`; only the way the driver performs I/O differs.

The flow may yield more than one request. Credential providers that need a
token fetch yield theirs first, through the same driver.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, Generator, List, Optional, Sequence, Tuple, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from .auth import CredentialProvider
from .config import MangoPaySettings
from .constants import (
    APPLICATION_JSON,
    CONTENT_TYPE_HEADER,
    IDEMPOTENCY_KEY_HEADER,
    PAGE_PARAMETER,
    PER_PAGE_PARAMETER,
    SORT_PARAMETER,
    USER_AGENT,
    USER_AGENT_HEADER,
)
from .endpoints import MethodDescriptor
from .headers import read_pagination_headers
from .logging import log_request, log_response
from .models.base import MangoPayModel
from .models.errors import AuthenticationError, ResponseError, TimeoutError
from .pagination import ListPaginated, Pagination, Sort
from .telemetry import ExchangeRecord, record_exchange

logger = logging.getLogger(__name__)

T = TypeVar("T")

ExchangeFlow = Generator[httpx.Request, httpx.Response, Any]

SUCCESS_STATUS_CODES = frozenset({200, 204})


@dataclass
class RequestContext:
    """Per-call request options.

    Attributes:
        idempotency_key: Sent as ``Idempotency-Key`` when not blank
        custom_headers: Extra headers, applied after the SDK's own
        query_parameters: Extra query parameters, appended last
    """

    idempotency_key: Optional[str] = None
    custom_headers: Dict[str, str] = field(default_factory=dict)
    query_parameters: Dict[str, str] = field(default_factory=dict)


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def _encode_query(params: Sequence[Tuple[str, str]]) -> str:
    return "&".join(f"{quote(name, safe='')}={quote(value, safe='')}" for name, value in params)


def _serialize_entity(entity: Any) -> Any:
    if isinstance(entity, MangoPayModel):
        return entity.to_dict()
    return entity


class RestTool:
    """Builds, executes and maps MangoPay API calls.

    A ``RestTool`` holds no per-call state apart from ``last_request_info``,
    the record of the most recent exchange. Calls made concurrently through
    the same instance overwrite it in completion order.
    """

    def __init__(
        self,
        settings: MangoPaySettings,
        credentials: Optional[CredentialProvider] = None,
    ):
        self._settings = settings
        self._credentials = credentials
        self.last_request_info: Optional[ExchangeRecord] = None

    @property
    def settings(self) -> MangoPaySettings:
        return self._settings

    # ==================== Request Builder ====================

    def build_request(
        self,
        descriptor: MethodDescriptor,
        path_params: Optional[Dict[str, Any]] = None,
        entity: Any = None,
        context: Optional[RequestContext] = None,
        pagination: Optional[Pagination] = None,
        request_data: Optional[Dict[str, str]] = None,
        sort: Optional[Sort] = None,
        auth_header: Optional[Tuple[str, str]] = None,
    ) -> httpx.Request:
        """Assemble the outgoing request for one call.

        The client id is part of the path only when the endpoint requires it
        and the request is authenticated. Query parameters are appended in a
        fixed order: pagination, request data, sort, then the context's own.

        Args:
            descriptor: Endpoint description
            path_params: Values for the URL template placeholders
            entity: JSON body, a model or a plain dict
            context: Per-call options
            pagination: Page to request
            request_data: Flat filter values sent as query parameters
            sort: Sort order
            auth_header: ``(name, value)`` from the credential provider

        Returns:
            The request, ready to be sent
        """
        context = context or RequestContext()

        url = f"{self._settings.base_url}/{self._settings.api_version}"
        if descriptor.requires_client_id and auth_header is not None:
            url += f"/{quote(self._settings.client_id, safe='')}"
        url += descriptor.resolve(**(path_params or {}))

        query: List[Tuple[str, str]] = []
        if pagination is not None:
            query.append((PAGE_PARAMETER, str(pagination.page)))
            query.append((PER_PAGE_PARAMETER, str(pagination.items_per_page)))
        if request_data:
            query.extend((name, str(value)) for name, value in request_data.items())
        if sort is not None:
            query.append((SORT_PARAMETER, sort.to_query_value()))
        query.extend((name, str(value)) for name, value in context.query_parameters.items())
        if query:
            url += "?" + _encode_query(query)

        headers = httpx.Headers({
            CONTENT_TYPE_HEADER: APPLICATION_JSON,
            USER_AGENT_HEADER: USER_AGENT,
        })
        if context.idempotency_key and context.idempotency_key.strip():
            headers[IDEMPOTENCY_KEY_HEADER] = context.idempotency_key
        if auth_header is not None:
            headers[auth_header[0]] = auth_header[1]
        # Setting an httpx header replaces any existing one, ignoring case.
        for name, value in context.custom_headers.items():
            headers[name] = value

        if entity is None:
            return httpx.Request(descriptor.http_verb.value, url, headers=headers)
        return httpx.Request(
            descriptor.http_verb.value,
            url,
            headers=headers,
            json=_serialize_entity(entity),
        )

    # ==================== Request Executor ====================

    def exchange_flow(
        self,
        descriptor: MethodDescriptor,
        result_type: Any,
        *,
        as_list: bool = False,
        authenticate: bool = True,
        path_params: Optional[Dict[str, Any]] = None,
        entity: Any = None,
        context: Optional[RequestContext] = None,
        pagination: Optional[Pagination] = None,
        request_data: Optional[Dict[str, str]] = None,
        sort: Optional[Sort] = None,
    ) -> ExchangeFlow:
        """Run one API call as a generator of HTTP requests.

        Yields the requests to send and receives their responses; returns the
        mapped result. Request errors (transport or decoding failures) are
        thrown into the generator by the driver.

        Raises:
            AuthenticationError: On HTTP 401
            TimeoutError: When the transport timed out
            ResponseError: On any other failure status or a request error
            HeaderParseError: When a pagination count header is not numeric
        """
        auth_header: Optional[Tuple[str, str]] = None
        if authenticate:
            if self._credentials is None:
                raise ValueError("A credential provider is required for authenticated calls")
            auth_header = yield from self._credentials.authorization_flow(context)

        request = self.build_request(
            descriptor,
            path_params=path_params,
            entity=entity,
            context=context,
            pagination=pagination,
            request_data=request_data,
            sort=sort,
            auth_header=auth_header,
        )
        log_request(logger, request.method, str(request.url), request.headers, request.content)

        start_time = time.monotonic()
        try:
            response = yield request
        except httpx.TimeoutException as exc:
            self._record(request, None)
            logger.warning("HTTP %s %s timed out: %s", request.method, request.url, exc)
            raise TimeoutError(str(exc) or "Request timed out") from exc
        except httpx.RequestError as exc:
            self._record(request, None)
            logger.warning("HTTP %s %s failed: %s", request.method, request.url, exc)
            raise ResponseError("", 0, message=str(exc) or type(exc).__name__) from exc

        self._record(request, response)
        log_response(
            logger,
            response.status_code,
            response.content,
            duration_ms=(time.monotonic() - start_time) * 1000,
        )

        self.raise_for_status(response)

        if as_list:
            return self.map_list(response, result_type)
        return self.map_object(response, result_type)

    @staticmethod
    def raise_for_status(response: httpx.Response) -> None:
        """Classify a response; only 200 and 204 count as success."""
        status_code = response.status_code
        if status_code in SUCCESS_STATUS_CODES:
            return
        if status_code == 401:
            raise AuthenticationError(response.text)
        raise ResponseError(response.text, status_code)

    def _record(self, request: httpx.Request, response: Optional[httpx.Response]) -> None:
        self.last_request_info = record_exchange(request, response)

    # ==================== Response Mapper ====================

    def map_object(self, response: httpx.Response, result_type: Type[T]) -> Optional[T]:
        """Deserialize a single object; 204 or an empty body gives None."""
        if response.status_code == 204 or not response.content:
            return None
        return self._validate(response, result_type)

    def map_list(self, response: httpx.Response, item_type: Type[T]) -> ListPaginated[T]:
        """Deserialize a JSON array and read the pagination headers.

        Headers are only read when the status is exactly 200, even when the
        body is empty.
        """
        if response.status_code == 204:
            return ListPaginated()

        if response.content:
            result: ListPaginated[T] = ListPaginated(items=self._validate(response, List[item_type]))
        else:
            result = ListPaginated()
        if response.status_code == 200:
            read_pagination_headers(
                (
                    (name.decode("latin-1"), value.decode("latin-1"))
                    for name, value in response.headers.raw
                ),
                result.pagination,
            )
        return result

    @staticmethod
    def _validate(response: httpx.Response, result_type: Any) -> Any:
        try:
            return _adapter(result_type).validate_json(response.content)
        except ValidationError as exc:
            logger.error("Unexpected response body for %s: %s", result_type, exc)
            raise ResponseError(
                response.text,
                response.status_code,
                message=f"Unexpected response body: {exc.error_count()} validation error(s)",
            ) from exc


# ==================== Drivers ====================


def run_sync(flow: ExchangeFlow, http_client: httpx.Client) -> Any:
    """Drive an exchange flow with a blocking ``httpx.Client``."""
    try:
        request = next(flow)
        while True:
            try:
                response = http_client.send(request)
            except httpx.RequestError as exc:
                request = flow.throw(exc)
            else:
                request = flow.send(response)
    except StopIteration as stop:
        return stop.value


async def run_async(flow: ExchangeFlow, http_client: httpx.AsyncClient) -> Any:
    """Drive an exchange flow with an ``httpx.AsyncClient``."""
    try:
        request = next(flow)
        while True:
            try:
                response = await http_client.send(request)
            except httpx.RequestError as exc:
                request = flow.throw(exc)
            else:
                request = flow.send(response)
    except StopIteration as stop:
        return stop.value
