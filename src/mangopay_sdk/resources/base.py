"""
Base resource class for the MangoPay SDK.

Resource methods are written once and shared by both clients: they describe
the call and hand it to the owning client, which returns the result directly
(``MangoPayApi``) or as an awaitable (``AsyncMangoPayApi``).
"""
from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Optional, Type

from ..endpoints import MethodKey
from ..models.base import FilterBase
from ..pagination import Pagination, Sort
from ..rest_tool import RequestContext

if TYPE_CHECKING:
    from ..client import BaseMangoPayApi


def with_idempotency_key(
    context: Optional[RequestContext],
    idempotency_key: Optional[str],
) -> Optional[RequestContext]:
    """Return ``context`` carrying ``idempotency_key``, leaving the original untouched."""
    if idempotency_key is None:
        return context
    return replace(context or RequestContext(), idempotency_key=idempotency_key)


class BaseResource:
    """Base class for API resources.

    Attributes:
        _client: The owning client instance
    """

    def __init__(self, client: "BaseMangoPayApi") -> None:
        self._client = client

    def _get_object(
        self,
        key: MethodKey,
        result_type: Type[Any],
        context: Optional[RequestContext] = None,
        **path_params: Any,
    ) -> Any:
        """Fetch a single object.

        Args:
            key: Endpoint to call
            result_type: Model the body is validated into
            context: Optional request context
            **path_params: URL template values

        Returns:
            The model, or None on 204
        """
        return self._client._request(
            key,
            result_type,
            path_params=path_params,
            context=context,
        )

    def _get_list(
        self,
        key: MethodKey,
        item_type: Type[Any],
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterBase] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
        **path_params: Any,
    ) -> Any:
        """Fetch one page of a collection.

        Args:
            key: Endpoint to call
            item_type: Model each element is validated into
            pagination: Page to request
            filters: Filter sent as flat query parameters
            sort: Sort order
            context: Optional request context
            **path_params: URL template values

        Returns:
            ListPaginated of ``item_type``
        """
        return self._client._request(
            key,
            item_type,
            as_list=True,
            path_params=path_params,
            pagination=pagination,
            request_data=filters.get_values() if filters is not None else None,
            sort=sort,
            context=context,
        )

    def _create_object(
        self,
        key: MethodKey,
        result_type: Type[Any],
        entity: Any,
        idempotency_key: Optional[str] = None,
        context: Optional[RequestContext] = None,
        **path_params: Any,
    ) -> Any:
        return self._client._request(
            key,
            result_type,
            path_params=path_params,
            entity=entity,
            context=with_idempotency_key(context, idempotency_key),
        )

    def _update_object(
        self,
        key: MethodKey,
        result_type: Type[Any],
        entity: Any,
        context: Optional[RequestContext] = None,
        **path_params: Any,
    ) -> Any:
        return self._client._request(
            key,
            result_type,
            path_params=path_params,
            entity=entity,
            context=context,
        )
