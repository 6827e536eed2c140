"""Events resource for the MangoPay SDK."""
from __future__ import annotations

from typing import Optional

from ..endpoints import MethodKey
from ..models import Event, FilterEvents
from ..pagination import Pagination, Sort
from ..rest_tool import RequestContext
from .base import BaseResource


class EventsResource(BaseResource):
    """Resource for the platform's event log."""

    def get_all(
        self,
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterEvents] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List events, newest last unless sorted otherwise."""
        return self._get_list(
            MethodKey.EVENTS_ALL,
            Event,
            pagination=pagination,
            filters=filters,
            sort=sort,
            context=context,
        )
