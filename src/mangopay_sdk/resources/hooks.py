"""Webhooks resource for the MangoPay SDK."""
from __future__ import annotations

from typing import Optional

from ..endpoints import MethodKey
from ..models import Hook, HookPost, HookPut
from ..pagination import Pagination, Sort
from ..rest_tool import RequestContext
from .base import BaseResource


class HooksResource(BaseResource):
    """Resource for webhook subscriptions.

    One hook exists per event type; MangoPay calls its URL whenever an event
    of that type occurs.
    """

    def create(
        self,
        hook: HookPost,
        idempotency_key: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ):
        return self._create_object(
            MethodKey.HOOKS_CREATE,
            Hook,
            hook,
            idempotency_key=idempotency_key,
            context=context,
        )

    def get(self, hook_id: str, context: Optional[RequestContext] = None):
        return self._get_object(MethodKey.HOOKS_GET, Hook, context=context, hook_id=hook_id)

    def save(self, hook_id: str, hook: HookPut, context: Optional[RequestContext] = None):
        """Update a hook's URL, status or tag."""
        return self._update_object(MethodKey.HOOKS_SAVE, Hook, hook, context=context, hook_id=hook_id)

    def get_all(
        self,
        pagination: Optional[Pagination] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        return self._get_list(
            MethodKey.HOOKS_ALL,
            Hook,
            pagination=pagination,
            sort=sort,
            context=context,
        )
