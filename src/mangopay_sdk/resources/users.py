"""
Users resource for the MangoPay SDK.

Users are either natural persons or legal entities. Both kinds share the
``/users/{user_id}`` endpoint, which answers with the common fields only.
"""
from __future__ import annotations

from typing import Optional

from ..endpoints import MethodKey
from ..models import (
    FilterTransactions,
    Transaction,
    User,
    UserLegal,
    UserLegalPost,
    UserNatural,
    UserNaturalPost,
    UserNaturalPut,
    Wallet,
)
from ..pagination import Pagination, Sort
from ..rest_tool import RequestContext
from .base import BaseResource


class UsersResource(BaseResource):
    """Resource for natural and legal users.

    Example:
        ```python
        user = api.users.create_natural(
            UserNaturalPost(
                email="jane@example.com",
                first_name="Jane",
                last_name="Doe",
                birthday=188352000,
                nationality="FR",
                country_of_residence="FR",
            ),
            idempotency_key="create-jane",
        )
        ```
    """

    def create_natural(
        self,
        user: UserNaturalPost,
        idempotency_key: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ):
        """Create a natural user."""
        return self._create_object(
            MethodKey.USERS_CREATE_NATURALS,
            UserNatural,
            user,
            idempotency_key=idempotency_key,
            context=context,
        )

    def create_legal(
        self,
        user: UserLegalPost,
        idempotency_key: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ):
        """Create a legal user."""
        return self._create_object(
            MethodKey.USERS_CREATE_LEGALS,
            UserLegal,
            user,
            idempotency_key=idempotency_key,
            context=context,
        )

    def get(self, user_id: str, context: Optional[RequestContext] = None):
        """Get a user of either kind."""
        return self._get_object(MethodKey.USERS_GET, User, context=context, user_id=user_id)

    def get_natural(self, user_id: str, context: Optional[RequestContext] = None):
        return self._get_object(
            MethodKey.USERS_GET_NATURALS, UserNatural, context=context, user_id=user_id
        )

    def get_legal(self, user_id: str, context: Optional[RequestContext] = None):
        return self._get_object(
            MethodKey.USERS_GET_LEGALS, UserLegal, context=context, user_id=user_id
        )

    def save_natural(
        self,
        user_id: str,
        user: UserNaturalPut,
        context: Optional[RequestContext] = None,
    ):
        """Update a natural user."""
        return self._update_object(
            MethodKey.USERS_SAVE_NATURALS,
            UserNatural,
            user,
            context=context,
            user_id=user_id,
        )

    def get_all(
        self,
        pagination: Optional[Pagination] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List all users."""
        return self._get_list(
            MethodKey.USERS_ALL,
            User,
            pagination=pagination,
            sort=sort,
            context=context,
        )

    def get_wallets(
        self,
        user_id: str,
        pagination: Optional[Pagination] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List the wallets owned by a user."""
        return self._get_list(
            MethodKey.USERS_ALL_WALLETS,
            Wallet,
            pagination=pagination,
            sort=sort,
            context=context,
            user_id=user_id,
        )

    def get_transactions(
        self,
        user_id: str,
        pagination: Optional[Pagination] = None,
        filters: Optional[FilterTransactions] = None,
        sort: Optional[Sort] = None,
        context: Optional[RequestContext] = None,
    ):
        """List the transactions of a user."""
        return self._get_list(
            MethodKey.USERS_ALL_TRANSACTIONS,
            Transaction,
            pagination=pagination,
            filters=filters,
            sort=sort,
            context=context,
            user_id=user_id,
        )
