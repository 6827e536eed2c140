"""
KYC resource for the MangoPay SDK.

A KYC document is created empty, filled with one or more pages and then
submitted for validation by setting its status to ``VALIDATION_ASKED``.
"""
from __future__ import annotations

from typing import Optional

from ..endpoints import MethodKey
from ..models import (
    FilterKycDocuments,
    KycDocument,
    KycDocumentPost,
    KycDocumentPut,
    KycPagePost,
    KycStatus,
)
from ..pagination import Pagination, Sort
from ..rest_tool import RequestContext
from .base import BaseResource


class KycResource(BaseResource):
    """Resource for KYC documents.

    Example:
        ```python
        document = api.kyc.create_document(
            "user_123", KycDocumentPost(type=KycDocumentType.IDENTITY_PROOF)
        )
        api.kyc.create_page("user_123", document.id, KycPagePost(file=encoded_scan))
        api.kyc.submit("user_123", document.id)
        ```
    """

    def get_all(
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

    def get(self, document_id: str, context: Optional[RequestContext] = None):
        return self._get_object(
            MethodKey.KYC_DOCUMENT_GET, KycDocument, context=context, document_id=document_id
        )

    def create_document(
        self,
        user_id: str,
        document: KycDocumentPost,
        idempotency_key: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ):
        """Create an empty KYC document for a user."""
        return self._create_object(
            MethodKey.USERS_CREATE_KYC_DOCUMENT,
            KycDocument,
            document,
            idempotency_key=idempotency_key,
            context=context,
            user_id=user_id,
        )

    def create_page(
        self,
        user_id: str,
        document_id: str,
        page: KycPagePost,
        idempotency_key: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ):
        """Add a page to a KYC document.

        The API answers with no content, so the result is None on success.
        """
        return self._create_object(
            MethodKey.USERS_CREATE_KYC_PAGE,
            KycDocument,
            page,
            idempotency_key=idempotency_key,
            context=context,
            user_id=user_id,
            document_id=document_id,
        )

    def submit(
        self,
        user_id: str,
        document_id: str,
        tag: Optional[str] = None,
        context: Optional[RequestContext] = None,
    ):
        """Ask for validation of a KYC document."""
        return self._update_object(
            MethodKey.USERS_SAVE_KYC_DOCUMENT,
            KycDocument,
            KycDocumentPut(status=KycStatus.VALIDATION_ASKED, tag=tag),
            context=context,
            user_id=user_id,
            document_id=document_id,
        )
