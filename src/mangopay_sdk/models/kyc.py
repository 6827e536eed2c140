"""KYC document models."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from .base import EntityBase, FilterBase, MangoPayModel


class KycDocumentType(str, Enum):
    IDENTITY_PROOF = "IDENTITY_PROOF"
    REGISTRATION_PROOF = "REGISTRATION_PROOF"
    ARTICLES_OF_ASSOCIATION = "ARTICLES_OF_ASSOCIATION"
    SHAREHOLDER_DECLARATION = "SHAREHOLDER_DECLARATION"
    ADDRESS_PROOF = "ADDRESS_PROOF"


class KycStatus(str, Enum):
    CREATED = "CREATED"
    VALIDATION_ASKED = "VALIDATION_ASKED"
    VALIDATED = "VALIDATED"
    REFUSED = "REFUSED"
    OUT_OF_DATE = "OUT_OF_DATE"


class KycDocument(EntityBase):
    type: Optional[KycDocumentType] = None
    status: Optional[KycStatus] = None
    refused_reason_type: Optional[str] = None
    refused_reason_message: Optional[str] = None
    user_id: Optional[str] = None
    processed_date: Optional[int] = None


class KycDocumentPost(MangoPayModel):
    type: KycDocumentType
    tag: Optional[str] = None


class KycPagePost(MangoPayModel):
    """Base64-encoded page of a KYC document."""

    file: str


class KycDocumentPut(MangoPayModel):
    status: KycStatus
    tag: Optional[str] = None


class FilterKycDocuments(FilterBase):
    status: Optional[KycStatus] = None
    type: Optional[KycDocumentType] = None
    before_date: Optional[datetime] = None
    after_date: Optional[datetime] = None
