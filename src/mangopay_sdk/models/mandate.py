"""Direct-debit mandate models."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from .base import EntityBase, MangoPayModel


class MandateStatus(str, Enum):
    CREATED = "CREATED"
    SUBMITTED = "SUBMITTED"
    ACTIVE = "ACTIVE"
    FAILED = "FAILED"
    EXPIRED = "EXPIRED"


class Mandate(EntityBase):
    bank_account_id: Optional[str] = None
    user_id: Optional[str] = None
    return_url: Optional[str] = None
    redirect_url: Optional[str] = None
    document_url: Optional[str] = None
    culture: Optional[str] = None
    scheme: Optional[str] = None
    status: Optional[MandateStatus] = None
    result_code: Optional[str] = None
    result_message: Optional[str] = None
    execution_type: Optional[str] = None
    mandate_type: Optional[str] = None
    bank_reference: Optional[str] = None


class MandatePost(MangoPayModel):
    bank_account_id: str
    culture: str
    return_url: str
    bank_reference: Optional[str] = None
    tag: Optional[str] = None
