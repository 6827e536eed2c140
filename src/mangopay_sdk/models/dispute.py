"""Dispute models."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from .base import EntityBase, FilterBase, MangoPayModel
from .common import Money


class DisputeStatus(str, Enum):
    CREATED = "CREATED"
    PENDING_CLIENT_ACTION = "PENDING_CLIENT_ACTION"
    SUBMITTED = "SUBMITTED"
    PENDING_BANK_ACTION = "PENDING_BANK_ACTION"
    REOPENED_PENDING_CLIENT_ACTION = "REOPENED_PENDING_CLIENT_ACTION"
    CLOSED = "CLOSED"


class DisputeType(str, Enum):
    CONTESTABLE = "CONTESTABLE"
    NOT_CONTESTABLE = "NOT_CONTESTABLE"
    RETRIEVAL = "RETRIEVAL"


class Dispute(EntityBase):
    initial_transaction_id: Optional[str] = None
    initial_transaction_type: Optional[str] = None
    dispute_type: Optional[DisputeType] = None
    status: Optional[DisputeStatus] = None
    status_message: Optional[str] = None
    disputed_funds: Optional[Money] = None
    contested_funds: Optional[Money] = None
    contest_deadline_date: Optional[int] = None
    result_code: Optional[str] = None
    result_message: Optional[str] = None


class DisputeTagPut(MangoPayModel):
    tag: str


class DisputeContestPut(MangoPayModel):
    contested_funds: Optional[Money] = None
    tag: Optional[str] = None


class FilterDisputes(FilterBase):
    status: Optional[DisputeStatus] = None
    dispute_type: Optional[DisputeType] = None
    before_date: Optional[datetime] = None
    after_date: Optional[datetime] = None
