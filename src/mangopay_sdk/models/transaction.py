"""Transaction models."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from .base import EntityBase, FilterBase
from .common import Money


class TransactionStatus(str, Enum):
    CREATED = "CREATED"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class TransactionType(str, Enum):
    PAYIN = "PAYIN"
    PAYOUT = "PAYOUT"
    TRANSFER = "TRANSFER"


class Transaction(EntityBase):
    author_id: Optional[str] = None
    credited_user_id: Optional[str] = None
    debited_funds: Optional[Money] = None
    credited_funds: Optional[Money] = None
    fees: Optional[Money] = None
    status: Optional[TransactionStatus] = None
    result_code: Optional[str] = None
    result_message: Optional[str] = None
    execution_date: Optional[int] = None
    type: Optional[TransactionType] = None
    nature: Optional[str] = None
    debited_wallet_id: Optional[str] = None
    credited_wallet_id: Optional[str] = None


class FilterTransactions(FilterBase):
    status: Optional[TransactionStatus] = None
    type: Optional[TransactionType] = None
    nature: Optional[str] = None
    before_date: Optional[datetime] = None
    after_date: Optional[datetime] = None
