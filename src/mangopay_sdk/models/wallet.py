"""Wallet models."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import EntityBase, MangoPayModel
from .common import CurrencyIso, FundsType, Money


class Wallet(EntityBase):
    """E-money wallet owned by one or more users."""

    owners: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    balance: Optional[Money] = None
    currency: Optional[CurrencyIso] = None
    funds_type: Optional[FundsType] = None


class WalletPost(MangoPayModel):
    owners: List[str]
    description: str
    currency: CurrencyIso
    tag: Optional[str] = None


class WalletPut(MangoPayModel):
    description: Optional[str] = None
    tag: Optional[str] = None
