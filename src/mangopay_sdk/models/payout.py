"""Pay-out and bank wire pay-in models."""
from __future__ import annotations

from typing import Optional

from .base import MangoPayModel
from .common import Money
from .transaction import Transaction


class PayOut(Transaction):
    payment_type: Optional[str] = None
    bank_account_id: Optional[str] = None
    bank_wire_ref: Optional[str] = None


class PayOutBankWirePost(MangoPayModel):
    author_id: str
    debited_wallet_id: str
    debited_funds: Money
    fees: Money
    bank_account_id: str
    bank_wire_ref: Optional[str] = None
    tag: Optional[str] = None


class PayInBankWireDirect(Transaction):
    """Bank wire pay-in; the user wires funds to the returned account."""

    declared_debited_funds: Optional[Money] = None
    declared_fees: Optional[Money] = None
    wire_reference: Optional[str] = None
    payment_type: Optional[str] = None


class ClientBankWireDirectPost(MangoPayModel):
    credited_wallet_id: str
    declared_debited_funds: Money
    tag: Optional[str] = None
