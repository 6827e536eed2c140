"""MangoPay SDK Models."""
from .base import EntityBase, FilterBase, MangoPayModel
from .common import Address, CurrencyIso, FundsType, Money
from .client import Client, ClientLogoPut, ClientPut
from .user import (
    LegalPersonType,
    PersonType,
    User,
    UserLegal,
    UserLegalPost,
    UserNatural,
    UserNaturalPost,
    UserNaturalPut,
)
from .wallet import Wallet, WalletPost, WalletPut
from .transaction import FilterTransactions, Transaction, TransactionStatus, TransactionType
from .kyc import (
    FilterKycDocuments,
    KycDocument,
    KycDocumentPost,
    KycDocumentPut,
    KycDocumentType,
    KycPagePost,
    KycStatus,
)
from .dispute import (
    Dispute,
    DisputeContestPut,
    DisputeStatus,
    DisputeTagPut,
    DisputeType,
    FilterDisputes,
)
from .mandate import Mandate, MandatePost, MandateStatus
from .payout import ClientBankWireDirectPost, PayInBankWireDirect, PayOut, PayOutBankWirePost
from .hook import Event, FilterEvents, Hook, HookPost, HookPut
from .idempotency import IdempotencyResponse
from .errors import (
    AuthenticationError,
    HeaderParseError,
    MangoPayError,
    ResponseError,
    TimeoutError,
)

__all__ = [
    "MangoPayModel",
    "EntityBase",
    "FilterBase",
    "Address",
    "CurrencyIso",
    "FundsType",
    "Money",
    "Client",
    "ClientPut",
    "ClientLogoPut",
    "PersonType",
    "LegalPersonType",
    "User",
    "UserNatural",
    "UserLegal",
    "UserNaturalPost",
    "UserNaturalPut",
    "UserLegalPost",
    "Wallet",
    "WalletPost",
    "WalletPut",
    "Transaction",
    "TransactionStatus",
    "TransactionType",
    "FilterTransactions",
    "KycDocument",
    "KycDocumentPost",
    "KycDocumentPut",
    "KycDocumentType",
    "KycPagePost",
    "KycStatus",
    "FilterKycDocuments",
    "Dispute",
    "DisputeContestPut",
    "DisputeStatus",
    "DisputeTagPut",
    "DisputeType",
    "FilterDisputes",
    "Mandate",
    "MandatePost",
    "MandateStatus",
    "PayOut",
    "PayOutBankWirePost",
    "PayInBankWireDirect",
    "ClientBankWireDirectPost",
    "Hook",
    "HookPost",
    "HookPut",
    "Event",
    "FilterEvents",
    "IdempotencyResponse",
    "MangoPayError",
    "AuthenticationError",
    "TimeoutError",
    "ResponseError",
    "HeaderParseError",
]
