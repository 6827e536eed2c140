"""
Resources for the MangoPay SDK.

Each resource groups the endpoints of one API area. Resources are shared by
the blocking and the asynchronous client.
"""
from .base import BaseResource, with_idempotency_key
from .clients import ClientsResource
from .users import UsersResource
from .wallets import WalletsResource
from .kyc import KycResource
from .disputes import DisputesResource
from .mandates import MandatesResource
from .payouts import PayOutsResource
from .idempotency import IdempotencyResource
from .hooks import HooksResource
from .events import EventsResource

__all__ = [
    "BaseResource",
    "with_idempotency_key",
    "ClientsResource",
    "UsersResource",
    "WalletsResource",
    "KycResource",
    "DisputesResource",
    "MandatesResource",
    "PayOutsResource",
    "IdempotencyResource",
    "HooksResource",
    "EventsResource",
]
