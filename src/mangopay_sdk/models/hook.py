"""Webhook and event models."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from .base import EntityBase, FilterBase, MangoPayModel


class Hook(EntityBase):
    url: Optional[str] = None
    status: Optional[str] = None
    validity: Optional[str] = None
    event_type: Optional[str] = None


class HookPost(MangoPayModel):
    url: str
    event_type: str
    tag: Optional[str] = None


class HookPut(MangoPayModel):
    url: Optional[str] = None
    status: Optional[str] = None
    tag: Optional[str] = None


class Event(MangoPayModel):
    resource_id: str
    event_type: str
    date: int


class FilterEvents(FilterBase):
    event_type: Optional[str] = None
    before_date: Optional[datetime] = None
    after_date: Optional[datetime] = None
