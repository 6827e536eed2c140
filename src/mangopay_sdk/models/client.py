"""Platform client models."""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from .base import MangoPayModel
from .common import Address


class Client(MangoPayModel):
    """The platform account the SDK acts for."""

    client_id: str = Field(alias="ClientId")
    name: Optional[str] = None
    registered_name: Optional[str] = None
    primary_theme_colour: Optional[str] = None
    primary_button_colour: Optional[str] = None
    logo: Optional[str] = None
    tech_emails: List[str] = Field(default_factory=list)
    admin_emails: List[str] = Field(default_factory=list)
    billing_emails: List[str] = Field(default_factory=list)
    fraud_emails: List[str] = Field(default_factory=list)
    headquarters_address: Optional[Address] = None
    tax_number: Optional[str] = None
    platform_url: Optional[str] = Field(default=None, alias="PlatformURL")


class ClientPut(MangoPayModel):
    """Updatable client fields."""

    primary_theme_colour: Optional[str] = None
    primary_button_colour: Optional[str] = None
    tech_emails: Optional[List[str]] = None
    admin_emails: Optional[List[str]] = None
    billing_emails: Optional[List[str]] = None
    fraud_emails: Optional[List[str]] = None
    headquarters_address: Optional[Address] = None
    tax_number: Optional[str] = None
    platform_url: Optional[str] = Field(default=None, alias="PlatformURL")


class ClientLogoPut(MangoPayModel):
    """Base64-encoded logo file."""

    file: str
