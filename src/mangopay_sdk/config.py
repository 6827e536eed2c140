"""Configuration surface for the MangoPay SDK."""
from __future__ import annotations

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SANDBOX_BASE_URL = "https://api.sandbox.mangopay.com"
PRODUCTION_BASE_URL = "https://api.mangopay.com"


class MangoPaySettings(BaseSettings):
    """Client configuration, read from ``MANGOPAY_*`` environment variables.

    ``timeout`` is in seconds and applies to connecting and to every request;
    0 keeps the transport default.
    """

    model_config = SettingsConfigDict(
        env_prefix="MANGOPAY_",
        env_file=".env",
        extra="ignore",
    )

    client_id: str = ""
    client_api_key: SecretStr = SecretStr("")
    base_url: str = SANDBOX_BASE_URL
    api_version: str = "v2.01"
    timeout: float = Field(default=0, ge=0)
    default_items_per_page: int = Field(default=10, ge=1)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("api_version")
    @classmethod
    def strip_slashes(cls, v: str) -> str:
        return v.strip("/")
