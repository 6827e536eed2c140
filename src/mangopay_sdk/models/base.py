"""Base models for the MangoPay SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class MangoPayModel(BaseModel):
    """Base model: snake_case attributes, PascalCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to the JSON shape sent to the API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MangoPayModel":
        """Create model from dictionary."""
        return cls.model_validate(data)


class EntityBase(MangoPayModel):
    """Fields shared by every entity the API returns."""

    id: str
    tag: str | None = None
    creation_date: int | None = None


class FilterBase(MangoPayModel):
    """Filter sent as flat query parameters.

    Datetimes are converted to unix timestamps, as the API expects.
    """

    def get_values(self) -> Dict[str, str]:
        values: Dict[str, str] = {}
        for name, value in self.model_dump(by_alias=True, exclude_none=True).items():
            if isinstance(value, datetime):
                value = int(value.timestamp())
            values[name] = str(value)
        return values
