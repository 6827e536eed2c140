"""User models."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from .base import EntityBase, MangoPayModel
from .common import Address


class PersonType(str, Enum):
    NATURAL = "NATURAL"
    LEGAL = "LEGAL"


class LegalPersonType(str, Enum):
    BUSINESS = "BUSINESS"
    ORGANIZATION = "ORGANIZATION"
    SOLETRADER = "SOLETRADER"


class User(EntityBase):
    person_type: PersonType
    email: Optional[str] = None
    kyc_level: Optional[str] = None


class UserNatural(User):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[Address] = None
    birthday: Optional[int] = None
    nationality: Optional[str] = None
    country_of_residence: Optional[str] = None
    occupation: Optional[str] = None


class UserLegal(User):
    name: Optional[str] = None
    legal_person_type: Optional[LegalPersonType] = None
    headquarters_address: Optional[Address] = None
    legal_representative_first_name: Optional[str] = None
    legal_representative_last_name: Optional[str] = None
    company_number: Optional[str] = None


class UserNaturalPost(MangoPayModel):
    email: str
    first_name: str
    last_name: str
    birthday: int
    nationality: str
    country_of_residence: str
    address: Optional[Address] = None
    occupation: Optional[str] = None
    tag: Optional[str] = None


class UserNaturalPut(MangoPayModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[Address] = None
    occupation: Optional[str] = None
    tag: Optional[str] = None


class UserLegalPost(MangoPayModel):
    email: str
    name: str
    legal_person_type: LegalPersonType
    legal_representative_first_name: str
    legal_representative_last_name: str
    headquarters_address: Optional[Address] = None
    company_number: Optional[str] = None
    tag: Optional[str] = None
