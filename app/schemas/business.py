from pydantic import Field, field_validator
from typing import Any, Dict, List, Optional
from datetime import datetime
from app.schemas.base import CamelModel
from app.schemas.business_account import BusinessAccountBase
from app.utils.custom_fields import normalize_custom_fields


OPTIONAL_TEXT_FIELDS = (
    "address",
    "phone",
    "email",
    "website",
    "industry",
    "contact_person",
    "establishment_date",
    "charter_capital",
    "audit_website",
    "account",
    "password",
    "bank_account",
    "bank_name",
    "notes",
)


class BusinessBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    tax_id: str = Field(..., min_length=1, max_length=100)
    address: str = ""
    phone: str = Field("", max_length=50)
    email: str = Field("", max_length=255)
    website: str = Field("", max_length=255)
    industry: str = Field("", max_length=255)
    contact_person: str = Field("", max_length=255)
    establishment_date: str = Field("", max_length=50)
    charter_capital: str = Field("", max_length=100)
    audit_website: str = Field("", max_length=255)
    account: str = Field("", max_length=255)
    password: str = Field("", max_length=255)
    bank_account: str = Field("", max_length=255)
    bank_name: str = Field("", max_length=255)
    custom_fields: Dict[str, str] = Field(default_factory=dict)
    notes: str = ""

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("name", "tax_id", mode="before")
    @classmethod
    def strip_required(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("custom_fields", mode="before")
    @classmethod
    def decode_custom_fields(cls, value: Any) -> Dict[str, str]:
        return normalize_custom_fields(value)


class BusinessCreate(BusinessBase, BusinessAccountBase):
    """Business payload, optionally carrying the credential fields of its account."""

    def business_fields(self) -> Dict[str, Any]:
        return self.model_dump(include=set(BusinessBase.model_fields))

    def account_fields(self) -> Dict[str, Any]:
        return self.model_dump(include=set(BusinessAccountBase.model_fields))


class BusinessUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    tax_id: Optional[str] = Field(None, min_length=1, max_length=100)
    address: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[str] = Field(None, max_length=255)
    website: Optional[str] = Field(None, max_length=255)
    industry: Optional[str] = Field(None, max_length=255)
    contact_person: Optional[str] = Field(None, max_length=255)
    establishment_date: Optional[str] = Field(None, max_length=50)
    charter_capital: Optional[str] = Field(None, max_length=100)
    audit_website: Optional[str] = Field(None, max_length=255)
    account: Optional[str] = Field(None, max_length=255)
    password: Optional[str] = Field(None, max_length=255)
    bank_account: Optional[str] = Field(None, max_length=255)
    bank_name: Optional[str] = Field(None, max_length=255)
    custom_fields: Optional[Dict[str, str]] = None
    notes: Optional[str] = None

    @field_validator("name", "tax_id", mode="before")
    @classmethod
    def strip_required(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("custom_fields", mode="before")
    @classmethod
    def decode_custom_fields(cls, value: Any) -> Optional[Dict[str, str]]:
        if value is None:
            return None
        return normalize_custom_fields(value)


class BusinessResponse(CamelModel):
    """Stored business as returned to clients. No input constraints apply."""
    id: int
    name: str
    tax_id: str
    address: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""
    industry: str = ""
    contact_person: str = ""
    establishment_date: str = ""
    charter_capital: str = ""
    audit_website: str = ""
    account: str = ""
    password: str = ""
    bank_account: str = ""
    bank_name: str = ""
    access_code: Optional[str] = None
    custom_fields: Dict[str, str] = Field(default_factory=dict)
    notes: str = ""
    created_at: datetime

    @field_validator(*OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("custom_fields", mode="before")
    @classmethod
    def decode_custom_fields(cls, value: Any) -> Dict[str, str]:
        return normalize_custom_fields(value)


class BusinessListResponse(CamelModel):
    businesses: List[BusinessResponse]
    total: int


class BusinessSearchRequest(CamelModel):
    field: str = Field(..., min_length=1)
    value: str


class PasswordConfirmation(CamelModel):
    password: str


class AccessCodeUpdate(CamelModel):
    access_code: str = Field(..., min_length=1, max_length=255)
