from pydantic import Field
from typing import Optional
from datetime import datetime
from app.schemas.base import CamelModel


class BusinessAccountBase(CamelModel):
    invoice_lookup_id: Optional[str] = Field(None, max_length=255)
    invoice_lookup_pass: Optional[str] = Field(None, max_length=255)
    web_invoice_website: Optional[str] = Field(None, max_length=255)
    web_invoice_id: Optional[str] = Field(None, max_length=255)
    web_invoice_pass: Optional[str] = Field(None, max_length=255)
    social_insurance_code: Optional[str] = Field(None, max_length=255)
    social_insurance_id: Optional[str] = Field(None, max_length=255)
    social_insurance_main_pass: Optional[str] = Field(None, max_length=255)
    social_insurance_secondary_pass: Optional[str] = Field(None, max_length=255)
    social_insurance_contact: Optional[str] = Field(None, max_length=255)
    statistics_id: Optional[str] = Field(None, max_length=255)
    statistics_pass: Optional[str] = Field(None, max_length=255)
    token_id: Optional[str] = Field(None, max_length=255)
    token_pass: Optional[str] = Field(None, max_length=255)
    token_provider: Optional[str] = Field(None, max_length=255)
    token_registration_date: Optional[str] = Field(None, max_length=50)
    token_expiration_date: Optional[str] = Field(None, max_length=50)
    tax_account_id: Optional[str] = Field(None, max_length=255)
    tax_account_pass: Optional[str] = Field(None, max_length=255)


class BusinessAccountCreate(BusinessAccountBase):
    pass


class BusinessAccountUpdate(BusinessAccountBase):
    pass


class BusinessAccountResponse(BusinessAccountBase):
    id: int
    business_id: int
    created_at: datetime
    updated_at: Optional[datetime] = None
