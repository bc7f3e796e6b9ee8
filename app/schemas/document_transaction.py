from pydantic import Field, field_validator
from typing import Any, Dict, List, Optional
from datetime import datetime
from app.models.document_transaction import DEFAULT_DOCUMENT_TYPE, DOCUMENT_TYPES
from app.schemas.base import CamelModel


class DocumentTransactionBase(CamelModel):
    document_number: Optional[str] = Field(None, max_length=100)
    document_type: str = DEFAULT_DOCUMENT_TYPE
    document_types: List[str] = Field(default_factory=list)
    document_counts: Dict[str, int] = Field(default_factory=dict)
    delivery_company: str = Field(..., min_length=1, max_length=255)
    receiving_company: str = Field(..., min_length=1, max_length=255)
    delivery_person: str = Field("", max_length=255)
    receiving_person: str = Field("", max_length=255)
    handled_by: str = Field(..., min_length=1, max_length=255)
    notes: str = ""
    status: str = Field("pending", min_length=1, max_length=50)
    is_hidden: bool = False

    @field_validator("document_type", mode="before")
    @classmethod
    def default_document_type(cls, value: Any) -> Any:
        if value is None or value == "":
            return DEFAULT_DOCUMENT_TYPE
        return value

    @field_validator("delivery_person", "receiving_person", "notes", mode="before")
    @classmethod
    def none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class DocumentTransactionCreate(DocumentTransactionBase):
    # Both dates default to the creation time when omitted
    delivery_date: Optional[datetime] = None
    receiving_date: Optional[datetime] = None

    @field_validator("document_type")
    @classmethod
    def check_document_type(cls, value: str) -> str:
        if value not in DOCUMENT_TYPES:
            raise ValueError(f"document type must be one of: {', '.join(DOCUMENT_TYPES)}")
        return value

    @field_validator("delivery_date", "receiving_date", mode="before")
    @classmethod
    def blank_date_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class DocumentTransactionResponse(DocumentTransactionBase):
    id: int
    business_id: int
    delivery_date: datetime
    receiving_date: Optional[datetime] = None
    signed_file_path: Optional[str] = None
    created_at: datetime


class DocumentNumberUpdate(CamelModel):
    document_number: str = Field(..., max_length=100)


class PdfPathUpdate(CamelModel):
    pdf_path: str = Field(..., min_length=1, max_length=500)


class PdfUploadResponse(CamelModel):
    success: bool = True
    message: str
    pdf_path: str
    transaction: DocumentTransactionResponse
