from sqlalchemy import Column, ForeignKey, Integer, String, Text, DateTime, Boolean, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base


DEFAULT_DOCUMENT_TYPE = "Hồ sơ khác"

DOCUMENT_TYPES = (
    "Hồ sơ thành lập doanh nghiệp",
    "Hồ sơ thay đổi đăng ký kinh doanh",
    "Hồ sơ giải thể doanh nghiệp",
    "Hồ sơ thuế",
    "Hồ sơ BHXH",
    "Hồ sơ lao động",
    DEFAULT_DOCUMENT_TYPE,
)


class DocumentTransaction(Base):
    """One handover of documents between two named companies."""
    __tablename__ = "document_transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    business_id = Column(Integer, ForeignKey("businesses.id", ondelete="CASCADE"), nullable=False, index=True)
    document_number = Column(String(100), nullable=True)
    document_type = Column(String(255), nullable=False, default=DEFAULT_DOCUMENT_TYPE)
    document_types = Column(JSON, nullable=False, default=list)
    document_counts = Column(JSON, nullable=False, default=dict)

    delivery_company = Column(String(255), nullable=False)
    receiving_company = Column(String(255), nullable=False)
    delivery_person = Column(String(255), default="")
    receiving_person = Column(String(255), default="")
    delivery_date = Column(DateTime, nullable=False, default=datetime.now)
    receiving_date = Column(DateTime, nullable=True)

    handled_by = Column(String(255), nullable=False)
    notes = Column(Text, default="")
    status = Column(String(50), nullable=False, default="pending")
    signed_file_path = Column(String(500), nullable=True)
    is_hidden = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    business = relationship("Business", back_populates="document_transactions")
