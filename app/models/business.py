from sqlalchemy import Column, ForeignKey, Integer, String, Text, DateTime, JSON
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base


class Business(Base):
    __tablename__ = "businesses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    tax_id = Column(String(100), unique=True, nullable=False, index=True)
    address = Column(Text, default="")
    phone = Column(String(50), default="")
    email = Column(String(255), default="")
    website = Column(String(255), default="")
    industry = Column(String(255), default="")
    contact_person = Column(String(255), default="")
    establishment_date = Column(String(50), default="")
    charter_capital = Column(String(100), default="")
    audit_website = Column(String(255), default="")

    # External portal login, stored as entered
    account = Column(String(255), default="")
    password = Column(String(255), default="")

    bank_account = Column(String(255), default="")
    bank_name = Column(String(255), default="")
    access_code = Column(String(255), nullable=True)

    # field name -> value
    custom_fields = Column(JSON, nullable=False, default=dict)
    notes = Column(Text, default="")
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    # Relationships
    account_record = relationship(
        "BusinessAccount", back_populates="business", uselist=False, cascade="all, delete-orphan"
    )
    document_transactions = relationship(
        "DocumentTransaction", back_populates="business", cascade="all, delete-orphan"
    )


class BusinessAccount(Base):
    """Credentials for the external portals of one business."""
    __tablename__ = "business_accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    business_id = Column(Integer, ForeignKey("businesses.id", ondelete="CASCADE"), nullable=False, index=True)

    # Invoice lookup portal
    invoice_lookup_id = Column(String(255), nullable=True)
    invoice_lookup_pass = Column(String(255), nullable=True)

    # Web invoice portal
    web_invoice_website = Column(String(255), nullable=True)
    web_invoice_id = Column(String(255), nullable=True)
    web_invoice_pass = Column(String(255), nullable=True)

    # Social insurance portal
    social_insurance_code = Column(String(255), nullable=True)
    social_insurance_id = Column(String(255), nullable=True)
    social_insurance_main_pass = Column(String(255), nullable=True)
    social_insurance_secondary_pass = Column(String(255), nullable=True)
    social_insurance_contact = Column(String(255), nullable=True)

    # Statistics portal
    statistics_id = Column(String(255), nullable=True)
    statistics_pass = Column(String(255), nullable=True)

    # Digital signature token
    token_id = Column(String(255), nullable=True)
    token_pass = Column(String(255), nullable=True)
    token_provider = Column(String(255), nullable=True)
    token_registration_date = Column(String(50), nullable=True)
    token_expiration_date = Column(String(50), nullable=True)

    # Tax e-filing portal
    tax_account_id = Column(String(255), nullable=True)
    tax_account_pass = Column(String(255), nullable=True)

    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    business = relationship("Business", back_populates="account_record")


ACCOUNT_FIELDS = (
    "invoice_lookup_id",
    "invoice_lookup_pass",
    "web_invoice_website",
    "web_invoice_id",
    "web_invoice_pass",
    "social_insurance_code",
    "social_insurance_id",
    "social_insurance_main_pass",
    "social_insurance_secondary_pass",
    "social_insurance_contact",
    "statistics_id",
    "statistics_pass",
    "token_id",
    "token_pass",
    "token_provider",
    "token_registration_date",
    "token_expiration_date",
    "tax_account_id",
    "tax_account_pass",
)
