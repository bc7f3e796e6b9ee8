from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import or_
from typing import Any, Dict, List, Optional
from datetime import datetime
from urllib.parse import urlparse
from app.core.config import settings
from app.core.exceptions import ForbiddenError, NotFoundError, StorageError, document_not_found
from app.models.document_transaction import DEFAULT_DOCUMENT_TYPE, DocumentTransaction
from app.services.business_service import get_business_by_tax_id
from app.logger_config import logger


def _ordered(query):
    return query.order_by(DocumentTransaction.created_at.asc(), DocumentTransaction.id.asc())


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error {action}: {str(e)}")
        raise StorageError(str(e))


def normalize_pdf_path(raw_path: str, prefix: Optional[str] = None) -> str:
    """
    Reduce a signed PDF location to its storage-relative path.

    Full URLs keep only their path; anything outside the document prefix
    is moved under it.
        https://host/documents/abc.pdf -> /documents/abc.pdf
        abc.pdf                        -> /documents/abc.pdf
    """
    prefix = prefix or settings.DOCUMENT_PATH_PREFIX
    path = raw_path.strip()
    if path.startswith("http"):
        path = urlparse(path).path

    if not path.startswith(prefix):
        path = f"{prefix}{path.lstrip('/')}"
    return path


# ==================== QUERY OPERATIONS ====================

def get_document_transaction(db: Session, transaction_id: int) -> DocumentTransaction:
    transaction = db.query(DocumentTransaction).filter(DocumentTransaction.id == transaction_id).first()
    if not transaction:
        raise NotFoundError(document_not_found(transaction_id))
    return transaction


def get_transactions_by_business_id(db: Session, business_id: int) -> List[DocumentTransaction]:
    return _ordered(
        db.query(DocumentTransaction).filter(DocumentTransaction.business_id == business_id)
    ).all()


def get_all_transactions(db: Session) -> List[DocumentTransaction]:
    return _ordered(db.query(DocumentTransaction)).all()


def get_transactions_by_company(db: Session, company_name: str) -> List[DocumentTransaction]:
    """Transactions where the company delivered or received."""
    return _ordered(
        db.query(DocumentTransaction).filter(
            or_(
                DocumentTransaction.delivery_company == company_name,
                DocumentTransaction.receiving_company == company_name,
            )
        )
    ).all()


def get_transactions_by_tax_id(db: Session, tax_id: str) -> List[DocumentTransaction]:
    """Transactions of the company registered under tax_id, matched by its name."""
    business = get_business_by_tax_id(db, tax_id)
    if not business:
        return []
    return get_transactions_by_company(db, business.name)


# ==================== WRITE OPERATIONS ====================

def create_document_transaction(db: Session, business_id: int, data: Dict[str, Any]) -> DocumentTransaction:
    """
    Record a document handover for a business.

    delivery_date and receiving_date both default to now. The business id
    is checked by the foreign key only.
    """
    values = dict(data)
    now = datetime.now()
    if not values.get("delivery_date"):
        values["delivery_date"] = now
    if not values.get("receiving_date"):
        values["receiving_date"] = now
    if not values.get("document_type"):
        values["document_type"] = DEFAULT_DOCUMENT_TYPE

    transaction = DocumentTransaction(business_id=business_id, **values)
    db.add(transaction)
    _commit(db, f"creating document transaction for business {business_id}")
    db.refresh(transaction)

    logger.info(f"Document transaction {transaction.id} created for business {business_id}")
    return transaction


def update_document_number(db: Session, transaction_id: int, document_number: str) -> DocumentTransaction:
    transaction = get_document_transaction(db, transaction_id)
    transaction.document_number = document_number
    _commit(db, f"updating number of document transaction {transaction_id}")
    db.refresh(transaction)

    logger.info(f"Document transaction {transaction_id} numbered '{document_number}'")
    return transaction


def update_pdf_path(db: Session, transaction_id: int, raw_path: str) -> DocumentTransaction:
    """Attach a signed PDF, storing the normalized path."""
    transaction = get_document_transaction(db, transaction_id)
    transaction.signed_file_path = normalize_pdf_path(raw_path)
    _commit(db, f"updating PDF of document transaction {transaction_id}")
    db.refresh(transaction)

    logger.info(f"PDF path of document transaction {transaction_id} set to {transaction.signed_file_path}")
    return transaction


def delete_document_transaction(db: Session, transaction_id: int, password: str) -> None:
    if password != settings.DELETE_PASSWORD:
        raise ForbiddenError("Incorrect delete password")

    transaction = get_document_transaction(db, transaction_id)
    db.delete(transaction)
    _commit(db, f"deleting document transaction {transaction_id}")

    logger.info(f"Document transaction {transaction_id} deleted")
