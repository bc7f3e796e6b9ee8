from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Any, Dict, List, Optional, Tuple
from app.core.config import settings
from app.core.exceptions import (
    DuplicateKeyError,
    ForbiddenError,
    NotFoundError,
    StorageError,
    ValidationError,
    business_not_found,
    duplicate_tax_id,
)
from app.models.business import Business
from app.services import business_account_service
from app.utils.custom_fields import normalize_custom_fields
from app.logger_config import logger


SORT_COLUMNS = {
    "createdAt": Business.created_at,
    "name": Business.name,
    "taxId": Business.tax_id,
}

# search field -> (column, substring match)
SEARCH_FIELDS = {
    "address": (Business.address, False),
    "addressPartial": (Business.address, True),
    "name": (Business.name, False),
    "namePartial": (Business.name, True),
    "taxId": (Business.tax_id, False),
    "industry": (Business.industry, False),
    "contactPerson": (Business.contact_person, False),
    "phone": (Business.phone, False),
    "email": (Business.email, False),
    "website": (Business.website, False),
    "account": (Business.account, False),
    "bankAccount": (Business.bank_account, False),
    "bankName": (Business.bank_name, False),
}


# ==================== QUERY OPERATIONS ====================

def get_business_by_id(db: Session, business_id: int) -> Business:
    """Get business by ID, raising NotFoundError when missing."""
    business = db.query(Business).filter(Business.id == business_id).first()
    if not business:
        raise NotFoundError(business_not_found(business_id))
    return business


def get_business_by_tax_id(db: Session, tax_id: str) -> Optional[Business]:
    """Get business by tax id, or None."""
    return db.query(Business).filter(Business.tax_id == tax_id).first()


def get_all_businesses(
    db: Session,
    page: int = 1,
    limit: int = 10,
    sort_by: str = "createdAt",
    sort_order: str = "asc",
) -> Tuple[List[Business], int]:
    """Get one page of businesses plus the total row count."""
    page = max(page, 1)
    limit = max(limit, 1)

    # Unknown sort keys fall back to creation time
    column = SORT_COLUMNS.get(sort_by, Business.created_at)
    ordering = column.desc() if sort_order == "desc" else column.asc()
    tie_breaker = Business.id.desc() if sort_order == "desc" else Business.id.asc()

    query = db.query(Business)
    total = query.count()
    businesses = (
        query.order_by(ordering, tie_breaker)
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return businesses, total


def get_all_businesses_for_autocomplete(db: Session) -> List[Business]:
    """Every business ordered by name, for selection dropdowns."""
    return db.query(Business).order_by(Business.name.asc(), Business.id.asc()).all()


def search_businesses(db: Session, field: str, value: str) -> List[Business]:
    """
    Search businesses on one of the SEARCH_FIELDS.

    "...Partial" fields match substrings, the rest match exactly.
    Unknown fields give an empty result.
    """
    target = SEARCH_FIELDS.get(field)
    if target is None:
        logger.info(f"Ignoring search on unsupported field '{field}'")
        return []

    column, partial = target
    if partial:
        condition = column.contains(value, autoescape=True)
    else:
        condition = column == value

    return db.query(Business).filter(condition).order_by(Business.id.asc()).all()


# ==================== WRITE OPERATIONS ====================

def create_business(
    db: Session,
    business_data: Dict[str, Any],
    account_data: Optional[Dict[str, Any]] = None,
) -> Business:
    """
    Create a new business.

    When account_data carries at least one non-empty credential, an account
    row is created as well. A failure there is logged and does not undo the
    business.
    """
    name = (business_data.get("name") or "").strip()
    tax_id = (business_data.get("tax_id") or "").strip()
    if not name or not tax_id:
        raise ValidationError("Business name and tax id are required")

    if get_business_by_tax_id(db, tax_id):
        raise DuplicateKeyError(duplicate_tax_id(tax_id))

    values = dict(business_data)
    values["name"] = name
    values["tax_id"] = tax_id
    values["custom_fields"] = normalize_custom_fields(values.get("custom_fields"))

    business = Business(**values)
    db.add(business)

    try:
        db.commit()
        db.refresh(business)
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Error creating business: {str(e)}")
        raise DuplicateKeyError(duplicate_tax_id(tax_id))
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating business: {str(e)}")
        raise StorageError(str(e))

    logger.info(f"Business {business.id} ({business.tax_id}) created")

    if account_data and any(account_data.values()):
        try:
            business_account_service.create_business_account(db, business.id, account_data)
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating account for business {business.id}: {str(e)}")

    return business


def update_business(db: Session, business_id: int, update_data: Dict[str, Any]) -> Business:
    """Partially update a business. The id never changes."""
    business = get_business_by_id(db, business_id)

    values = {key: value for key, value in update_data.items() if key != "id"}

    for key in ("name", "tax_id"):
        if isinstance(values.get(key), str):
            values[key] = values[key].strip()
            if not values[key]:
                raise ValidationError("Business name and tax id cannot be blank")

    if values.get("tax_id") is not None:
        existing = get_business_by_tax_id(db, values["tax_id"])
        if existing and existing.id != business_id:
            raise DuplicateKeyError(duplicate_tax_id(values["tax_id"]))

    if values.get("custom_fields") is not None:
        values["custom_fields"] = normalize_custom_fields(values["custom_fields"])

    for key, value in values.items():
        if value is None:
            continue
        setattr(business, key, value)

    try:
        db.commit()
        db.refresh(business)
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Error updating business {business_id}: {str(e)}")
        raise DuplicateKeyError(duplicate_tax_id(values.get("tax_id") or business.tax_id))
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating business {business_id}: {str(e)}")
        raise StorageError(str(e))

    logger.info(f"Business {business_id} updated")
    return business


def update_access_code(db: Session, business_id: int, access_code: str) -> Business:
    business = get_business_by_id(db, business_id)
    business.access_code = access_code

    try:
        db.commit()
        db.refresh(business)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating access code of business {business_id}: {str(e)}")
        raise StorageError(str(e))

    logger.info(f"Access code of business {business_id} updated")
    return business


def delete_business(db: Session, business_id: int, password: str) -> None:
    """Delete a business and its account and document transactions."""
    if password != settings.DELETE_PASSWORD:
        raise ForbiddenError("Incorrect delete password")

    business = get_business_by_id(db, business_id)
    db.delete(business)

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting business {business_id}: {str(e)}")
        raise StorageError(str(e))

    logger.info(f"Business {business_id} deleted")
