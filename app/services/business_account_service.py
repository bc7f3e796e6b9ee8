from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Any, Dict, Optional
from app.core.exceptions import StorageError
from app.models.business import ACCOUNT_FIELDS, BusinessAccount
from app.logger_config import logger


def _account_values(data: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the credential columns of a payload."""
    return {key: value for key, value in data.items() if key in ACCOUNT_FIELDS}


def get_business_account(db: Session, business_id: int) -> Optional[BusinessAccount]:
    """Get the account row of a business, or None when it has none."""
    return (
        db.query(BusinessAccount)
        .filter(BusinessAccount.business_id == business_id)
        .order_by(BusinessAccount.id.asc())
        .first()
    )


def create_business_account(db: Session, business_id: int, data: Dict[str, Any]) -> BusinessAccount:
    """
    Insert an account row for a business.
    Does not look for an existing row; use update_business_account for that.
    """
    account = BusinessAccount(business_id=business_id, **_account_values(data))
    db.add(account)

    try:
        db.commit()
        db.refresh(account)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating account for business {business_id}: {str(e)}")
        raise StorageError(str(e))

    logger.info(f"Account {account.id} created for business {business_id}")
    return account


def update_business_account(db: Session, business_id: int, data: Dict[str, Any]) -> BusinessAccount:
    """
    Update the account of a business, creating it when no row exists yet.
    """
    values = _account_values(data)

    try:
        if values:
            matched = (
                db.query(BusinessAccount)
                .filter(BusinessAccount.business_id == business_id)
                .update(values, synchronize_session=False)
            )
        else:
            matched = (
                db.query(BusinessAccount)
                .filter(BusinessAccount.business_id == business_id)
                .count()
            )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating account of business {business_id}: {str(e)}")
        raise StorageError(str(e))

    if not matched:
        logger.info(f"No account for business {business_id}, creating one")
        return create_business_account(db, business_id, values)

    account = get_business_account(db, business_id)
    db.refresh(account)
    logger.info(f"Account of business {business_id} updated")
    return account
