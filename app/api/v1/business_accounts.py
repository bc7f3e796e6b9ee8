from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Optional
from app.core.dependencies import get_db
from app.services.business_account_service import (
    get_business_account,
    create_business_account,
    update_business_account
)
from app.schemas.business_account import (
    BusinessAccountCreate,
    BusinessAccountUpdate,
    BusinessAccountResponse
)

router = APIRouter()


@router.get("/{business_id}/accounts", response_model=Optional[BusinessAccountResponse])
def get_business_account_route(
    business_id: int,
    db: Session = Depends(get_db)
):
    """
    Get the credential account of a business, or null when it has none.
    """
    account = get_business_account(db, business_id)
    if account is None:
        return None
    return BusinessAccountResponse.model_validate(account)


@router.post("/{business_id}/accounts", response_model=BusinessAccountResponse, status_code=status.HTTP_201_CREATED)
def create_business_account_route(
    business_id: int,
    account_data: BusinessAccountCreate,
    db: Session = Depends(get_db)
):
    """
    Create the credential account of a business.
    """
    account = create_business_account(db, business_id, account_data.model_dump(exclude_unset=True))
    return BusinessAccountResponse.model_validate(account)


@router.put("/{business_id}/accounts", response_model=BusinessAccountResponse)
def update_business_account_route(
    business_id: int,
    account_data: BusinessAccountUpdate,
    db: Session = Depends(get_db)
):
    """
    Update the credential account of a business, creating it if missing.
    """
    account = update_business_account(db, business_id, account_data.model_dump(exclude_unset=True))
    return BusinessAccountResponse.model_validate(account)
