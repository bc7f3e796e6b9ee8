from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List
from app.core.dependencies import get_db, get_current_admin
from app.core.exceptions import DomainError
from app.core.security import SessionData
from app.services.business_service import (
    get_business_by_id,
    get_all_businesses,
    get_all_businesses_for_autocomplete,
    search_businesses,
    create_business,
    update_business,
    update_access_code,
    delete_business
)
from app.schemas.base import MessageResponse
from app.schemas.business import (
    AccessCodeUpdate,
    BusinessCreate,
    BusinessUpdate,
    BusinessResponse,
    BusinessListResponse,
    BusinessSearchRequest,
    PasswordConfirmation
)
from app.logger_config import logger

router = APIRouter()


@router.get("", response_model=BusinessListResponse)
def get_businesses(
    page: int = Query(1),
    limit: int = Query(10),
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_order: str = Query("asc", alias="sortOrder"),
    db: Session = Depends(get_db)
):
    """
    Get one page of businesses.
    sortBy is one of createdAt, name, taxId; sortOrder is asc or desc.
    page and limit below 1 are treated as 1.
    """
    try:
        businesses, total = get_all_businesses(
            db, page=page, limit=limit, sort_by=sort_by, sort_order=sort_order
        )
        return BusinessListResponse(
            businesses=[BusinessResponse.model_validate(business) for business in businesses],
            total=total
        )
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Error fetching businesses: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch businesses"
        )


@router.get("/all", response_model=List[BusinessResponse])
def get_businesses_for_autocomplete(db: Session = Depends(get_db)):
    """
    Get every business ordered by name, without pagination.
    """
    try:
        return [
            BusinessResponse.model_validate(business)
            for business in get_all_businesses_for_autocomplete(db)
        ]
    except Exception as e:
        logger.error(f"Error fetching all businesses: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch businesses"
        )


@router.post("/search", response_model=List[BusinessResponse])
def search_businesses_route(
    search_data: BusinessSearchRequest,
    db: Session = Depends(get_db)
):
    """
    Search businesses by one field.
    Unsupported fields return an empty list.
    """
    businesses = search_businesses(db, search_data.field, search_data.value)
    return [BusinessResponse.model_validate(business) for business in businesses]


@router.get("/{business_id}", response_model=BusinessResponse)
def get_business(
    business_id: int,
    db: Session = Depends(get_db)
):
    """
    Get business by ID.
    """
    return BusinessResponse.model_validate(get_business_by_id(db, business_id))


@router.post("", response_model=BusinessResponse, status_code=status.HTTP_201_CREATED)
def create_business_route(
    business_data: BusinessCreate,
    db: Session = Depends(get_db)
):
    """
    Create a new business.
    Credential fields in the same payload create its account as well.
    """
    business = create_business(
        db=db,
        business_data=business_data.business_fields(),
        account_data=business_data.account_fields()
    )
    return BusinessResponse.model_validate(business)


@router.put("/{business_id}", response_model=BusinessResponse)
def update_business_route(
    business_id: int,
    business_data: BusinessUpdate,
    db: Session = Depends(get_db)
):
    """
    Update business information. Only the fields sent are changed.
    """
    business = update_business(
        db=db,
        business_id=business_id,
        update_data=business_data.model_dump(exclude_unset=True)
    )
    return BusinessResponse.model_validate(business)


@router.delete("/{business_id}", response_model=MessageResponse)
def delete_business_route(
    business_id: int,
    confirmation: PasswordConfirmation,
    db: Session = Depends(get_db)
):
    """
    Delete a business together with its account and document transactions.
    Requires the shared delete password.
    """
    delete_business(db, business_id, confirmation.password)
    return MessageResponse(message="Business deleted successfully")


@router.put("/{business_id}/access-code", response_model=MessageResponse)
def update_access_code_route(
    business_id: int,
    access_code_data: AccessCodeUpdate,
    current_admin: SessionData = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """
    Set the access code of a business.
    Admin only.
    """
    update_access_code(db, business_id, access_code_data.access_code)
    logger.info(f"Access code of business {business_id} changed by {current_admin.user_data.get('username')}")
    return MessageResponse(message="Access code updated successfully")
