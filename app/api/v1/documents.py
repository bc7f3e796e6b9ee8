from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from app.core.dependencies import get_db
from app.services.document_transaction_service import (
    get_transactions_by_business_id,
    get_all_transactions,
    get_transactions_by_company,
    get_transactions_by_tax_id,
    create_document_transaction,
    update_document_number,
    update_pdf_path,
    delete_document_transaction
)
from app.schemas.base import MessageResponse
from app.schemas.business import PasswordConfirmation
from app.schemas.document_transaction import (
    DocumentTransactionCreate,
    DocumentTransactionResponse,
    DocumentNumberUpdate,
    PdfPathUpdate,
    PdfUploadResponse
)
from app.logger_config import logger

router = APIRouter()


def _to_responses(transactions) -> List[DocumentTransactionResponse]:
    return [DocumentTransactionResponse.model_validate(transaction) for transaction in transactions]


@router.post(
    "/businesses/{business_id}/documents",
    response_model=DocumentTransactionResponse,
    status_code=status.HTTP_201_CREATED
)
def create_document_transaction_route(
    business_id: int,
    transaction_data: DocumentTransactionCreate,
    db: Session = Depends(get_db)
):
    """
    Record a document handover for a business.
    Missing delivery and receiving dates default to now.
    """
    transaction = create_document_transaction(db, business_id, transaction_data.model_dump())
    return DocumentTransactionResponse.model_validate(transaction)


@router.get("/businesses/{business_id}/documents", response_model=List[DocumentTransactionResponse])
def get_business_documents(
    business_id: int,
    db: Session = Depends(get_db)
):
    """
    Get the handover history of a business, oldest first.
    """
    try:
        return _to_responses(get_transactions_by_business_id(db, business_id))
    except Exception as e:
        logger.error(f"Error fetching documents of business {business_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch document transactions"
        )


@router.get("/documents", response_model=List[DocumentTransactionResponse])
def get_documents(db: Session = Depends(get_db)):
    """
    Get every document transaction.
    """
    try:
        return _to_responses(get_all_transactions(db))
    except Exception as e:
        logger.error(f"Error fetching document transactions: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch document transactions"
        )


@router.get("/documents/company/{company_name:path}", response_model=List[DocumentTransactionResponse])
def get_documents_by_company(
    company_name: str,
    db: Session = Depends(get_db)
):
    """
    Get transactions where the company delivered or received documents.
    """
    return _to_responses(get_transactions_by_company(db, company_name))


@router.get("/documents/tax-id/{tax_id:path}", response_model=List[DocumentTransactionResponse])
def get_documents_by_tax_id(
    tax_id: str,
    db: Session = Depends(get_db)
):
    """
    Get transactions of the company registered under a tax id.
    An unknown tax id gives an empty list.
    """
    return _to_responses(get_transactions_by_tax_id(db, tax_id))


@router.put("/documents/{transaction_id}/number", response_model=MessageResponse)
def update_document_number_route(
    transaction_id: int,
    number_data: DocumentNumberUpdate,
    db: Session = Depends(get_db)
):
    """
    Set the document number of a transaction.
    """
    update_document_number(db, transaction_id, number_data.document_number)
    return MessageResponse(message="Document number updated successfully")


@router.put("/documents/{transaction_id}/upload-pdf", response_model=PdfUploadResponse)
def upload_pdf_route(
    transaction_id: int,
    pdf_data: PdfPathUpdate,
    db: Session = Depends(get_db)
):
    """
    Attach the signed PDF of a transaction by its storage path or URL.
    """
    transaction = update_pdf_path(db, transaction_id, pdf_data.pdf_path)
    return PdfUploadResponse(
        message="PDF uploaded successfully",
        pdf_path=transaction.signed_file_path,
        transaction=DocumentTransactionResponse.model_validate(transaction)
    )


@router.delete("/documents/{transaction_id}", response_model=MessageResponse)
def delete_document_route(
    transaction_id: int,
    confirmation: PasswordConfirmation,
    db: Session = Depends(get_db)
):
    """
    Delete a document transaction.
    Requires the shared delete password.
    """
    delete_document_transaction(db, transaction_id, confirmation.password)
    return MessageResponse(message="Document transaction deleted successfully")
