from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse
from app.services.object_storage_service import ObjectStorageService, get_object_storage
from app.schemas.object_storage import StoredObjectResponse, UploadUrlResponse
from app.logger_config import logger

# Mounted under /api
router = APIRouter()

# Mounted at the root so stored paths (/documents/...) are directly fetchable
files_router = APIRouter()


def _issue_upload_url(storage: ObjectStorageService) -> UploadUrlResponse:
    try:
        return UploadUrlResponse(upload_url=storage.get_upload_url())
    except Exception as e:
        logger.error(f"Error getting upload URL: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get upload URL"
        )


@router.post("/objects/upload", response_model=UploadUrlResponse)
def get_upload_url(storage: ObjectStorageService = Depends(get_object_storage)):
    """
    Issue a URL the client uploads a signed PDF to.
    """
    return _issue_upload_url(storage)


@router.post("/documents/pdf-upload", response_model=UploadUrlResponse)
def get_pdf_upload_url(storage: ObjectStorageService = Depends(get_object_storage)):
    """
    Same as /objects/upload, kept for the document screens.
    """
    return _issue_upload_url(storage)


@files_router.put("/documents/{object_path:path}", response_model=StoredObjectResponse)
async def upload_object(
    object_path: str,
    request: Request,
    storage: ObjectStorageService = Depends(get_object_storage)
):
    """
    Receive the raw bytes of an uploaded PDF.
    """
    data = await request.body()
    # Disk write stays off the event loop
    stored_path = await run_in_threadpool(storage.save_object, object_path, data)
    return StoredObjectResponse(path=stored_path)


@files_router.get("/documents/{object_path:path}")
def download_object(
    object_path: str,
    storage: ObjectStorageService = Depends(get_object_storage)
):
    """
    Stream a stored PDF. 404 when it does not exist.
    """
    file_path = storage.get_object_file(object_path)
    return FileResponse(file_path, media_type="application/pdf", filename=file_path.name)
