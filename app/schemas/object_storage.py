from pydantic import Field
from app.schemas.base import CamelModel


class UploadUrlResponse(CamelModel):
    upload_url: str = Field(..., alias="uploadURL")


class StoredObjectResponse(CamelModel):
    success: bool = True
    path: str
