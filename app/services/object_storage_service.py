import os
import uuid
from pathlib import Path
from typing import Optional
from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.logger_config import logger


class ObjectNotFoundError(NotFoundError):
    """Stored object does not exist."""


class ObjectStorageService:
    """
    Signed PDF storage on the local disk.

    Objects live under storage_dir and are addressed by storage-relative
    paths such as /documents/<name>.pdf. Another backend (S3, GCS) can
    replace this one without changing callers.
    """

    def __init__(
        self,
        storage_dir: Optional[str] = None,
        public_base_url: Optional[str] = None,
        prefix: Optional[str] = None,
    ):
        self.storage_dir = Path(storage_dir or settings.OBJECT_STORAGE_DIR)
        self.public_base_url = (public_base_url or settings.PUBLIC_BASE_URL).rstrip("/")
        self.prefix = prefix or settings.DOCUMENT_PATH_PREFIX

    def get_upload_url(self) -> str:
        """URL the client PUTs a new PDF to."""
        object_name = f"{uuid.uuid4().hex}.pdf"
        upload_url = f"{self.public_base_url}{self.prefix}{object_name}"
        logger.info(f"Issued upload URL {upload_url}")
        return upload_url

    def _resolve(self, object_path: str) -> Path:
        relative = object_path.strip()
        if relative.startswith(self.prefix):
            relative = relative[len(self.prefix):]
        relative = relative.lstrip("/")
        if not relative:
            raise ObjectNotFoundError("Object path is empty")

        root = self.storage_dir.resolve()
        target = (root / relative).resolve()
        # Keep lookups inside the storage directory
        if root not in target.parents:
            raise ObjectNotFoundError(f"Object {object_path} not found")
        return target

    def save_object(self, object_path: str, data: bytes) -> str:
        """Store bytes and return the storage-relative path."""
        if not data:
            raise ValidationError("Uploaded file is empty")

        target = self._resolve(object_path)
        os.makedirs(target.parent, exist_ok=True)
        target.write_bytes(data)

        stored_path = f"{self.prefix}{target.relative_to(self.storage_dir.resolve()).as_posix()}"
        logger.info(f"Stored {len(data)} bytes at {stored_path}")
        return stored_path

    def get_object_file(self, object_path: str) -> Path:
        """Find a stored object, raising ObjectNotFoundError when absent."""
        target = self._resolve(object_path)
        if not target.is_file():
            raise ObjectNotFoundError(f"Object {object_path} not found")
        return target


def get_object_storage() -> ObjectStorageService:
    """Dependency providing the configured object storage."""
    return ObjectStorageService()
