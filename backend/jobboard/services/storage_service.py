"""
File Storage Service

Stores user documents in a Firebase Storage bucket through the
firebase-admin SDK.
"""

import re
import time
import uuid
from typing import Optional
from urllib.parse import quote, unquote

import firebase_admin
from firebase_admin import credentials, storage
from google.api_core.exceptions import GoogleAPIError, NotFound

from jobboard.core.config import Settings, get_settings
from jobboard.core.exceptions import StorageServiceException
from jobboard.schemas.storage import StorageFolder, UploadResult
from jobboard.utils.files import sanitize_filename
from jobboard.utils.logger import get_logger, log_storage_operation

logger = get_logger(__name__)

DOWNLOAD_URL_TEMPLATE = (
    "https://firebasestorage.googleapis.com/v0/b/{bucket}/o/{path}?alt=media&token={token}"
)


class StorageService:
    """Upload and delete user files in a storage bucket."""

    def __init__(self, bucket):
        self.bucket = bucket

    def generate_key(self, folder: StorageFolder, user_id: int, file_name: str) -> str:
        """Build the `storage:<folder>:user_<id>/<name>_<ms>` key for a file."""
        timestamp = int(time.time() * 1000)
        safe_file_name = re.sub(r"[^a-zA-Z0-9.-]", "_", file_name)
        return f"storage:{StorageFolder(folder).value}:user_{user_id}/{safe_file_name}_{timestamp}"

    @staticmethod
    def build_path(folder: StorageFolder, user_id: int, file_name: str) -> str:
        return f"uploads/{StorageFolder(folder).value}/user_{user_id}/{sanitize_filename(file_name)}"

    def upload_file(
        self,
        content: bytes,
        file_name: str,
        content_type: str,
        user_id: int,
        folder: StorageFolder,
    ) -> UploadResult:
        """
        Upload file bytes and return where they can be downloaded.

        Raises:
            StorageServiceException: If the bucket rejects the upload
        """
        key = self.generate_key(folder, user_id, file_name)
        path = self.build_path(folder, user_id, file_name)
        token = uuid.uuid4().hex

        try:
            blob = self.bucket.blob(path)
            blob.metadata = {"firebaseStorageDownloadTokens": token}
            blob.upload_from_string(content, content_type=content_type)
        except GoogleAPIError as e:
            logger.error("Upload failed", user_id=user_id, folder=str(folder), error=str(e))
            raise StorageServiceException("Failed to upload file") from e

        url = DOWNLOAD_URL_TEMPLATE.format(
            bucket=self.bucket.name,
            path=quote(path, safe=""),
            token=token,
        )
        log_storage_operation("upload", path, user_id=user_id, key=key)
        return UploadResult(url=url, path=path, file_name=file_name)

    def delete_file(self, path: str) -> None:
        """
        Delete a stored file. A file that is already gone is not an error.

        Raises:
            StorageServiceException: If the bucket rejects the delete
        """
        try:
            self.bucket.blob(path).delete()
        except NotFound:
            logger.warning("File not found for deletion", path=path)
            return
        except GoogleAPIError as e:
            logger.error("Delete failed", path=path, error=str(e))
            raise StorageServiceException("Failed to delete file") from e

        log_storage_operation("delete", path)

    @staticmethod
    def extract_path_from_url(url: str) -> Optional[str]:
        """Return the object path embedded in a download URL, if any."""
        match = re.search(r"o/(.+?)\?", unquote(url or ""))
        return match.group(1) if match else None


def get_storage_bucket(settings: Optional[Settings] = None):
    """Initialise the default Firebase app once and return its bucket."""
    settings = settings or get_settings()
    if not settings.FIREBASE_STORAGE_BUCKET:
        raise StorageServiceException("File storage is not configured")

    try:
        firebase_admin.get_app()
    except ValueError:
        cred = (
            credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)
            if settings.FIREBASE_CREDENTIALS_PATH
            else credentials.ApplicationDefault()
        )
        firebase_admin.initialize_app(cred, {"storageBucket": settings.FIREBASE_STORAGE_BUCKET})
        logger.info("Firebase app initialized", bucket=settings.FIREBASE_STORAGE_BUCKET)

    return storage.bucket()
