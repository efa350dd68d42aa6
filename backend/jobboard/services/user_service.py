"""
User Service Layer

Business logic for the signed-in user's account, profile, saved jobs
and document uploads.
"""

from typing import List, Optional, Tuple

from starlette.concurrency import run_in_threadpool

from jobboard.core.exceptions import (
    InvalidFileException,
    StorageServiceException,
    UserNotFoundException,
)
from jobboard.models.user import SavedJob, User, UserProfile
from jobboard.repositories.user_repository import UserRepository
from jobboard.schemas.common import PaginationMeta
from jobboard.schemas.storage import UploadResult, UploadType
from jobboard.schemas.user import SavedJobItem, UserProfileUpdate
from jobboard.services.storage_service import StorageService
from jobboard.utils.files import (
    DOCUMENT_FILE_TYPES,
    IMAGE_FILE_TYPES,
    validate_file_size,
    validate_file_type,
)
from jobboard.utils.logger import get_logger

logger = get_logger(__name__)


UPLOAD_ALLOWED_TYPES = {
    UploadType.RESUME: DOCUMENT_FILE_TYPES,
    UploadType.COVER_LETTER: DOCUMENT_FILE_TYPES,
    UploadType.PROFILE_IMAGE: IMAGE_FILE_TYPES,
}


class UserService:
    """Service layer for user operations."""

    def __init__(
        self,
        user_repo: UserRepository,
        storage: Optional[StorageService] = None,
        max_upload_size_mb: int = 10,
    ):
        self.user_repo = user_repo
        self.storage = storage
        self.max_upload_size_mb = max_upload_size_mb

    async def get_current_user(self, user_id: int) -> User:
        user = await self.user_repo.find_by_id_with_profile(user_id)
        if user is None:
            raise UserNotFoundException(user_id)
        return user

    async def update_profile(self, user_id: int, profile_data: UserProfileUpdate) -> UserProfile:
        return await self.user_repo.update_profile(user_id, profile_data)

    async def get_profile_status(self, user_id: int) -> dict:
        return await self.user_repo.get_profile_status(user_id)

    async def save_job(self, user_id: int, job_id: int) -> SavedJob:
        saved_job = await self.user_repo.save_job_for_user(user_id, job_id)
        logger.info("Job saved", user_id=user_id, job_id=job_id)
        return saved_job

    async def unsave_job(self, user_id: int, job_id: int) -> None:
        await self.user_repo.unsave_job_for_user(user_id, job_id)
        logger.info("Job unsaved", user_id=user_id, job_id=job_id)

    async def is_job_saved(self, user_id: int, job_id: int) -> bool:
        return await self.user_repo.is_job_saved_by_user(user_id, job_id)

    async def list_saved_jobs(
        self,
        user_id: int,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[SavedJobItem], PaginationMeta]:
        return await self.user_repo.get_saved_jobs_for_user(user_id, page=page, limit=limit)

    async def upload_document(
        self,
        user_id: int,
        upload_type: UploadType,
        file_name: str,
        content: bytes,
        content_type: str,
    ) -> UploadResult:
        """
        Validate and store an uploaded document, then record its URL on
        the user's profile. The profile change is committed before the
        document it replaces is deleted. If recording the URL fails, the
        new upload is deleted instead.

        Raises:
            InvalidFileException: If the file type or size is not accepted
            StorageServiceException: If the storage backend fails
            DatabaseException: If the profile cannot be updated
        """
        if self.storage is None:
            raise StorageServiceException("File storage is not configured")
        if not validate_file_type(content_type, UPLOAD_ALLOWED_TYPES[upload_type]):
            raise InvalidFileException(file_name, f"File type {content_type} is not allowed")
        if not validate_file_size(len(content), self.max_upload_size_mb):
            raise InvalidFileException(
                file_name,
                f"File must be between 1 byte and {self.max_upload_size_mb} MB",
            )

        profile = await self.user_repo.get_profile(user_id)
        previous_url = getattr(profile, upload_type.profile_field) if profile else None

        result = await run_in_threadpool(
            self.storage.upload_file,
            content=content,
            file_name=file_name,
            content_type=content_type,
            user_id=user_id,
            folder=upload_type.folder,
        )
        try:
            await self.user_repo.set_profile_document(user_id, upload_type.profile_field, result.url)
            await self.user_repo.commit()
        except Exception:
            await self._discard_file(result.path)
            raise

        previous_path = self.storage.extract_path_from_url(previous_url) if previous_url else None
        if previous_path and previous_path != result.path:
            await self._discard_file(previous_path)
        return result

    async def _discard_file(self, path: str) -> None:
        """Best-effort delete of a file no profile points at."""
        try:
            await run_in_threadpool(self.storage.delete_file, path)
        except StorageServiceException as e:
            logger.warning("Could not delete unreferenced file", path=path, error=str(e))
