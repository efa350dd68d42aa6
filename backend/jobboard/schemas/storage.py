"""
Storage Schemas

Types describing uploaded user documents.
"""

from enum import Enum

from pydantic import Field

from jobboard.schemas.common import CamelModel


class StorageFolder(str, Enum):
    """Top-level folders in the storage bucket."""
    RESUMES = "resumes"
    COVER_LETTERS = "cover-letters"
    PROFILE_IMAGES = "profile-images"


class UploadType(str, Enum):
    """Kinds of document a user can upload."""
    RESUME = "resume"
    COVER_LETTER = "coverLetter"
    PROFILE_IMAGE = "profileImage"

    @property
    def folder(self) -> StorageFolder:
        return UPLOAD_TYPE_FOLDERS[self]

    @property
    def profile_field(self) -> str:
        """Profile column that stores the URL of this upload."""
        return UPLOAD_TYPE_PROFILE_FIELDS[self]


UPLOAD_TYPE_FOLDERS = {
    UploadType.RESUME: StorageFolder.RESUMES,
    UploadType.COVER_LETTER: StorageFolder.COVER_LETTERS,
    UploadType.PROFILE_IMAGE: StorageFolder.PROFILE_IMAGES,
}

UPLOAD_TYPE_PROFILE_FIELDS = {
    UploadType.RESUME: "resume_url",
    UploadType.COVER_LETTER: "cover_letter_url",
    UploadType.PROFILE_IMAGE: "profile_image_url",
}


class UploadResult(CamelModel):
    """Descriptor returned after a file is stored."""

    url: str = Field(..., description="Public download URL")
    path: str = Field(..., description="Object path inside the bucket")
    file_name: str = Field(..., description="Original file name")
