"""
Pydantic Schemas

Request/response models shared by the API layer and the services.
"""

from jobboard.schemas.common import (
    ApiResponse,
    ErrorResponse,
    FieldError,
    PaginatedResponse,
    PaginationMeta,
)
from jobboard.schemas.auth import LoginSchema, RegistrationSchema, TokenResponse
from jobboard.schemas.storage import StorageFolder, UploadResult, UploadType

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "FieldError",
    "PaginatedResponse",
    "PaginationMeta",
    "LoginSchema",
    "RegistrationSchema",
    "TokenResponse",
    "StorageFolder",
    "UploadResult",
    "UploadType",
]
