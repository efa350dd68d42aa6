"""
API Dependencies

Common dependencies used across API endpoints: database sessions,
the current user, and service construction.
"""

from typing import AsyncGenerator, Optional
from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jobboard.core.config import get_settings
from jobboard.core.database import get_db_session
from jobboard.core.exceptions import AuthenticationException
from jobboard.core.security import get_current_user_id, get_security_manager
from jobboard.repositories.user_repository import UserRepository
from jobboard.services.auth_service import AuthService
from jobboard.services.search_service import (
    JobSearchService,
    TypesenseService,
    create_typesense_client,
)
from jobboard.services.storage_service import StorageService, get_storage_bucket
from jobboard.services.user_service import UserService
from jobboard.utils.logger import get_logger

logger = get_logger(__name__)

__all__ = [
    "get_db",
    "get_current_user_id",
    "get_current_active_user_id",
    "get_client_ip",
    "get_user_repository",
    "get_auth_service",
    "get_storage_service",
    "get_user_service",
    "get_upload_user_service",
    "get_job_search_service",
]


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields:
        AsyncSession: Database session
    """
    async for session in get_db_session():
        yield session


def get_client_ip(request: Request) -> Optional[str]:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


async def get_current_active_user_id(
    user_id: int = Depends(get_current_user_id),
    user_repo: UserRepository = Depends(get_user_repository),
) -> int:
    """
    The signed-in user's id, provided the account is still active.

    Raises:
        AuthenticationException: If the account was deactivated or deleted
    """
    if not await user_repo.is_active_user(user_id):
        logger.info("Rejected token for inactive account", user_id=user_id)
        raise AuthenticationException("Account is not active", error_code="ACCOUNT_INACTIVE")
    return user_id


def get_auth_service(user_repo: UserRepository = Depends(get_user_repository)) -> AuthService:
    return AuthService(user_repo, get_security_manager())


def get_storage_service() -> StorageService:
    return StorageService(get_storage_bucket())


def get_user_service(user_repo: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(user_repo, max_upload_size_mb=get_settings().MAX_UPLOAD_SIZE_MB)


def get_upload_user_service(
    user_repo: UserRepository = Depends(get_user_repository),
    storage: StorageService = Depends(get_storage_service),
) -> UserService:
    return UserService(user_repo, storage, max_upload_size_mb=get_settings().MAX_UPLOAD_SIZE_MB)


@lru_cache()
def get_typesense_service() -> TypesenseService:
    return TypesenseService(create_typesense_client())


def get_job_search_service(
    typesense_service: TypesenseService = Depends(get_typesense_service),
) -> JobSearchService:
    return JobSearchService(typesense_service)
