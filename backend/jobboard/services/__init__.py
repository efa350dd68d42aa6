"""
Services Layer

Business logic layer containing service classes that orchestrate
business operations, validation, and coordination between repositories.
"""

from .auth_service import AuthService
from .user_service import UserService
from .storage_service import StorageService
from .search_service import JobSearchService, TypesenseService

__all__ = [
    "AuthService",
    "UserService",
    "StorageService",
    "JobSearchService",
    "TypesenseService",
]
