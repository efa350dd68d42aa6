"""
Custom Exceptions for the Job Board API

Business logic exceptions with user-facing messages and proper error codes.
Each exception carries everything the API layer needs to build an error
response, so handlers never have to inspect message text.
"""

from typing import Optional, Dict, Any, Union
from datetime import datetime, timezone
from enum import Enum

from fastapi import status


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    BUSINESS_LOGIC = "business_logic"
    EXTERNAL_SERVICE = "external_service"
    DATABASE = "database"
    SYSTEM = "system"


class BaseApplicationException(Exception):
    """
    Base exception for all application-specific errors.

    Provides structured error information for consistent error handling
    and user-facing error responses.
    """

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        error_code: Optional[str] = None,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the API error envelope."""
        return {
            "success": False,
            "message": self.user_message,
            "errorCode": self.error_code,
            "category": self.category.value,
            "details": self.details or None,
            "timestamp": self.timestamp.isoformat(),
        }


# Validation Exceptions
class ValidationException(BaseApplicationException):
    """Exception for input validation errors."""

    def __init__(
        self,
        message: str,
        field_errors: Optional[Dict[str, str]] = None,
        **kwargs
    ):
        kwargs.setdefault("error_code", "VALIDATION_ERROR")
        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            http_status=status.HTTP_400_BAD_REQUEST,
            **kwargs
        )
        self.field_errors = field_errors or {}
        if self.field_errors:
            self.details.update({"field_errors": self.field_errors})


class InvalidFileException(ValidationException):
    """Exception for uploads that fail type or size checks."""

    def __init__(self, file_name: str, reason: str, **kwargs):
        super().__init__(
            message=f"Invalid file '{file_name}': {reason}",
            user_message=reason,
            error_code="INVALID_FILE",
            field_errors={"file": reason},
            **kwargs
        )


# Authentication Exceptions
class AuthenticationException(BaseApplicationException):
    """Exception for authentication errors."""

    def __init__(self, message: str = "Authentication required", **kwargs):
        kwargs.setdefault("error_code", "UNAUTHORIZED")
        super().__init__(
            message=message,
            category=ErrorCategory.AUTHENTICATION,
            severity=ErrorSeverity.MEDIUM,
            http_status=status.HTTP_401_UNAUTHORIZED,
            **kwargs
        )


class InvalidCredentialsException(AuthenticationException):
    """Exception for a failed login."""

    def __init__(self, **kwargs):
        super().__init__(
            message="Invalid email or password",
            error_code="INVALID_CREDENTIALS",
            **kwargs
        )


class InvalidTokenException(AuthenticationException):
    """Exception for invalid authentication tokens."""

    def __init__(self, message: str = "Invalid or expired authentication token", **kwargs):
        super().__init__(
            message=message,
            error_code="INVALID_TOKEN",
            **kwargs
        )


# Resource Exceptions
class ResourceNotFoundException(BaseApplicationException):
    """Exception for resource not found errors."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[Union[int, str]] = None,
        **kwargs
    ):
        if resource_id is not None:
            message = f"{resource_type} with id {resource_id} does not exist."
        else:
            message = f"{resource_type} not found"

        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            category=ErrorCategory.NOT_FOUND,
            severity=ErrorSeverity.LOW,
            http_status=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
            **kwargs
        )


class JobNotFoundException(ResourceNotFoundException):
    """Exception for job not found errors."""

    def __init__(self, job_id: Union[int, str], **kwargs):
        super().__init__(resource_type="Job", resource_id=job_id, **kwargs)


class UserNotFoundException(ResourceNotFoundException):
    """Exception for user not found errors."""

    def __init__(self, user_id: Union[int, str], **kwargs):
        super().__init__(resource_type="User", resource_id=user_id, **kwargs)


class ProfileNotFoundException(ResourceNotFoundException):
    """Exception for a user without a profile."""

    def __init__(self, user_id: Union[int, str], **kwargs):
        super().__init__(
            resource_type="Profile",
            user_message=f"User profile not found for user {user_id}",
            **kwargs
        )


class ConflictException(BaseApplicationException):
    """Exception for requests that collide with existing state."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "CONFLICT")
        super().__init__(
            message=message,
            category=ErrorCategory.CONFLICT,
            severity=ErrorSeverity.LOW,
            http_status=status.HTTP_409_CONFLICT,
            **kwargs
        )


class EmailAlreadyRegisteredException(ConflictException):
    """Exception for a registration with an email that is taken."""

    def __init__(self, email: str, **kwargs):
        super().__init__(
            message="An account with this email already exists",
            error_code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
            **kwargs
        )


# Business Logic Exceptions
class BusinessLogicException(BaseApplicationException):
    """Exception for business logic violations."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "BAD_REQUEST")
        super().__init__(
            message=message,
            category=ErrorCategory.BUSINESS_LOGIC,
            severity=ErrorSeverity.MEDIUM,
            http_status=status.HTTP_400_BAD_REQUEST,
            **kwargs
        )


class SavedJobsLimitExceededException(BusinessLogicException):
    """Raised when a user tries to save more jobs than the cap allows."""

    def __init__(self, limit: int = 50, **kwargs):
        super().__init__(
            message=f"Saved jobs limit reached. You can save up to {limit} jobs.",
            error_code="SAVED_JOBS_LIMIT_REACHED",
            details={"limit": limit},
            **kwargs
        )
        self.limit = limit


# Database Exceptions
class DatabaseException(BaseApplicationException):
    """Exception for database errors."""

    def __init__(self, message: str = "Database operation failed", **kwargs):
        super().__init__(
            message=message,
            user_message="Database operation failed",
            error_code="DATABASE_ERROR",
            category=ErrorCategory.DATABASE,
            severity=ErrorSeverity.HIGH,
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            **kwargs
        )


# External Service Exceptions
class ExternalServiceException(BaseApplicationException):
    """Exception for external service errors."""

    def __init__(
        self,
        service_name: str,
        message: str = "External service error",
        **kwargs
    ):
        kwargs.setdefault("error_code", "EXTERNAL_SERVICE_ERROR")
        super().__init__(
            message=message,
            category=ErrorCategory.EXTERNAL_SERVICE,
            severity=ErrorSeverity.HIGH,
            http_status=status.HTTP_503_SERVICE_UNAVAILABLE,
            details={"service_name": service_name},
            **kwargs
        )


class SearchServiceException(ExternalServiceException):
    """Exception for Typesense errors."""

    def __init__(self, message: str = "Failed to search jobs", **kwargs):
        super().__init__(
            service_name="Typesense",
            message=message,
            error_code="SEARCH_SERVICE_ERROR",
            **kwargs
        )


class StorageServiceException(ExternalServiceException):
    """Exception for file storage errors."""

    def __init__(self, message: str = "File storage error", **kwargs):
        super().__init__(
            service_name="FirebaseStorage",
            message=message,
            error_code="STORAGE_SERVICE_ERROR",
            **kwargs
        )
