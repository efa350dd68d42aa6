"""
Logging Configuration

Structured logging setup using structlog for consistent, JSON-formatted logs
throughout the job board application.
"""

import logging
import sys
from typing import Any, Dict, Optional
from pathlib import Path

import structlog
from structlog.stdlib import LoggerFactory
from pythonjsonlogger import jsonlogger

from jobboard.core.config import get_settings


def configure_logging() -> None:
    """Configure structured logging for the application."""
    settings = get_settings()

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,

            # JSON formatting for production, pretty for development
            structlog.dev.ConsoleRenderer() if settings.DEBUG
            else structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )

    # File handler for persistent logging
    if not settings.DEBUG and not settings.TESTING:
        logs_dir = Path("logs")
        logs_dir.mkdir(exist_ok=True)

        file_handler = logging.FileHandler(logs_dir / "app.log")
        file_handler.setFormatter(
            jsonlogger.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog.stdlib.BoundLogger: Configured logger instance
    """
    return structlog.get_logger(name)


def log_api_request(
    method: str,
    path: str,
    user_id: Optional[int] = None,
    ip_address: Optional[str] = None,
    **kwargs
) -> None:
    """Log API request."""
    logger = get_logger("api_requests")
    logger.info(
        "API request",
        method=method,
        path=path,
        user_id=user_id,
        ip_address=ip_address,
        **kwargs
    )


def log_database_operation(
    operation: str,
    table: str,
    record_id: Optional[int] = None,
    user_id: Optional[int] = None,
    **kwargs
) -> None:
    """
    Log database operation.

    Args:
        operation: Type of operation (create, read, update, delete)
        table: Database table involved
        record_id: Record ID being operated on
        user_id: User performing the operation
        **kwargs: Additional operation data
    """
    logger = get_logger("database")
    logger.info(
        "Database operation",
        operation=operation,
        table=table,
        record_id=record_id,
        user_id=user_id,
        **kwargs
    )


def log_storage_operation(
    operation: str,
    path: str,
    user_id: Optional[int] = None,
    **kwargs
) -> None:
    """Log a file storage operation (upload, delete)."""
    logger = get_logger("storage")
    logger.info(
        "Storage operation",
        operation=operation,
        path=path,
        user_id=user_id,
        **kwargs
    )


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    user_id: Optional[int] = None,
    **kwargs
) -> None:
    """
    Log error with context.

    Args:
        error: Exception that occurred
        context: Additional context about the error
        user_id: User ID associated with the error
        **kwargs: Additional error data
    """
    logger = get_logger("errors")
    logger.error(
        "Error occurred",
        error_type=type(error).__name__,
        error_message=str(error),
        context=context or {},
        user_id=user_id,
        exc_info=True,
        **kwargs
    )


def log_security_event(
    event_type: str,
    user_id: Optional[int] = None,
    ip_address: Optional[str] = None,
    success: bool = True,
    **kwargs
) -> None:
    """
    Log security-related event.

    Args:
        event_type: Type of security event
        user_id: User ID involved
        ip_address: IP address involved
        success: Whether the event was successful
        **kwargs: Additional security data
    """
    logger = get_logger("security")

    log_level = "info" if success else "warning"
    getattr(logger, log_level)(
        "Security event",
        event_type=event_type,
        user_id=user_id,
        ip_address=ip_address,
        success=success,
        **kwargs
    )
