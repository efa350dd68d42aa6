"""
Global Error Handling for the Job Board API

Provides centralized error handling with:
- Structured error responses built from application exceptions
- One `{field, message}` entry per failing validation rule
- Sensitive information filtering
- Environment-specific error details
- Request ids and request logging
"""

import time
import uuid
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from jobboard.core.config import get_settings
from jobboard.core.exceptions import BaseApplicationException, ErrorSeverity
from jobboard.utils.logger import get_logger, log_api_request, log_error

logger = get_logger(__name__)

SENSITIVE_FIELDS = {
    "password", "confirmpassword", "token", "secret", "key", "credential",
    "authorization", "cookie", "session", "api_key",
}

# Request body wrappers that are not part of the field name
LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")


def filter_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Replace values of secret-looking keys with a mask."""
    filtered = {}
    for key, value in data.items():
        if any(sensitive in key.lower() for sensitive in SENSITIVE_FIELDS):
            filtered[key] = "***"
        elif isinstance(value, dict):
            filtered[key] = filter_sensitive_data(value)
        else:
            filtered[key] = value
    return filtered


def format_validation_errors(errors) -> List[Dict[str, str]]:
    """Flatten pydantic errors into `{field, message}` pairs."""
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in LOCATION_PREFIXES:
            loc = loc[1:]
        formatted.append({
            "field": ".".join(loc) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return formatted


async def application_exception_handler(request: Request, exc: BaseApplicationException) -> JSONResponse:
    """Handle custom application errors."""
    content = exc.to_dict()
    if content["details"]:
        content["details"] = filter_sensitive_data(content["details"])

    if exc.severity in (ErrorSeverity.HIGH, ErrorSeverity.CRITICAL):
        log_error(exc, context={"path": request.url.path, "error_code": exc.error_code})
    else:
        logger.info(
            "Request rejected",
            path=request.url.path,
            error_code=exc.error_code,
            status_code=exc.http_status,
        )

    headers = {"WWW-Authenticate": "Bearer"} if exc.http_status == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=exc.http_status, content=content, headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors."""
    errors = format_validation_errors(exc.errors())
    logger.warning("Validation error", path=request.url.path, errors=errors)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "success": False,
            "message": "Validation failed",
            "errorCode": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    log_error(exc, context={"path": request.url.path, "method": request.method})

    content = {
        "success": False,
        "message": "Internal server error",
        "errorCode": "INTERNAL_SERVER_ERROR",
    }
    # Don't expose internal errors in production
    if get_settings().ENVIRONMENT != "production":
        content["error"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log it with its timing."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        start = time.perf_counter()

        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        log_api_request(
            method=request.method,
            path=request.url.path,
            ip_address=request.client.host if request.client else None,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            request_id=request_id,
        )
        return response


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on `app`."""
    app.add_exception_handler(BaseApplicationException, application_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)


def setup_error_handling(app: FastAPI) -> None:
    """Install the exception handlers and the request logging middleware."""
    setup_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)
