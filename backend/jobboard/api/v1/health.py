"""
Health Check API v1 Endpoints

System health and status monitoring endpoints.
"""

from typing import Dict, Any
from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from jobboard.core.config import get_settings
from jobboard.core.database import db_manager
from jobboard.core.openapi import OpenAPIRegistry
from jobboard.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check() -> Dict[str, Any]:
    """Basic health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/status")
async def detailed_status():
    """Health of the API and its database."""
    database_ok = db_manager.is_initialized and await db_manager.check_health()
    body = {
        "status": "healthy" if database_ok else "unhealthy",
        "services": {
            "api": "healthy",
            "database": "healthy" if database_ok else "unhealthy",
        },
    }
    if not database_ok:
        logger.warning("Database health check failed")
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body


def register_openapi(registry: OpenAPIRegistry) -> None:
    registry.register_path(
        method="get",
        path="/api/v1/health/status",
        summary="Service status",
        tags=["Health"],
        responses={503: {"description": "Database unavailable"}},
    )
