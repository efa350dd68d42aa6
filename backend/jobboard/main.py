"""
FastAPI Main Application

Entry point for the Job Board API server.
Configures routing, middleware, API documentation and application
lifecycle events.
"""

from typing import Dict, Any
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from jobboard.api.v1 import auth, health, jobs, onboarding, users
from jobboard.core.config import get_settings
from jobboard.core.database import close_db, init_db
from jobboard.core.openapi import OpenAPIRegistry, register_security_schemes
from jobboard.middleware.error_handler import setup_error_handling
from jobboard.schemas.common import ErrorResponse, PaginationMeta
from jobboard.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

ROUTE_MODULES = (health, auth, users, jobs, onboarding)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    logger.info(f"Starting {settings.APP_NAME}...")
    await init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    await close_db()
    logger.info("Application shutdown complete")


def build_openapi_registry() -> OpenAPIRegistry:
    """Create the documentation registry and let every route module fill it."""
    registry = OpenAPIRegistry()
    register_security_schemes(registry, get_settings().SESSION_COOKIE_NAME)
    registry.register_schema(ErrorResponse)
    registry.register_schema(PaginationMeta)
    for module in ROUTE_MODULES:
        module.register_openapi(registry)
    return registry


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    configure_logging()
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Job board API: accounts, profiles, saved jobs, uploads and job search",
        version=settings.VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins_list(),
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.get_cors_methods_list(),
        allow_headers=settings.get_cors_headers_list(),
    )
    setup_error_handling(app)

    for module in ROUTE_MODULES:
        app.include_router(module.router, prefix="/api/v1")

    registry = build_openapi_registry()
    app.state.openapi_registry = registry

    def custom_openapi() -> Dict[str, Any]:
        if app.openapi_schema is None:
            base_document = get_openapi(
                title=app.title,
                version=app.version,
                description=app.description,
                routes=app.routes,
            )
            app.openapi_schema = registry.generate_document(base_document)
        return app.openapi_schema

    app.openapi = custom_openapi

    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "message": settings.APP_NAME,
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "status": "running",
            "docs_url": "/api/docs",
            "health_url": "/api/v1/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "jobboard.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
