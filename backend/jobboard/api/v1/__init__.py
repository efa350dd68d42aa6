"""
API v1 Package

Contains all version 1 API endpoints for the Job Board API.
"""

from .auth import router as auth_router
from .health import router as health_router
from .jobs import router as jobs_router
from .onboarding import router as onboarding_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "health_router",
    "jobs_router",
    "onboarding_router",
    "users_router",
]
