"""
Database Models Package

Contains SQLAlchemy ORM models for the job board application.
"""

from jobboard.core.database import Base
from jobboard.models.job import Job
from jobboard.models.user import User, UserProfile, SavedJob

__all__ = [
    "Base",
    "Job",
    "User",
    "UserProfile",
    "SavedJob",
]
