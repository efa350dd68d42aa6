"""
User Pydantic Schemas

Request/response models for the current user's account, profile
and saved jobs.
"""

from typing import Optional, List
from datetime import datetime

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from jobboard.schemas.common import CamelModel


class ORMCamelModel(CamelModel):
    """Camel-cased schema that can be built from ORM objects."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserProfileResponse(ORMCamelModel):
    id: int
    bio: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter_url: Optional[str] = None
    profile_image_url: Optional[str] = None
    is_open_to_work: bool = False
    updated_at: Optional[datetime] = None


class UserResponse(ORMCamelModel):
    """Account details returned to the signed-in user."""

    id: int
    email: str
    full_name: str
    role: str
    status: str
    email_verified: bool
    image: Optional[str] = None
    last_login_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    profile: Optional[UserProfileResponse] = None


class UserProfileUpdate(CamelModel):
    """Fields a user may change on their profile."""

    bio: Optional[str] = Field(None, max_length=2000, description="Short biography")
    resume_url: Optional[str] = Field(None, max_length=1000)
    cover_letter_url: Optional[str] = Field(None, max_length=1000)
    profile_image_url: Optional[str] = Field(None, max_length=1000)
    is_open_to_work: Optional[bool] = Field(None, description="Visible to employers as open to work")


class ProfileStatusResponse(CamelModel):
    complete: bool
    has_resume: bool = False
    has_bio: bool = False


class SavedJobEmployer(CamelModel):
    name: Optional[str] = None
    logo_url: Optional[str] = None


class SavedJobSummary(ORMCamelModel):
    """The job columns shown on a saved-job card."""

    id: int
    title: str
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    job_type: Optional[str] = None
    is_remote: bool = False
    is_active: bool = True
    application_deadline: Optional[datetime] = None
    employer: SavedJobEmployer


class SavedJobItem(CamelModel):
    id: int
    saved_at: datetime
    job: SavedJobSummary
    is_closed: bool = Field(..., description="Application deadline has passed")
    is_expired: bool = Field(..., description="Job is no longer active")


class SavedJobStatus(CamelModel):
    is_saved: bool


class SavedJobsQuery(CamelModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=50)


__all__ = [
    "UserProfileResponse",
    "UserResponse",
    "UserProfileUpdate",
    "ProfileStatusResponse",
    "SavedJobEmployer",
    "SavedJobSummary",
    "SavedJobItem",
    "SavedJobStatus",
    "SavedJobsQuery",
]
