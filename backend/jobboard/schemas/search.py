"""
Job Search Schemas

Query parameters accepted by the search endpoint and the shape of the
documents stored in the Typesense jobs collection.
"""

from typing import Optional, List, Literal

from pydantic import Field, field_validator

from jobboard.schemas.common import CamelModel

JobType = Literal["full-time", "part-time", "contract", "volunteer", "internship"]
SortDirection = Literal["asc", "desc"]


class JobSearchParams(CamelModel):
    """Schema for job search parameters."""

    q: str = Field("*", description="Free-text query, '*' matches everything")
    page: int = Field(1, ge=1, description="Page number")
    limit: int = Field(10, ge=1, le=100, description="Page size")

    job_type: Optional[List[JobType]] = Field(None, description="Job types (OR)")
    skills: Optional[List[str]] = Field(None, description="Required skills (AND)")

    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zipcode: Optional[str] = None
    include_remote: Optional[bool] = Field(None, description="Also match remote jobs")

    experience: Optional[str] = None
    status: Optional[str] = None
    is_active: Optional[bool] = None

    sort_by: str = Field("createdAt", description="Document field to sort on")
    order: SortDirection = Field("desc", description="Sort direction")

    @field_validator("q")
    @classmethod
    def blank_query_matches_all(cls, value: str) -> str:
        return value.strip() or "*"


class JobDocument(CamelModel):
    """A job as indexed in Typesense."""

    id: str
    title: str
    company: str
    description: str
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    is_remote: bool
    status: str
    experience: Optional[str] = None
    job_type: str
    skills: List[str] = Field(default_factory=list)
    created_at: int
