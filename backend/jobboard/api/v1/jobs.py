"""
Job API v1 Endpoints

Full-text job search.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from jobboard.api.deps import get_job_search_service
from jobboard.core.openapi import OpenAPIRegistry
from jobboard.schemas.common import PaginatedResponse
from jobboard.schemas.search import JobDocument, JobSearchParams
from jobboard.services.search_service import JobSearchService
from jobboard.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("/search", response_model=PaginatedResponse[dict])
async def search_jobs(
    q: str = Query("*", description="Search text"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    job_type: Optional[List[str]] = Query(None, alias="jobType"),
    skills: Optional[List[str]] = Query(None),
    city: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    country: Optional[str] = Query(None),
    zipcode: Optional[str] = Query(None),
    include_remote: Optional[bool] = Query(None, alias="includeRemote"),
    experience: Optional[str] = Query(None),
    job_status: Optional[str] = Query(None, alias="status"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    sort_by: str = Query("createdAt", alias="sortBy"),
    order: str = Query("desc", pattern="^(asc|desc)$"),
    search_service: JobSearchService = Depends(get_job_search_service),
):
    """Search jobs by text, location, skills and job type."""
    try:
        params = JobSearchParams(
            q=q,
            page=page,
            limit=limit,
            job_type=job_type,
            skills=skills,
            city=city,
            state=state,
            country=country,
            zipcode=zipcode,
            include_remote=include_remote,
            experience=experience,
            status=job_status,
            is_active=is_active,
            sort_by=sort_by,
            order=order,
        )
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("query", *error["loc"])} for error in e.errors()]
        )

    result = await search_service.search_jobs(params)
    return PaginatedResponse(
        message="Jobs retrieved successfully",
        data=result["items"],
        pagination=result["pagination"],
    )


def register_openapi(registry: OpenAPIRegistry) -> None:
    registry.register_schema(JobDocument)
    registry.register_path(
        method="get",
        path="/api/v1/jobs/search",
        summary="Search jobs",
        tags=["Jobs"],
        responses={
            200: {"description": "Matching job documents with pagination metadata"},
            503: {"description": "Search service unavailable"},
        },
    )
