"""
User API v1 Endpoints

The signed-in user's account, profile, saved jobs and uploads.
"""

from fastapi import APIRouter, Depends, File, Path, Query, UploadFile, status

from jobboard.api.deps import (
    get_current_active_user_id,
    get_upload_user_service,
    get_user_service,
)
from jobboard.core.openapi import AUTHENTICATED, OpenAPIRegistry
from jobboard.schemas.common import ApiResponse, PaginatedResponse
from jobboard.schemas.storage import UploadResult, UploadType
from jobboard.schemas.user import (
    ProfileStatusResponse,
    SavedJobItem,
    SavedJobStatus,
    UserProfileResponse,
    UserProfileUpdate,
    UserResponse,
)
from jobboard.services.user_service import UserService
from jobboard.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_me(
    user_id: int = Depends(get_current_active_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """Get the signed-in user with their profile."""
    user = await user_service.get_current_user(user_id)
    return ApiResponse(message="User retrieved successfully", data=UserResponse.model_validate(user))


@router.put("/me/profile", response_model=ApiResponse[UserProfileResponse])
async def update_my_profile(
    profile_data: UserProfileUpdate,
    user_id: int = Depends(get_current_active_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """Update the signed-in user's profile."""
    profile = await user_service.update_profile(user_id, profile_data)
    return ApiResponse(
        message="Profile updated successfully",
        data=UserProfileResponse.model_validate(profile),
    )


@router.get("/me/profile/status", response_model=ApiResponse[ProfileStatusResponse])
async def get_my_profile_status(
    user_id: int = Depends(get_current_active_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """Report whether the profile is complete."""
    profile_status = await user_service.get_profile_status(user_id)
    return ApiResponse(
        message="Profile status retrieved successfully",
        data=ProfileStatusResponse(**profile_status),
    )


@router.get("/me/saved-jobs", response_model=PaginatedResponse[SavedJobItem])
async def list_saved_jobs(
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, le=50, description="Page size"),
    user_id: int = Depends(get_current_active_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """List saved jobs, most recently saved first."""
    items, pagination = await user_service.list_saved_jobs(user_id, page=page, limit=limit)
    return PaginatedResponse(
        message="Saved jobs retrieved successfully",
        data=items,
        pagination=pagination,
    )


@router.get("/me/saved-jobs/{job_id}", response_model=ApiResponse[SavedJobStatus])
async def get_saved_job_status(
    job_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_active_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """Check whether a job is saved."""
    is_saved = await user_service.is_job_saved(user_id, job_id)
    return ApiResponse(message="Saved job status retrieved", data=SavedJobStatus(is_saved=is_saved))


@router.post(
    "/me/saved-jobs/{job_id}",
    response_model=ApiResponse[SavedJobStatus],
    status_code=status.HTTP_201_CREATED,
)
async def save_job(
    job_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_active_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """Save a job. At most 50 jobs can be saved."""
    await user_service.save_job(user_id, job_id)
    return ApiResponse(message="Job saved successfully", data=SavedJobStatus(is_saved=True))


@router.delete("/me/saved-jobs/{job_id}", response_model=ApiResponse[SavedJobStatus])
async def unsave_job(
    job_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_active_user_id),
    user_service: UserService = Depends(get_user_service),
):
    """Remove a job from the saved list."""
    await user_service.unsave_job(user_id, job_id)
    return ApiResponse(message="Job removed from saved jobs", data=SavedJobStatus(is_saved=False))


@router.post(
    "/me/uploads/{upload_type}",
    response_model=ApiResponse[UploadResult],
    status_code=status.HTTP_201_CREATED,
)
async def upload_document(
    upload_type: UploadType,
    file: UploadFile = File(...),
    user_id: int = Depends(get_current_active_user_id),
    user_service: UserService = Depends(get_upload_user_service),
):
    """Upload a resume, cover letter or profile image."""
    content = await file.read()
    result = await user_service.upload_document(
        user_id=user_id,
        upload_type=upload_type,
        file_name=file.filename or "upload",
        content=content,
        content_type=file.content_type or "application/octet-stream",
    )
    return ApiResponse(message="File uploaded successfully", data=result)


def register_openapi(registry: OpenAPIRegistry) -> None:
    registry.register_schema(UserProfileUpdate)
    registry.register_schema(UploadResult)

    documented = [
        ("get", "/api/v1/users/me", "Get the current user"),
        ("put", "/api/v1/users/me/profile", "Update the current user's profile"),
        ("get", "/api/v1/users/me/profile/status", "Get profile completeness"),
        ("get", "/api/v1/users/me/saved-jobs", "List saved jobs"),
        ("get", "/api/v1/users/me/saved-jobs/{job_id}", "Check whether a job is saved"),
        ("delete", "/api/v1/users/me/saved-jobs/{job_id}", "Unsave a job"),
        ("post", "/api/v1/users/me/uploads/{upload_type}", "Upload a document"),
    ]
    for method, path, summary in documented:
        registry.register_path(
            method=method,
            path=path,
            summary=summary,
            tags=["Users"],
            security=AUTHENTICATED,
            responses={401: {"description": "Not signed in"}},
        )

    registry.register_path(
        method="post",
        path="/api/v1/users/me/saved-jobs/{job_id}",
        summary="Save a job",
        tags=["Users"],
        security=AUTHENTICATED,
        responses={
            201: {"description": "Job saved"},
            400: {"description": "Saved jobs limit reached. You can save up to 50 jobs."},
            401: {"description": "Not signed in"},
            404: {"description": "Job not found"},
        },
    )
