"""
Onboarding API v1 Endpoints
"""

from typing import List

from fastapi import APIRouter

from jobboard.core.openapi import OpenAPIRegistry
from jobboard.schemas.common import ApiResponse
from jobboard.services.onboarding import EMPLOYER_ONBOARDING_STEPS, OnboardingStep

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


@router.get("/employer/steps", response_model=ApiResponse[List[OnboardingStep]])
async def get_employer_onboarding_steps():
    """Ordered steps of the employer onboarding wizard."""
    return ApiResponse(
        message="Onboarding steps retrieved successfully",
        data=list(EMPLOYER_ONBOARDING_STEPS),
    )


def register_openapi(registry: OpenAPIRegistry) -> None:
    registry.register_schema(OnboardingStep)
    registry.register_path(
        method="get",
        path="/api/v1/onboarding/employer/steps",
        summary="List employer onboarding steps",
        tags=["Onboarding"],
    )
