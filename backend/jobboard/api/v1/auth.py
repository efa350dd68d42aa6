"""
Authentication API v1 Endpoints

Registration and login.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from jobboard.api.deps import get_auth_service, get_client_ip
from jobboard.core.config import get_settings
from jobboard.core.openapi import OpenAPIRegistry
from jobboard.schemas.auth import LoginSchema, RegistrationSchema, TokenResponse
from jobboard.schemas.common import ApiResponse
from jobboard.schemas.user import UserResponse
from jobboard.services.auth_service import AuthService
from jobboard.utils.logger import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


def _set_session_cookie(response: Response, token: TokenResponse, remember_me: bool = True) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token.access_token,
        max_age=token.expires_in if remember_me else None,
        httponly=True,
        secure=settings.ENVIRONMENT == "production",
        samesite="lax",
    )


@router.post(
    "/register",
    response_model=ApiResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    registration: RegistrationSchema,
    request: Request,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Register a new job seeker or employer account."""
    user = await auth_service.register(registration, ip_address=get_client_ip(request))
    _set_session_cookie(response, auth_service.issue_token(user))
    return ApiResponse(
        message="User registered successfully",
        data=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=ApiResponse[TokenResponse])
async def login(
    credentials: LoginSchema,
    request: Request,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Sign in with email and password."""
    token = await auth_service.login(credentials, ip_address=get_client_ip(request))
    _set_session_cookie(response, token, remember_me=bool(credentials.remember_me))
    return ApiResponse(message="Login successful", data=token)


@router.post("/logout", response_model=ApiResponse[None])
async def logout(response: Response):
    """Clear the session cookie."""
    response.delete_cookie(get_settings().SESSION_COOKIE_NAME)
    return ApiResponse(message="Logged out")


def register_openapi(registry: OpenAPIRegistry) -> None:
    registry.register_schema(RegistrationSchema)
    registry.register_schema(LoginSchema)
    error_ref = {"content": {"application/json": {"schema": {"$ref": "#/components/schemas/ErrorResponse"}}}}

    registry.register_path(
        method="post",
        path="/api/v1/auth/register",
        summary="Register a new user",
        tags=["Auth"],
        responses={
            201: {"description": "User registered successfully"},
            409: {"description": "Email already registered", **error_ref},
            422: {"description": "Validation error"},
        },
    )
    registry.register_path(
        method="post",
        path="/api/v1/auth/login",
        summary="Log in with email and password",
        tags=["Auth"],
        responses={
            200: {"description": "Login successful; session cookie set"},
            401: {"description": "Invalid email or password", **error_ref},
        },
    )
    registry.register_path(
        method="post",
        path="/api/v1/auth/logout",
        summary="Log out",
        tags=["Auth"],
    )
