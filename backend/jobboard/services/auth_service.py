"""
Authentication Service Layer

Registration and login for job seekers and employers.
"""

from typing import Optional

from jobboard.core.exceptions import (
    EmailAlreadyRegisteredException,
    InvalidCredentialsException,
)
from jobboard.core.security import SecurityManager
from jobboard.models.user import User
from jobboard.repositories.user_repository import UserRepository
from jobboard.schemas.auth import LoginSchema, RegistrationSchema, TokenResponse
from jobboard.utils.logger import get_logger, log_security_event

logger = get_logger(__name__)


class AuthService:
    """Service layer for authentication operations."""

    def __init__(self, user_repo: UserRepository, security: SecurityManager):
        self.user_repo = user_repo
        self.security = security

    async def register(
        self,
        registration: RegistrationSchema,
        ip_address: Optional[str] = None,
    ) -> User:
        """
        Create a new account with an empty profile.

        Raises:
            EmailAlreadyRegisteredException: If the email is already in use
        """
        if await self.user_repo.find_by_email(registration.email, include_deleted=True) is not None:
            log_security_event(
                "registration_rejected",
                ip_address=ip_address,
                success=False,
                reason="email_taken",
            )
            raise EmailAlreadyRegisteredException(registration.email)

        user = await self.user_repo.create_user(
            email=registration.email.lower(),
            full_name=registration.full_name,
            password_hash=self.security.hash_password(registration.password),
            role=registration.account_type,
        )
        log_security_event("registration", user_id=user.id, ip_address=ip_address)
        return user

    async def login(self, credentials: LoginSchema, ip_address: Optional[str] = None) -> TokenResponse:
        """
        Check the credentials and issue an access token.

        Raises:
            InvalidCredentialsException: If the email or password is wrong,
                or the account is not active
        """
        user = await self.user_repo.find_by_email(credentials.email)
        if (
            user is None
            or user.status != "active"
            or not self.security.verify_password(credentials.password, user.password_hash)
        ):
            log_security_event("login", ip_address=ip_address, success=False)
            raise InvalidCredentialsException()

        await self.user_repo.update_last_login(user.id)
        log_security_event("login", user_id=user.id, ip_address=ip_address)
        return self.issue_token(user)

    def issue_token(self, user: User) -> TokenResponse:
        token = self.security.create_access_token({"sub": str(user.id), "role": user.role})
        return TokenResponse(
            access_token=token,
            expires_in=self.security.access_token_expire_seconds,
        )
