"""
Tests for AuthService and SecurityManager.
"""

from datetime import timedelta

import pytest

from jobboard.core.exceptions import (
    EmailAlreadyRegisteredException,
    InvalidCredentialsException,
    InvalidTokenException,
)
from jobboard.core.security import SecurityManager
from jobboard.repositories.user_repository import UserRepository
from jobboard.schemas.auth import LoginSchema, RegistrationSchema
from jobboard.services.auth_service import AuthService


def _registration(email: str = "new@example.com") -> RegistrationSchema:
    return RegistrationSchema(
        first_name="New",
        last_name="Person",
        email=email,
        password="long-enough-pw",
        confirm_password="long-enough-pw",
        account_type="employer",
        has_agreed_to_terms=True,
    )


@pytest.mark.unit
class TestSecurityManager:

    def setup_method(self):
        self.security = SecurityManager(secret_key="unit-test-key")

    def test_password_hashing(self):
        hashed = self.security.hash_password("s3cret-pass")

        assert hashed != "s3cret-pass"
        assert self.security.verify_password("s3cret-pass", hashed) is True
        assert self.security.verify_password("wrong", hashed) is False

    def test_token_round_trip(self):
        token = self.security.create_access_token({"sub": "12"})

        assert self.security.verify_token(token)["sub"] == "12"

    def test_expired_token(self):
        token = self.security.create_access_token({"sub": "12"}, expires_delta=timedelta(seconds=-1))

        with pytest.raises(InvalidTokenException) as exc_info:
            self.security.verify_token(token)

        assert exc_info.value.user_message == "Token has expired"

    def test_token_signed_with_other_key(self):
        token = SecurityManager(secret_key="other-key").create_access_token({"sub": "12"})

        with pytest.raises(InvalidTokenException):
            self.security.verify_token(token)


@pytest.mark.database
class TestAuthService:

    def _service(self, session) -> AuthService:
        return AuthService(UserRepository(session), SecurityManager())

    async def test_register(self, db_session):
        user = await self._service(db_session).register(_registration())

        assert user.email == "new@example.com"
        assert user.full_name == "New Person"
        assert user.role == "employer"
        assert user.password_hash != "long-enough-pw"
        assert user.profile is not None

    async def test_register_duplicate_email(self, db_session, test_user):
        with pytest.raises(EmailAlreadyRegisteredException) as exc_info:
            await self._service(db_session).register(_registration(email="Jane@Example.com"))

        assert exc_info.value.http_status == 409

    async def test_register_email_of_deleted_account(self, db_session, user_factory):
        await user_factory(email="gone@example.com", status="deleted")

        with pytest.raises(EmailAlreadyRegisteredException):
            await self._service(db_session).register(_registration(email="gone@example.com"))

    async def test_login(self, db_session, test_user, test_password):
        service = self._service(db_session)

        token = await service.login(LoginSchema(email="jane@example.com", password=test_password))

        assert token.token_type == "bearer"
        assert SecurityManager().verify_token(token.access_token)["sub"] == str(test_user.id)

    async def test_login_wrong_password(self, db_session, test_user):
        with pytest.raises(InvalidCredentialsException) as exc_info:
            await self._service(db_session).login(
                LoginSchema(email="jane@example.com", password="wrong-password")
            )

        assert exc_info.value.user_message == "Invalid email or password"

    async def test_login_unknown_email(self, db_session):
        with pytest.raises(InvalidCredentialsException):
            await self._service(db_session).login(
                LoginSchema(email="nobody@example.com", password="whatever")
            )

    async def test_login_deactivated_account(self, db_session, user_factory, test_password):
        await user_factory(email="gone@example.com", status="deactivated")

        with pytest.raises(InvalidCredentialsException):
            await self._service(db_session).login(
                LoginSchema(email="gone@example.com", password=test_password)
            )
