"""
Authentication Pydantic Schemas

Login and registration payloads. Error messages are shown to end users
as-is, so every rule raises its own fixed message on its own field.
"""

from typing import Any, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_core import InitErrorDetails, PydanticCustomError

from jobboard.schemas.common import CamelModel

ACCOUNT_TYPES = ("user", "employer")
MIN_PASSWORD_LENGTH = 8


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("invalid_email", "Invalid email address")
    return value


def _check_required(value: str, message: str) -> str:
    if len(value) < 1:
        raise PydanticCustomError("required", message)
    return value


def _raw_field(data: Dict[str, Any], alias: str, name: str) -> Any:
    return data[alias] if alias in data else data.get(name)


def _line_errors(exc: ValidationError) -> List[InitErrorDetails]:
    return [
        InitErrorDetails(
            type=PydanticCustomError(error["type"], error["msg"]),
            loc=error["loc"],
            input=error.get("input"),
        )
        for error in exc.errors()
    ]


class LoginSchema(CamelModel):
    """Credentials submitted to the login endpoint."""

    email: str = Field(..., description="Account email")
    password: str = Field(..., description="Account password")
    remember_me: Optional[bool] = Field(None, description="Keep the session alive longer")

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def password_must_be_present(cls, value: str) -> str:
        return _check_required(value, "Password is required")


class RegistrationSchema(CamelModel):
    """Sign-up form for job seekers and employers."""

    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    email: str = Field(..., description="Account email")
    password: str = Field(..., description="Password, at least 8 characters")
    confirm_password: str = Field(..., description="Must equal password")
    account_type: Optional[str] = Field(
        None, description="Either 'user' or 'employer'"
    )
    has_agreed_to_terms: bool = Field(..., description="Terms of service accepted")

    @field_validator("first_name")
    @classmethod
    def first_name_required(cls, value: str) -> str:
        return _check_required(value, "First name is required")

    @field_validator("last_name")
    @classmethod
    def last_name_required(cls, value: str) -> str:
        return _check_required(value, "Last name is required")

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("password")
    @classmethod
    def password_min_length(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least 8 characters long",
            )
        return value

    @field_validator("account_type")
    @classmethod
    def account_type_must_be_known(cls, value: Optional[str]) -> str:
        if value not in ACCOUNT_TYPES:
            raise PydanticCustomError("account_type", "Account type is required")
        return value

    @model_validator(mode="wrap")
    @classmethod
    def passwords_must_match(cls, data: Any, handler):
        """
        Compare the raw password fields before field validation runs.

        A mismatch is reported on confirmPassword alongside whatever
        field errors the rest of the payload produces. A missing
        accountType is checked the same way as an explicit null.
        """
        if not isinstance(data, dict):
            return handler(data)

        if "accountType" not in data and "account_type" not in data:
            data = {**data, "accountType": None}

        password = _raw_field(data, "password", "password")
        confirm_password = _raw_field(data, "confirmPassword", "confirm_password")
        if password == confirm_password:
            return handler(data)

        line_errors: List[InitErrorDetails] = []
        try:
            handler(data)
        except ValidationError as exc:
            line_errors.extend(_line_errors(exc))

        line_errors.append(
            InitErrorDetails(
                type=PydanticCustomError("passwords_mismatch", "Passwords do not match"),
                loc=("confirmPassword",),
                input=confirm_password,
            )
        )
        raise ValidationError.from_exception_data(cls.__name__, line_errors)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class TokenResponse(CamelModel):
    """Bearer token issued after login or registration."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Lifetime in seconds")
