"""
Tests for login and registration validation.
"""

import pytest
from pydantic import ValidationError

from jobboard.schemas.auth import LoginSchema, RegistrationSchema


def _errors_by_field(exc: ValidationError):
    errors = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        errors.setdefault(field, []).append(error["msg"])
    return errors


def _registration(**overrides):
    payload = {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@example.com",
        "password": "s3cret-pass",
        "confirmPassword": "s3cret-pass",
        "accountType": "user",
        "hasAgreedToTerms": True,
    }
    payload.update(overrides)
    return payload


@pytest.mark.unit
class TestLoginSchema:

    def test_valid_login(self):
        login = LoginSchema.model_validate(
            {"email": "jane@example.com", "password": "x", "rememberMe": True}
        )

        assert login.email == "jane@example.com"
        assert login.remember_me is True

    def test_remember_me_is_optional(self):
        login = LoginSchema(email="jane@example.com", password="x")

        assert login.remember_me is None

    def test_empty_password(self):
        with pytest.raises(ValidationError) as exc_info:
            LoginSchema(email="jane@example.com", password="")

        assert _errors_by_field(exc_info.value) == {"password": ["Password is required"]}

    def test_invalid_email(self):
        with pytest.raises(ValidationError) as exc_info:
            LoginSchema(email="not-an-email", password="x")

        assert _errors_by_field(exc_info.value) == {"email": ["Invalid email address"]}

    def test_each_field_reports_its_own_error(self):
        with pytest.raises(ValidationError) as exc_info:
            LoginSchema(email="not-an-email", password="")

        assert _errors_by_field(exc_info.value) == {
            "email": ["Invalid email address"],
            "password": ["Password is required"],
        }


@pytest.mark.unit
class TestRegistrationSchema:

    def test_valid_registration(self):
        registration = RegistrationSchema.model_validate(_registration())

        assert registration.full_name == "Jane Doe"
        assert registration.account_type == "user"
        assert registration.has_agreed_to_terms is True

    def test_passwords_do_not_match(self):
        with pytest.raises(ValidationError) as exc_info:
            RegistrationSchema.model_validate(_registration(confirmPassword="something-else"))

        assert _errors_by_field(exc_info.value) == {"confirmPassword": ["Passwords do not match"]}

    def test_mismatch_reported_alongside_field_errors(self):
        payload = _registration(
            email="bad",
            password="short",
            confirmPassword="different",
            firstName="",
        )

        with pytest.raises(ValidationError) as exc_info:
            RegistrationSchema.model_validate(payload)

        errors = _errors_by_field(exc_info.value)
        assert errors["confirmPassword"] == ["Passwords do not match"]
        assert errors["email"] == ["Invalid email address"]
        assert errors["password"] == ["Password must be at least 8 characters long"]
        assert errors["firstName"] == ["First name is required"]

    def test_short_password(self):
        with pytest.raises(ValidationError) as exc_info:
            RegistrationSchema.model_validate(_registration(password="short", confirmPassword="short"))

        assert _errors_by_field(exc_info.value) == {
            "password": ["Password must be at least 8 characters long"]
        }

    def test_required_names(self):
        with pytest.raises(ValidationError) as exc_info:
            RegistrationSchema.model_validate(_registration(firstName="", lastName=""))

        assert _errors_by_field(exc_info.value) == {
            "firstName": ["First name is required"],
            "lastName": ["Last name is required"],
        }

    @pytest.mark.parametrize("account_type", [None, "", "admin"])
    def test_account_type_required(self, account_type):
        payload = _registration(accountType=account_type)

        with pytest.raises(ValidationError) as exc_info:
            RegistrationSchema.model_validate(payload)

        assert _errors_by_field(exc_info.value) == {"accountType": ["Account type is required"]}

    def test_missing_account_type(self):
        payload = _registration()
        del payload["accountType"]

        with pytest.raises(ValidationError) as exc_info:
            RegistrationSchema.model_validate(payload)

        assert _errors_by_field(exc_info.value) == {"accountType": ["Account type is required"]}

    def test_employer_account(self):
        registration = RegistrationSchema.model_validate(_registration(accountType="employer"))

        assert registration.account_type == "employer"
