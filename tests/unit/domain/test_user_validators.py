"""Unit tests for user input validators and the Email value object."""

import pytest

from cookmeet.domain.shared.exceptions import FieldValidationError, ValidationError
from cookmeet.domain.user import Email, InvalidEmailError
from cookmeet.domain.user.validators import (
    validate_credentials,
    validate_sign_up,
    validate_user_changes,
)


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  Hanako@Example.COM ").value == "hanako@example.com"

    @pytest.mark.parametrize("value", ["", "   ", "no-at-sign", "a@b", "a@@b.com"])
    def test_rejects_malformed(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)

    def test_invalid_email_is_a_field_error(self):
        with pytest.raises(FieldValidationError) as exc_info:
            Email("nope")
        assert exc_info.value.field == "email"

    def test_rejects_address_longer_than_column(self):
        local = "a" * 250
        with pytest.raises(InvalidEmailError, match="limited max 255 char"):
            Email(f"{local}@example.com")

    def test_accepts_address_at_column_limit(self):
        local = "a" * (255 - len("@example.com"))
        assert len(Email(f"{local}@example.com").value) == 255


class TestValidateSignUp:
    def test_accepts_valid_input(self):
        validate_sign_up("Hanako", "hanako@example.com", "secret1")

    def test_requires_name(self):
        with pytest.raises(FieldValidationError) as exc_info:
            validate_sign_up("  ", "hanako@example.com", "secret1")
        assert exc_info.value.field == "name"

    def test_requires_email(self):
        with pytest.raises(FieldValidationError) as exc_info:
            validate_sign_up("Hanako", "", "secret1")
        assert exc_info.value.field == "email"

    def test_password_minimum_length(self):
        with pytest.raises(FieldValidationError, match="limited min 6 char"):
            validate_sign_up("Hanako", "hanako@example.com", "12345")

    def test_password_six_chars_is_enough(self):
        validate_sign_up("Hanako", "hanako@example.com", "123456")

    def test_password_over_72_bytes_rejected(self):
        # 25 three-byte characters = 75 bytes
        with pytest.raises(FieldValidationError) as exc_info:
            validate_sign_up("Hanako", "hanako@example.com", "あ" * 25)
        assert exc_info.value.field == "password"

    def test_errors_are_validation_errors(self):
        with pytest.raises(ValidationError):
            validate_sign_up("", "", "")


class TestValidateCredentials:
    def test_name_not_required(self):
        validate_credentials("hanako@example.com", "secret1")

    def test_bad_email(self):
        with pytest.raises(InvalidEmailError):
            validate_credentials("hanako", "secret1")

    def test_short_password(self):
        with pytest.raises(FieldValidationError):
            validate_credentials("hanako@example.com", "abc")


class TestValidateUserChanges:
    def test_nothing_supplied_is_valid(self):
        validate_user_changes()

    def test_only_supplied_fields_are_checked(self):
        validate_user_changes(name="New Name")

    def test_empty_string_is_a_supplied_value(self):
        with pytest.raises(FieldValidationError) as exc_info:
            validate_user_changes(name="")
        assert exc_info.value.field == "name"

    def test_supplied_password_must_be_valid(self):
        with pytest.raises(FieldValidationError):
            validate_user_changes(password="123")
