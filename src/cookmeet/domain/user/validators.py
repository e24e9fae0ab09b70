"""Structural validation for user input.

Pure functions: each raises FieldValidationError for the first field
that breaks a rule and returns None otherwise.
"""

from typing import Optional

from cookmeet.domain.shared.exceptions import FieldValidationError
from cookmeet.domain.user.email import Email

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_BYTES = 72
NAME_MAX_LENGTH = 100


def validate_name(name: str) -> None:
    if not name or not name.strip():
        raise FieldValidationError("name", "name is required")
    if len(name) > NAME_MAX_LENGTH:
        raise FieldValidationError(
            "name",
            f"limited max {NAME_MAX_LENGTH} char",
        )


def validate_email(email: str) -> None:
    Email(email)


def validate_password(password: str) -> None:
    if not password:
        raise FieldValidationError("password", "password is required")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise FieldValidationError(
            "password",
            f"limited min {PASSWORD_MIN_LENGTH} char",
        )
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise FieldValidationError(
            "password",
            f"limited max {PASSWORD_MAX_BYTES} bytes",
        )


def validate_sign_up(name: str, email: str, password: str) -> None:
    validate_name(name)
    validate_email(email)
    validate_password(password)


def validate_credentials(email: str, password: str) -> None:
    validate_email(email)
    validate_password(password)


def validate_user_changes(
    name: Optional[str] = None,
    email: Optional[str] = None,
    password: Optional[str] = None,
) -> None:
    """Validate only the fields that were supplied."""
    if email is not None:
        validate_email(email)
    if name is not None:
        validate_name(name)
    if password is not None:
        validate_password(password)
