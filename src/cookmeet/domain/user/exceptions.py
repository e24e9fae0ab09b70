"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from cookmeet.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    FieldValidationError,
)


class InvalidEmailError(FieldValidationError):
    """Raised when email format is invalid."""

    def __init__(self, reason: str) -> None:
        super().__init__("email", reason)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "user already exists",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_ref: int | str) -> None:
        self.user_ref = user_ref
        super().__init__(
            "user not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user": str(user_ref)},
        )
