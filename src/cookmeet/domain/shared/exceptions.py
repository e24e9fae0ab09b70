"""Domain exception hierarchy.

Every error the domain and application layers raise on purpose is a
DomainException carrying a stable ErrorCode. The API layer turns the
code into an HTTP status in one place.
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Machine-readable codes returned to API clients. Do not rename."""

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_STORAGE_PATH = "INVALID_STORAGE_PATH"

    # 403
    FORBIDDEN = "FORBIDDEN"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    CUISINE_NOT_FOUND = "CUISINE_NOT_FOUND"

    # 409
    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"

    # 500
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
    STORAGE_FAILED = "STORAGE_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base class for expected failures.

    Attributes
    ----------
    message
        Text that is safe to show to the end user
    code
        Stable ErrorCode; subclasses pick a default via ``default_code``
    details
        Extra context for logs only, never sent to the client
    """

    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input rejected before any side effect happened."""

    default_code = ErrorCode.VALIDATION_ERROR


class FieldValidationError(ValidationError):
    """One named input field broke a structural rule."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(
            f"{field}: {reason}",
            details={"field": field, "reason": reason},
        )


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ForbiddenError(DomainException):
    """The entity exists but the caller may not act on it."""

    default_code = ErrorCode.FORBIDDEN


class ConflictError(DomainException):
    default_code = ErrorCode.CONFLICT


class PersistenceError(DomainException):
    """The relational store failed; the driver error is the ``__cause__``."""

    default_code = ErrorCode.PERSISTENCE_FAILED
