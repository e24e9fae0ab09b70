"""Shared domain building blocks."""

from cookmeet.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    FieldValidationError,
    ForbiddenError,
    PersistenceError,
    ValidationError,
)
from cookmeet.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "FieldValidationError",
    "ForbiddenError",
    "PersistenceError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
