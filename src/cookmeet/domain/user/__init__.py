"""User domain manages identity and credentials.

This domain handles:
- User entity (id, name, email, password hash, icon)
- Structural validation of sign-up, login and update input
- Repository interface for persistence
"""

from cookmeet.domain.user.email import Email
from cookmeet.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from cookmeet.domain.user.repository import UserRepository
from cookmeet.domain.user.user import User, UserPatch

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserPatch",
    "UserRepository",
]
