"""Authentication primitives with no knowledge of users or cuisines.

``PasswordHashingService`` wraps bcrypt and ``JWTService`` issues and
verifies the HS256 session tokens. Wiring them to the user store happens
in ``cookmeet.application.services.AuthenticationService``.
"""

from cookmeet_auth.exceptions import (
    AuthError,
    InvalidPasswordError,
    InvalidTokenError,
    WeakPasswordError,
)
from cookmeet_auth.schemas import TokenPayload
from cookmeet_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidPasswordError",
    "InvalidTokenError",
    "WeakPasswordError",
]
