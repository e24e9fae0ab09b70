"""Authentication services.

Provides password hashing and JWT token management.
"""

from cookmeet_auth.services.jwt_service import JWTService
from cookmeet_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
    "JWTService",
]
