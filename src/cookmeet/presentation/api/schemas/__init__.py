"""API request/response schemas."""

from cookmeet.presentation.api.schemas.cuisines import CuisineResponse
from cookmeet.presentation.api.schemas.users import (
    CsrfTokenResponse,
    LoginRequest,
    SignUpRequest,
    UserResponse,
)

__all__ = [
    "CsrfTokenResponse",
    "CuisineResponse",
    "LoginRequest",
    "SignUpRequest",
    "UserResponse",
]
