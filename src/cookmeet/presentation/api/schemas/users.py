"""User and authentication schemas for request/response models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from cookmeet.domain.user import User


class SignUpRequest(BaseModel):
    """Request schema for sign-up.

    Fields are plain strings; the domain validators decide what is
    acceptable so every rejection is a 400 with the same error shape.
    """

    name: str = ""
    email: str = ""
    password: str = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Hanako",
                "email": "hanako@example.com",
                "password": "secret123",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: str = ""
    password: str = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "hanako@example.com",
                "password": "secret123",
            },
        },
    )


class CsrfTokenResponse(BaseModel):
    csrf_token: str


class UserResponse(BaseModel):
    """Public projection of a user. Never carries the password hash."""

    id: int
    name: str
    email: str
    icon_url: Optional[str] = Field(default=None)

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            icon_url=user.icon_url,
        )
