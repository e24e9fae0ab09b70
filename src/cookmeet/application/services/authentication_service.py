"""Authentication service for sign-up and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cookmeet.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
)
from cookmeet.domain.user.validators import validate_credentials, validate_sign_up
from cookmeet_auth import InvalidPasswordError, JWTService, PasswordHashingService

if TYPE_CHECKING:
    from cookmeet.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Bridges the generic cookmeet_auth primitives (bcrypt hashing, JWT
    issuance) with the User domain:
    - Sign-up with a unique email
    - Login returning a signed access token
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def sign_up(self, name: str, email: str, password: str) -> User:
        validate_sign_up(name, email, password)
        normalized = Email(email).value

        existing_user = await self._user_repo.find_by_email(normalized)
        if existing_user is not None:
            raise EmailAlreadyExistsError(normalized)

        password_hash = self._password_service.hash(password)
        user = await self._user_repo.create(
            User.create(
                name=name.strip(),
                email=normalized,
                password_hash=password_hash,
            ),
        )

        logger.info("User signed up: %s (id=%s)", normalized, user.id)
        return user

    async def login(self, email: str, password: str) -> tuple[User, str]:
        validate_credentials(email, password)
        normalized = Email(email).value

        user = await self._user_repo.find_by_email(normalized)
        if user is None:
            raise UserNotFoundError(normalized)

        if not self._password_service.verify(password, user.password_hash):
            logger.debug("Password mismatch for %s", normalized)
            raise InvalidPasswordError

        token = self._jwt_service.create_access_token(user_id=user.id)

        logger.info("User logged in: %s", normalized)
        return user, token
