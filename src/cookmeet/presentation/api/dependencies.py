"""FastAPI dependencies shared by the routers.

Each dependency has an ``Annotated`` alias (``DBSession``, ``AuthService``,
``AuthenticatedUser``, ``RepoFactory`` ...) so route signatures stay
short. Commands and queries are built inside the routes through their
``from_factory`` classmethods.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncIterator, Optional

from fastapi import Cookie, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from cookmeet.application.ports.identity import CurrentUser
from cookmeet.application.ports.storage import BlobStorage
from cookmeet.application.services import AuthenticationService
from cookmeet.domain.user import UserNotFoundError
from cookmeet.infrastructure.persistence.sqlalchemy.engine import create_engine_for_url
from cookmeet.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)
from cookmeet_auth import InvalidTokenError, JWTService, PasswordHashingService
from cookmeet_config.settings import Settings

logger = logging.getLogger(__name__)

TOKEN_COOKIE = "token"  # NOQA: S105


def get_api_settings(request: Request) -> Settings:
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# --- database ---------------------------------------------------------------


@lru_cache(maxsize=4)
def get_engine(database_url: str) -> AsyncEngine:
    """One engine (and pool) per database URL for the whole process."""
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        Path(database_url.split("///")[-1]).parent.mkdir(parents=True, exist_ok=True)
    return create_engine_for_url(database_url)


@lru_cache(maxsize=4)
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(settings: SettingsDep) -> AsyncIterator[AsyncSession]:
    """Request-scoped session; routes commit or roll back themselves."""
    async with get_session_maker(settings.database_url)() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# --- auth services ----------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service() -> PasswordHashingService:
    return PasswordHashingService()


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTServiceDep,
    password_service: PasswordServiceDep,
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# --- blob storage -----------------------------------------------------------


def get_blob_storage(request: Request) -> BlobStorage:
    """The adapter built once by ``create_app``."""
    return request.app.state.blob_storage


StorageDep = Annotated[BlobStorage, Depends(get_blob_storage)]


# --- current user -----------------------------------------------------------


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


async def get_current_user(
    session: DBSession,
    jwt_service: JWTServiceDep,
    token: Annotated[Optional[str], Cookie(alias=TOKEN_COOKIE)] = None,
) -> CurrentUser:
    """Resolve the caller from the ``token`` cookie.

    Raises
    ------
    HTTPException
        401 when the cookie is absent, the token does not verify, or
        the user it names has been removed.
    """
    if not token:
        raise _unauthorized("Authentication required")

    try:
        payload = jwt_service.verify_token(token)
    except InvalidTokenError as e:
        logger.warning("Rejected token cookie: %s", e)
        raise _unauthorized("Invalid or expired token") from e

    try:
        user = await UserRepositorySQLAlchemy(session).get_by_id(payload.user_id)
    except UserNotFoundError as e:
        logger.warning("Token names unknown user %s", payload.user_id)
        raise _unauthorized("User not found") from e

    return CurrentUser(user_id=user.id, email=user.email)


AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]


async def get_repository_factory(
    session: DBSession,
    current_user: AuthenticatedUser,
) -> SQLAlchemyRepositoryFactory:
    """Repositories bound to the authenticated user."""
    return SQLAlchemyRepositoryFactory(session=session, current_user=current_user)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
