"""SQLAlchemy repository factory for creating user-scoped repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from cookmeet.infrastructure.persistence.sqlalchemy.repositories.cuisine_repository import (  # NOQA: E501
    CuisineRepositorySQLAlchemy,
)
from cookmeet.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

if TYPE_CHECKING:
    from cookmeet.application.ports.identity import CurrentUser


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession, current_user: CurrentUser):
        self._session = session
        self._current_user = current_user

        # Cached instances (created on demand)
        self._cuisine_repo: CuisineRepositorySQLAlchemy | None = None
        self._user_repo: UserRepositorySQLAlchemy | None = None

    @property
    def current_user(self) -> CurrentUser:
        return self._current_user

    @property
    def session(self) -> AsyncSession:
        return self._session

    def cuisine_repository(self) -> CuisineRepositorySQLAlchemy:
        if self._cuisine_repo is None:
            self._cuisine_repo = CuisineRepositorySQLAlchemy(
                self._session,
                self._current_user,
            )
        return self._cuisine_repo

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo
