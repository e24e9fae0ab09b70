"""What commands and queries need in order to get at storage."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from cookmeet.domain.cuisine import CuisineRepository
from cookmeet.domain.user import UserRepository

if TYPE_CHECKING:
    from cookmeet.application.ports.identity import CurrentUser


class RepositoryFactory(Protocol):
    """Hands out repositories already scoped to ``current_user``."""

    @property
    def current_user(self) -> CurrentUser: ...

    @property
    def session(self) -> Any:
        """The unit of work; routers commit or roll it back."""
        ...

    def cuisine_repository(self) -> CuisineRepository: ...

    def user_repository(self) -> UserRepository: ...
