"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from cookmeet.domain.user.user import User, UserPatch


class UserRepository(ABC):
    """Repository interface for User entities."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their (normalized) email address."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User:
        """Get a user by id, raising UserNotFoundError if missing."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user and return it with its id assigned.

        Raises EmailAlreadyExistsError on a duplicate email.
        """

    @abstractmethod
    async def update_fields(self, user_id: int, patch: UserPatch) -> User:
        """Overwrite only the columns set on the patch and return the result."""
