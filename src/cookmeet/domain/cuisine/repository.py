"""Cuisine repository interface.

Implementations are bound to the current user at construction and
filter every statement on ``owner_id``.
"""

from abc import ABC, abstractmethod

from cookmeet.domain.cuisine.cuisine import Cuisine, CuisinePatch


class CuisineRepository(ABC):
    """Owner-scoped repository for Cuisine entities."""

    @abstractmethod
    async def list_all(self) -> list[Cuisine]:
        """Return the owner's cuisines, oldest first."""

    @abstractmethod
    async def get(self, cuisine_id: int) -> Cuisine:
        """Return one cuisine or raise CuisineNotFoundError."""

    @abstractmethod
    async def create(self, cuisine: Cuisine) -> Cuisine:
        """Insert a cuisine and return it with id and timestamps assigned."""

    @abstractmethod
    async def delete(self, cuisine_id: int) -> None:
        """Delete one cuisine; raises CuisineNotFoundError if nothing was deleted."""

    @abstractmethod
    async def update_fields(self, cuisine_id: int, patch: CuisinePatch) -> Cuisine:
        """Overwrite only the columns set on the patch and return the result."""

    @abstractmethod
    async def count_icon_references(self, icon_url: str) -> int:
        """Number of the owner's cuisines whose icon is ``icon_url``."""
