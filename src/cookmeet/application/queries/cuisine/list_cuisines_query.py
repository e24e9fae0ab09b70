"""List the current user's cuisines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cookmeet.domain.cuisine import Cuisine, CuisineRepository

if TYPE_CHECKING:
    from cookmeet.application.factories import RepositoryFactory


class ListCuisinesQuery:
    def __init__(self, cuisine_repo: CuisineRepository):
        self._cuisine_repo = cuisine_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCuisinesQuery:
        return cls(cuisine_repo=factory.cuisine_repository())

    async def execute(self) -> list[Cuisine]:
        return await self._cuisine_repo.list_all()
