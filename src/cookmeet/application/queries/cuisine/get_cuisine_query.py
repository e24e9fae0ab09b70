"""Fetch a single cuisine owned by the current user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cookmeet.domain.cuisine import Cuisine, CuisineRepository

if TYPE_CHECKING:
    from cookmeet.application.factories import RepositoryFactory


class GetCuisineQuery:
    """Query returning one cuisine; foreign and missing ids look the same."""

    def __init__(self, cuisine_repo: CuisineRepository):
        self._cuisine_repo = cuisine_repo

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetCuisineQuery:
        return cls(cuisine_repo=factory.cuisine_repository())

    async def execute(self, cuisine_id: int) -> Cuisine:
        return await self._cuisine_repo.get(cuisine_id)
