"""SQLAlchemy implementation of CuisineRepository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cookmeet.domain.cuisine import (
    Cuisine,
    CuisineNotFoundError,
    CuisinePatch,
    CuisineRepository,
    validate_cuisine,
)
from cookmeet.domain.shared import (
    ForbiddenError,
    PersistenceError,
    ensure_tz_aware,
    utc_now,
)
from cookmeet.infrastructure.persistence.sqlalchemy.models import CuisineModel

if TYPE_CHECKING:
    from cookmeet.application.ports.identity import CurrentUser

logger = logging.getLogger(__name__)


class CuisineRepositorySQLAlchemy(CuisineRepository):
    """SQLAlchemy implementation of CuisineRepository.

    This repository is user-scoped - every statement carries
    ``owner_id == current_user.user_id``.
    """

    def __init__(self, session: AsyncSession, current_user: CurrentUser) -> None:
        self._session = session
        self._user_id = current_user.user_id

    async def list_all(self) -> list[Cuisine]:
        stmt = (
            select(CuisineModel)
            .where(CuisineModel.owner_id == self._user_id)
            .order_by(CuisineModel.created_at.asc(), CuisineModel.id.asc())
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            msg = "failed to list cuisines"
            raise PersistenceError(msg) from e
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def get(self, cuisine_id: int) -> Cuisine:
        model = await self._find_model(cuisine_id)
        if model is None:
            raise CuisineNotFoundError(cuisine_id)
        return self._map_to_domain(model)

    async def create(self, cuisine: Cuisine) -> Cuisine:
        validate_cuisine(cuisine)
        if not cuisine.is_owned_by(self._user_id):
            msg = "cannot create a cuisine for another user"
            raise ForbiddenError(msg)

        model = CuisineModel(
            owner_id=self._user_id,
            title=cuisine.title,
            url=cuisine.url,
            comment=cuisine.comment,
            icon_url=cuisine.icon_url,
            created_at=cuisine.created_at,
            updated_at=cuisine.updated_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            msg = "failed to create cuisine"
            raise PersistenceError(msg) from e

        logger.debug("Inserted cuisine %s for user %s", model.id, self._user_id)
        return self._map_to_domain(model)

    async def delete(self, cuisine_id: int) -> None:
        stmt = delete(CuisineModel).where(
            CuisineModel.id == cuisine_id,
            CuisineModel.owner_id == self._user_id,
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            msg = "failed to delete cuisine"
            raise PersistenceError(msg, details={"cuisine_id": cuisine_id}) from e

        if result.rowcount == 0:
            raise CuisineNotFoundError(cuisine_id)

    async def update_fields(self, cuisine_id: int, patch: CuisinePatch) -> Cuisine:
        changes = patch.changes()
        if not changes:
            return await self.get(cuisine_id)

        stmt = (
            update(CuisineModel)
            .where(
                CuisineModel.id == cuisine_id,
                CuisineModel.owner_id == self._user_id,
            )
            .values(**changes, updated_at=utc_now())
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            msg = "failed to update cuisine"
            raise PersistenceError(msg, details={"cuisine_id": cuisine_id}) from e

        if result.rowcount == 0:
            raise CuisineNotFoundError(cuisine_id)

        return await self.get(cuisine_id)

    async def count_icon_references(self, icon_url: str) -> int:
        stmt = select(func.count(CuisineModel.id)).where(
            CuisineModel.owner_id == self._user_id,
            CuisineModel.icon_url == icon_url,
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            msg = "failed to count icon references"
            raise PersistenceError(msg) from e
        return result.scalar_one()

    async def _find_model(self, cuisine_id: int) -> Optional[CuisineModel]:
        stmt = (
            select(CuisineModel)
            .where(
                CuisineModel.id == cuisine_id,
                CuisineModel.owner_id == self._user_id,
            )
            .execution_options(populate_existing=True)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            msg = "failed to load cuisine"
            raise PersistenceError(msg, details={"cuisine_id": cuisine_id}) from e
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: CuisineModel) -> Cuisine:
        return Cuisine(
            id=model.id,
            owner_id=model.owner_id,
            title=model.title,
            url=model.url,
            comment=model.comment,
            icon_url=model.icon_url,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
