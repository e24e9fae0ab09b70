"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional, Union

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cookmeet.domain.shared import PersistenceError, ensure_tz_aware, utc_now
from cookmeet.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserPatch,
    UserRepository,
)
from cookmeet.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    text = str(error).lower()
    return "unique" in text or "duplicate" in text


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            msg = "failed to look up user"
            raise PersistenceError(msg) from e
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def get_by_id(self, user_id: int) -> User:
        model = await self._find_model_by_id(user_id)
        if model is None:
            raise UserNotFoundError(user_id)
        return self._map_to_domain(model)

    async def create(self, user: User) -> User:
        model = UserModel(
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            icon_url=user.icon_url,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            msg = "failed to create user"
            raise PersistenceError(msg) from e
        except SQLAlchemyError as e:
            msg = "failed to create user"
            raise PersistenceError(msg) from e

        logger.info("Created user: %s (email: %s)", model.id, model.email)
        return self._map_to_domain(model)

    async def update_fields(self, user_id: int, patch: UserPatch) -> User:
        changes = patch.changes()
        if not changes:
            return await self.get_by_id(user_id)

        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(**changes, updated_at=utc_now())
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as e:
            if "email" in changes and _is_unique_violation(e):
                raise EmailAlreadyExistsError(changes["email"]) from e
            msg = "failed to update user"
            raise PersistenceError(msg, details={"user_id": user_id}) from e
        except SQLAlchemyError as e:
            msg = "failed to update user"
            raise PersistenceError(msg, details={"user_id": user_id}) from e

        if result.rowcount == 0:
            raise UserNotFoundError(user_id)

        logger.debug("Updated user %s: %s", user_id, sorted(changes))
        return await self.get_by_id(user_id)

    async def _find_model_by_id(self, user_id: int) -> Optional[UserModel]:
        stmt = (
            select(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            msg = "failed to load user"
            raise PersistenceError(msg, details={"user_id": user_id}) from e
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            icon_url=model.icon_url,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
