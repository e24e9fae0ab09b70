"""Update the current user's profile with partial fields."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from cookmeet.application.services.icon_keys import (
    USER_ICON_PREFIX,
    content_addressed_key,
)
from cookmeet.domain.user import Email, User, UserPatch, UserRepository
from cookmeet.domain.user.validators import validate_user_changes

if TYPE_CHECKING:
    from cookmeet.application.dtos import IconUpload
    from cookmeet.application.factories import RepositoryFactory
    from cookmeet.application.ports.storage import BlobStorage
    from cookmeet_auth import PasswordHashingService

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Overwrite only the profile fields the caller supplied."""

    def __init__(  # NOQA: PLR0913
        self,
        user_repo: UserRepository,
        storage: BlobStorage,
        password_service: PasswordHashingService,
        user_id: int,
        bucket: str,
    ):
        self._user_repo = user_repo
        self._storage = storage
        self._password_service = password_service
        self._user_id = user_id
        self._bucket = bucket

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        storage: BlobStorage,
        password_service: PasswordHashingService,
        bucket: str,
    ) -> UpdateUserCommand:
        return cls(
            user_repo=factory.user_repository(),
            storage=storage,
            password_service=password_service,
            user_id=factory.current_user.user_id,
            bucket=bucket,
        )

    async def execute(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        icon: Optional[IconUpload] = None,
    ) -> User:
        validate_user_changes(name=name, email=email, password=password)

        icon_url = None
        if icon is not None:
            key = content_addressed_key(
                USER_ICON_PREFIX,
                self._user_id,
                icon.data,
                icon.filename,
            )
            icon_url = await self._storage.put(
                self._bucket,
                key,
                icon.data,
                icon.content_type,
            )

        patch = UserPatch(
            name=name.strip() if name is not None else None,
            email=Email(email).value if email is not None else None,
            password_hash=(
                self._password_service.hash(password) if password is not None else None
            ),
            icon_url=icon_url,
        )
        if patch.is_empty:
            return await self._user_repo.get_by_id(self._user_id)

        user = await self._user_repo.update_fields(self._user_id, patch)
        logger.info(
            "User %s updated fields: %s",
            self._user_id,
            ", ".join(sorted(patch.changes())),
        )
        return user
