"""Delete a cuisine and, best-effort, its icon blob."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cookmeet.application.ports.storage import InvalidStoragePathError, StorageError
from cookmeet.application.services.icon_keys import is_owner_key
from cookmeet.domain.cuisine import (
    Cuisine,
    CuisineAccessDeniedError,
    CuisineDeletionError,
    CuisineNotFoundError,
    CuisineRepository,
)

if TYPE_CHECKING:
    from cookmeet.application.factories import RepositoryFactory
    from cookmeet.application.ports.storage import BlobStorage

logger = logging.getLogger(__name__)


class DeleteCuisineCommand:
    """Delete a cuisine after checking that the requester owns it.

    The icon blob is removed only when it sits in the owner's namespace
    and no other cuisine of theirs still points at it. A failing icon
    cleanup never blocks the row deletion.
    """

    def __init__(
        self,
        cuisine_repo: CuisineRepository,
        storage: BlobStorage,
        user_id: int,
        bucket: str,
    ):
        self._cuisine_repo = cuisine_repo
        self._storage = storage
        self._user_id = user_id
        self._bucket = bucket

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        storage: BlobStorage,
        bucket: str,
    ) -> DeleteCuisineCommand:
        return cls(
            cuisine_repo=factory.cuisine_repository(),
            storage=storage,
            user_id=factory.current_user.user_id,
            bucket=bucket,
        )

    async def execute(self, cuisine_id: int) -> None:
        cuisine = await self._cuisine_repo.get(cuisine_id)

        # Second ownership guard on top of the user-scoped repository
        if not cuisine.is_owned_by(self._user_id):
            raise CuisineAccessDeniedError(cuisine_id, self._user_id)

        if cuisine.has_icon:
            await self._delete_icon(cuisine)

        try:
            await self._cuisine_repo.delete(cuisine_id)
        except CuisineNotFoundError as e:
            raise CuisineDeletionError(cuisine_id) from e

        logger.info("Cuisine %s deleted for user %s", cuisine_id, self._user_id)

    async def _delete_icon(self, cuisine: Cuisine) -> None:
        key = self._storage.key_for_url(self._bucket, cuisine.icon_url)
        if key is None:
            logger.warning(
                "Icon URL of cuisine %s is not in bucket %s, skipping cleanup",
                cuisine.id,
                self._bucket,
            )
            return
        if not is_owner_key(key, self._user_id):
            logger.warning(
                "Icon %s of cuisine %s is outside the owner namespace, keeping it",
                key,
                cuisine.id,
            )
            return
        if await self._cuisine_repo.count_icon_references(cuisine.icon_url) > 1:
            logger.debug("Icon %s is shared with another cuisine, keeping it", key)
            return
        try:
            await self._storage.delete(self._bucket, key)
        except (StorageError, InvalidStoragePathError) as e:
            logger.warning(
                "Failed to delete icon %s of cuisine %s: %s",
                key,
                cuisine.id,
                e,
            )
