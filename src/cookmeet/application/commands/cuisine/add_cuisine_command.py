"""Create a cuisine bookmark, optionally with an icon image."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from cookmeet.application.ports.storage import StorageError
from cookmeet.application.services.icon_keys import random_icon_key
from cookmeet.domain.cuisine import Cuisine, CuisineRepository, validate_cuisine
from cookmeet.domain.shared.exceptions import DomainException

if TYPE_CHECKING:
    from cookmeet.application.dtos import IconUpload
    from cookmeet.application.factories import RepositoryFactory
    from cookmeet.application.ports.storage import BlobStorage

logger = logging.getLogger(__name__)


class AddCuisineCommand:
    """Upload the icon (if any), then insert the cuisine."""

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
        self._uploaded_key: Optional[str] = None

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        storage: BlobStorage,
        bucket: str,
    ) -> AddCuisineCommand:
        return cls(
            cuisine_repo=factory.cuisine_repository(),
            storage=storage,
            user_id=factory.current_user.user_id,
            bucket=bucket,
        )

    async def execute(
        self,
        title: str,
        url: str = "",
        comment: str = "",
        icon: Optional[IconUpload] = None,
    ) -> Cuisine:
        self._uploaded_key = None
        icon_url = None
        if icon is not None:
            key = random_icon_key(self._user_id, icon.filename)
            icon_url = await self._storage.put(
                self._bucket,
                key,
                icon.data,
                icon.content_type,
            )
            self._uploaded_key = key

        cuisine = Cuisine.create(
            owner_id=self._user_id,
            title=title,
            url=url,
            comment=comment,
            icon_url=icon_url,
        )
        try:
            validate_cuisine(cuisine)
            created = await self._cuisine_repo.create(cuisine)
        except DomainException:
            await self.discard_upload()
            raise

        logger.info("Cuisine %s created for user %s", created.id, self._user_id)
        return created

    async def discard_upload(self) -> None:
        """Remove the icon uploaded by the last ``execute``, if any.

        Called on failed inserts, and by the router when the commit that
        follows a successful ``execute`` fails.
        """
        key, self._uploaded_key = self._uploaded_key, None
        if key is None:
            return
        try:
            await self._storage.delete(self._bucket, key)
        except StorageError as e:
            logger.warning("Failed to discard orphaned icon %s: %s", key, e)
