"""Partially overwrite a cuisine's title, url or icon."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from cookmeet.application.services.icon_keys import (
    CUISINE_ICON_PREFIX,
    content_addressed_key,
)
from cookmeet.domain.cuisine import (
    Cuisine,
    CuisinePatch,
    CuisineRepository,
    validate_title,
)

if TYPE_CHECKING:
    from cookmeet.application.dtos import IconUpload
    from cookmeet.application.factories import RepositoryFactory
    from cookmeet.application.ports.storage import BlobStorage

logger = logging.getLogger(__name__)


class SetCuisineCommand:
    """Apply only the supplied fields to one of the user's cuisines."""

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
    ) -> SetCuisineCommand:
        return cls(
            cuisine_repo=factory.cuisine_repository(),
            storage=storage,
            user_id=factory.current_user.user_id,
            bucket=bucket,
        )

    async def execute(
        self,
        cuisine_id: int,
        title: Optional[str] = None,
        url: Optional[str] = None,
        icon: Optional[IconUpload] = None,
    ) -> Cuisine:
        if title is not None:
            validate_title(title)

        icon_url = None
        if icon is not None:
            key = content_addressed_key(
                CUISINE_ICON_PREFIX,
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

        patch = CuisinePatch(title=title, url=url, icon_url=icon_url)
        if patch.is_empty:
            return await self._cuisine_repo.get(cuisine_id)

        cuisine = await self._cuisine_repo.update_fields(cuisine_id, patch)
        logger.debug(
            "Cuisine %s updated fields: %s",
            cuisine_id,
            ", ".join(sorted(patch.changes())),
        )
        return cuisine
