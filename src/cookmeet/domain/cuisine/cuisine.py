"""Cuisine bookmark entity and partial-update patch."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Optional

from cookmeet.domain.shared.time import utc_now


class Cuisine:
    """
    A recipe bookmark owned by exactly one user.

    ``id`` is None until the repository has inserted the row.
    """

    def __init__(  # noqa: PLR0913
        self,
        owner_id: int,
        title: str,
        url: str = "",
        comment: str = "",
        icon_url: Optional[str] = None,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id
        self._owner_id = owner_id
        self._title = title
        self._url = url
        self._comment = comment
        self._icon_url = icon_url
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def owner_id(self) -> int:
        return self._owner_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def url(self) -> str:
        return self._url

    @property
    def comment(self) -> str:
        return self._comment

    @property
    def icon_url(self) -> Optional[str]:
        return self._icon_url

    @property
    def has_icon(self) -> bool:
        return bool(self._icon_url)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: int) -> bool:
        return self._owner_id == user_id

    @classmethod
    def create(
        cls,
        owner_id: int,
        title: str,
        url: str = "",
        comment: str = "",
        icon_url: Optional[str] = None,
    ) -> Cuisine:
        return cls(
            owner_id=owner_id,
            title=title,
            url=url,
            comment=comment,
            icon_url=icon_url,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cuisine):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return (
            f"Cuisine(id={self._id}, owner_id={self._owner_id}, "
            f"title={self._title!r})"
        )


@dataclass(frozen=True)
class CuisinePatch:
    """Sparse set of cuisine columns to overwrite.

    Only title, url and icon_url are updatable; comment and timestamps
    stay as they were.
    """

    title: Optional[str] = None
    url: Optional[str] = None
    icon_url: Optional[str] = None

    def changes(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @property
    def is_empty(self) -> bool:
        return not self.changes()
