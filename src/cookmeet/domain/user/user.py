"""User entity and partial-update patch."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Optional

from cookmeet.domain.shared.time import utc_now


class User:
    """
    User entity.

    Holds identity data and the bcrypt password hash. The hash never
    leaves the application layer; API responses project it away.
    """

    def __init__(
        self,
        name: str,
        email: str,
        password_hash: str,
        icon_url: Optional[str] = None,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id
        self._name = name
        self._email = email
        self._password_hash = password_hash
        self._icon_url = icon_url
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def icon_url(self) -> Optional[str]:
        return self._icon_url

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(cls, name: str, email: str, password_hash: str) -> User:
        return cls(name=name, email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        name: str,
        email: str,
        password_hash: str,
        icon_url: Optional[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            icon_url=icon_url,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email})"


@dataclass(frozen=True)
class UserPatch:
    """Sparse set of user columns to overwrite.

    ``None`` means "leave unchanged"; there is no way to clear a column.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password_hash: Optional[str] = None
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
