"""SQLAlchemy model for Cuisine."""

from typing import Optional

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cookmeet.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class CuisineModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting cuisine bookmarks.

    Rows are removed together with their owner (ON DELETE CASCADE).

    Table: cuisines
    """

    __tablename__ = "cuisines"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    comment: Mapped[str] = mapped_column(Text, nullable=False, default="")
    icon_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (Index("ix_cuisines_owner_created", "owner_id", "created_at"),)

    def __repr__(self) -> str:
        return (
            f"<CuisineModel(id={self.id}, owner_id={self.owner_id}, "
            f"title={self.title!r})>"
        )
