"""Declarative base shared by the ``users`` and ``cuisines`` tables."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from cookmeet.domain.shared.time import utc_now


def _utc_timestamp(**kwargs) -> Mapped[datetime]:
    return mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        **kwargs,
    )


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """``created_at`` / ``updated_at``, both timezone-aware UTC.

    ``updated_at`` is also bumped by the repositories' bulk ``UPDATE``
    statements, which bypass ``onupdate``.
    """

    created_at: Mapped[datetime] = _utc_timestamp()
    updated_at: Mapped[datetime] = _utc_timestamp(onupdate=utc_now)
