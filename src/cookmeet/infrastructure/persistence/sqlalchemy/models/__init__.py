"""SQLAlchemy models. Importing this package registers every table on Base."""

from cookmeet.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from cookmeet.infrastructure.persistence.sqlalchemy.models.cuisine_model import (
    CuisineModel,
)
from cookmeet.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "CuisineModel",
    "TimestampMixin",
    "UserModel",
]
