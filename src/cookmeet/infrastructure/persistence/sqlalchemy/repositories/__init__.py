"""SQLAlchemy repository implementations."""

from cookmeet.infrastructure.persistence.sqlalchemy.repositories.cuisine_repository import (  # NOQA: E501
    CuisineRepositorySQLAlchemy,
)
from cookmeet.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from cookmeet.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    # Factory (recommended for creating repositories)
    "SQLAlchemyRepositoryFactory",
    "CuisineRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
