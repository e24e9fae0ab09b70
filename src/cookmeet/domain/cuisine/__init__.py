"""Cuisine domain: a user's recipe bookmarks."""

from cookmeet.domain.cuisine.cuisine import Cuisine, CuisinePatch
from cookmeet.domain.cuisine.exceptions import (
    CuisineAccessDeniedError,
    CuisineDeletionError,
    CuisineNotFoundError,
)
from cookmeet.domain.cuisine.repository import CuisineRepository
from cookmeet.domain.cuisine.validators import (
    TITLE_MAX_LENGTH,
    validate_cuisine,
    validate_title,
)

__all__ = [
    "TITLE_MAX_LENGTH",
    "Cuisine",
    "CuisineAccessDeniedError",
    "CuisineDeletionError",
    "CuisineNotFoundError",
    "CuisinePatch",
    "CuisineRepository",
    "validate_cuisine",
    "validate_title",
]
