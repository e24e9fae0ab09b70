"""Structural validation for cuisine input."""

from typing import Optional

from cookmeet.domain.cuisine.cuisine import Cuisine
from cookmeet.domain.shared.exceptions import FieldValidationError

# cuisines.title is VARCHAR(255)
TITLE_MAX_LENGTH = 255


def validate_title(title: Optional[str]) -> None:
    if not title or not title.strip():
        raise FieldValidationError("title", "title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise FieldValidationError("title", f"limited max {TITLE_MAX_LENGTH} char")


def validate_cuisine(cuisine: Cuisine) -> None:
    validate_title(cuisine.title)
