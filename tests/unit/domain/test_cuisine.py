"""Unit tests for the Cuisine entity, patch and validators."""

import pytest

from cookmeet.domain.cuisine import (
    Cuisine,
    CuisineAccessDeniedError,
    CuisinePatch,
    TITLE_MAX_LENGTH,
    validate_cuisine,
    validate_title,
)
from cookmeet.domain.shared.exceptions import (
    ErrorCode,
    FieldValidationError,
    ForbiddenError,
)


class TestCuisine:
    def test_create_defaults(self):
        cuisine = Cuisine.create(owner_id=1, title="Pasta")

        assert cuisine.id is None
        assert cuisine.url == ""
        assert cuisine.comment == ""
        assert cuisine.icon_url is None
        assert not cuisine.has_icon
        assert cuisine.created_at.tzinfo is not None

    def test_ownership(self):
        cuisine = Cuisine.create(owner_id=7, title="Ramen")

        assert cuisine.is_owned_by(7)
        assert not cuisine.is_owned_by(8)

    def test_equality_by_id(self):
        a = Cuisine(id=3, owner_id=1, title="A")
        b = Cuisine(id=3, owner_id=1, title="B")

        assert a == b
        assert hash(a) == hash(b)

    def test_unsaved_cuisines_are_distinct(self):
        assert Cuisine.create(owner_id=1, title="A") != Cuisine.create(
            owner_id=1,
            title="A",
        )


class TestCuisinePatch:
    def test_empty_patch(self):
        assert CuisinePatch().is_empty
        assert CuisinePatch().changes() == {}

    def test_changes_contains_only_supplied_fields(self):
        patch = CuisinePatch(title="Udon")

        assert not patch.is_empty
        assert patch.changes() == {"title": "Udon"}

    def test_empty_string_counts_as_supplied(self):
        assert CuisinePatch(url="").changes() == {"url": ""}


class TestCuisineValidators:
    def test_title_required(self):
        with pytest.raises(FieldValidationError, match="title is required"):
            validate_title("")

    def test_whitespace_title_rejected(self):
        with pytest.raises(FieldValidationError):
            validate_cuisine(Cuisine.create(owner_id=1, title="   "))

    def test_valid_cuisine(self):
        validate_cuisine(Cuisine.create(owner_id=1, title="Curry"))

    def test_title_at_column_limit_is_accepted(self):
        validate_title("t" * TITLE_MAX_LENGTH)

    def test_title_over_column_limit_rejected(self):
        with pytest.raises(FieldValidationError, match="limited max 255 char"):
            validate_title("t" * (TITLE_MAX_LENGTH + 1))


class TestCuisineExceptions:
    def test_access_denied_is_forbidden(self):
        exc = CuisineAccessDeniedError(cuisine_id=1, user_id=2)

        assert isinstance(exc, ForbiddenError)
        assert exc.code == ErrorCode.FORBIDDEN
        assert exc.message == "unauthorized to delete this cuisine"
