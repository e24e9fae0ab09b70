"""Integration tests for CuisineRepositorySQLAlchemy with SQLite.

Also covers per-user isolation: a repository bound to one user never
sees or touches another user's rows.
"""

from datetime import timedelta

import pytest
from sqlalchemy import delete, func, select

from cookmeet.domain.cuisine import Cuisine, CuisineNotFoundError, CuisinePatch
from cookmeet.domain.shared import ForbiddenError, utc_now
from cookmeet.infrastructure.persistence.sqlalchemy.models import (
    CuisineModel,
    UserModel,
)
from cookmeet.infrastructure.persistence.sqlalchemy.repositories import (
    CuisineRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def alice_repo(session, alice_current_user):
    return CuisineRepositorySQLAlchemy(session, alice_current_user)


@pytest.fixture
def bob_repo(session, bob_current_user):
    return CuisineRepositorySQLAlchemy(session, bob_current_user)


class TestCuisineRepositorySQLAlchemy:
    """Integration tests for CuisineRepositorySQLAlchemy."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, alice_repo, alice):
        created = await alice_repo.create(
            Cuisine.create(
                owner_id=alice.id,
                title="Pasta",
                url="https://example.com/pasta",
                comment="weeknight",
            ),
        )

        found = await alice_repo.get(created.id)

        assert found.title == "Pasta"
        assert found.url == "https://example.com/pasta"
        assert found.comment == "weeknight"
        assert found.owner_id == alice.id
        assert found.icon_url is None

    @pytest.mark.asyncio
    async def test_list_is_ordered_by_creation(self, alice_repo, alice):
        now = utc_now()
        for offset, title in [(2, "third"), (0, "first"), (1, "second")]:
            await alice_repo.create(
                Cuisine(
                    owner_id=alice.id,
                    title=title,
                    created_at=now + timedelta(seconds=offset),
                ),
            )

        titles = [c.title for c in await alice_repo.list_all()]

        assert titles == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_list_empty(self, alice_repo):
        assert await alice_repo.list_all() == []

    @pytest.mark.asyncio
    async def test_create_for_other_user_is_forbidden(self, alice_repo, bob):
        with pytest.raises(ForbiddenError):
            await alice_repo.create(Cuisine.create(owner_id=bob.id, title="Nope"))

    @pytest.mark.asyncio
    async def test_get_missing(self, alice_repo):
        with pytest.raises(CuisineNotFoundError):
            await alice_repo.get(12345)

    @pytest.mark.asyncio
    async def test_update_fields_only_touches_patch(self, alice_repo, alice):
        created = await alice_repo.create(
            Cuisine.create(owner_id=alice.id, title="Pasta", url="u", comment="c"),
        )

        updated = await alice_repo.update_fields(
            created.id,
            CuisinePatch(title="Risotto"),
        )

        assert updated.title == "Risotto"
        assert updated.url == "u"
        assert updated.comment == "c"
        assert updated.updated_at >= created.updated_at

    @pytest.mark.asyncio
    async def test_delete(self, alice_repo, alice):
        created = await alice_repo.create(
            Cuisine.create(owner_id=alice.id, title="Pasta"),
        )

        await alice_repo.delete(created.id)

        with pytest.raises(CuisineNotFoundError):
            await alice_repo.get(created.id)

    @pytest.mark.asyncio
    async def test_delete_twice(self, alice_repo, alice):
        created = await alice_repo.create(
            Cuisine.create(owner_id=alice.id, title="Pasta"),
        )
        await alice_repo.delete(created.id)

        with pytest.raises(CuisineNotFoundError):
            await alice_repo.delete(created.id)

    @pytest.mark.asyncio
    async def test_user_deletion_cascades(self, session, alice_repo, alice):
        await alice_repo.create(Cuisine.create(owner_id=alice.id, title="Pasta"))

        await session.execute(delete(UserModel).where(UserModel.id == alice.id))

        count = await session.scalar(select(func.count()).select_from(CuisineModel))
        assert count == 0

    @pytest.mark.asyncio
    async def test_count_icon_references(self, alice_repo, alice):
        icon = "http://cdn/cuisine_icons/1/abc.png"
        for title in ["Pasta", "Pizza"]:
            await alice_repo.create(
                Cuisine.create(owner_id=alice.id, title=title, icon_url=icon),
            )
        await alice_repo.create(Cuisine.create(owner_id=alice.id, title="Plain"))

        assert await alice_repo.count_icon_references(icon) == 2
        assert await alice_repo.count_icon_references("http://cdn/other.png") == 0


class TestCuisineIsolation:
    """A user's repository cannot reach another user's cuisines."""

    @pytest.fixture
    async def alice_cuisine(self, alice_repo, alice):
        return await alice_repo.create(
            Cuisine.create(owner_id=alice.id, title="Alice's curry"),
        )

    @pytest.mark.asyncio
    async def test_list_is_scoped(self, bob_repo, alice_cuisine):
        assert await bob_repo.list_all() == []

    @pytest.mark.asyncio
    async def test_get_foreign_looks_missing(self, bob_repo, alice_cuisine):
        with pytest.raises(CuisineNotFoundError):
            await bob_repo.get(alice_cuisine.id)

    @pytest.mark.asyncio
    async def test_update_foreign_looks_missing(self, bob_repo, alice_cuisine):
        with pytest.raises(CuisineNotFoundError):
            await bob_repo.update_fields(alice_cuisine.id, CuisinePatch(title="Mine"))

    @pytest.mark.asyncio
    async def test_delete_foreign_leaves_row(
        self,
        bob_repo,
        alice_repo,
        alice_cuisine,
    ):
        with pytest.raises(CuisineNotFoundError):
            await bob_repo.delete(alice_cuisine.id)

        assert (await alice_repo.get(alice_cuisine.id)).title == "Alice's curry"

    @pytest.mark.asyncio
    async def test_icon_references_are_scoped(self, alice_repo, bob_repo, alice, bob):
        icon = "http://cdn/shared.png"
        await alice_repo.create(
            Cuisine.create(owner_id=alice.id, title="Curry", icon_url=icon),
        )

        assert await bob_repo.count_icon_references(icon) == 0


class TestRepositoryFactory:
    def test_repositories_are_cached(self, session, alice_current_user):
        factory = SQLAlchemyRepositoryFactory(session, alice_current_user)

        assert factory.cuisine_repository() is factory.cuisine_repository()
        assert factory.user_repository() is factory.user_repository()
        assert factory.current_user is alice_current_user
