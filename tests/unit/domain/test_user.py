"""Unit tests for the User entity and UserPatch."""

from cookmeet.domain.user import User, UserPatch


class TestUser:
    def test_create(self):
        user = User.create(name="Hanako", email="hanako@example.com", password_hash="h")

        assert user.id is None
        assert user.icon_url is None
        assert user.created_at.tzinfo is not None


class TestUserPatch:
    def test_empty(self):
        assert UserPatch().is_empty

    def test_only_name(self):
        patch = UserPatch(name="New")

        assert patch.changes() == {"name": "New"}
        assert "password_hash" not in patch.changes()
        assert "icon_url" not in patch.changes()
