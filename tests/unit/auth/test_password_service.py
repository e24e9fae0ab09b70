"""Unit tests for PasswordHashingService."""

import pytest

from cookmeet_auth.exceptions import WeakPasswordError
from cookmeet_auth.services import PasswordHashingService


@pytest.fixture
def service():
    # Low work factor keeps the suite fast
    return PasswordHashingService(rounds=4)


class TestHashing:
    """Tests for hashing and verification."""

    def test_hash_differs_from_plaintext(self, service):
        hashed = service.hash("secret1")

        assert hashed != "secret1"
        assert hashed.startswith("$2")

    def test_same_password_hashes_differently(self, service):
        assert service.hash("secret1") != service.hash("secret1")

    def test_verify_correct_password(self, service):
        hashed = service.hash("secret1")
        assert service.verify("secret1", hashed)

    def test_verify_wrong_password(self, service):
        hashed = service.hash("secret1")
        assert not service.verify("secret2", hashed)

    def test_verify_malformed_hash_returns_false(self, service):
        assert not service.verify("secret1", "not-a-bcrypt-hash")

    def test_default_cost_is_ten(self):
        hashed = PasswordHashingService().hash("secret1")
        assert hashed.split("$")[2] == "10"


class TestStrength:
    """Tests for password length limits."""

    def test_empty_password(self, service):
        with pytest.raises(WeakPasswordError, match="empty"):
            service.hash("")

    def test_too_short(self, service):
        with pytest.raises(WeakPasswordError, match="at least 6"):
            service.validate_strength("12345")

    def test_too_long(self, service):
        with pytest.raises(WeakPasswordError, match="72 bytes"):
            service.validate_strength("x" * 73)

    def test_exactly_72_bytes_is_accepted(self, service):
        service.validate_strength("x" * 72)
