"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (mocks, tmp_path)
    │   ├── domain/
    │   ├── auth/
    │   ├── application/
    │   └── infrastructure/
    └── integration/           # SQLite-backed repositories and HTTP API
        ├── persistence/
        └── api/

Integration tests run against an aiosqlite database and need no
external services.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv
from pydantic import SecretStr

from cookmeet_config import clear_settings_cache
from cookmeet_config.settings import Settings

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that touch a real (SQLite) database",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make sure no cached settings leak between test sessions."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings for an isolated app: file-backed SQLite and local media."""
    return Settings(
        jwt_secret_key=SecretStr(TEST_JWT_SECRET),
        database_dsn=f"sqlite+aiosqlite:///{tmp_path / 'cookmeet.db'}",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        api_cookie_secure=False,  # Allow HTTP in tests
        api_cookie_samesite="lax",
        storage_backend="local",
        storage_bucket="cookmeet",
        storage_local_dir=str(tmp_path / "media"),
        storage_public_base_url="http://testserver/media",
        log_level="DEBUG",
    )
