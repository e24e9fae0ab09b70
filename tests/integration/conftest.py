"""Integration test configuration and fixtures.

Provides a SQLite-backed AsyncSession with the schema created, plus
two persisted users and the CurrentUser values that scope repositories
to them.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cookmeet.application.ports.identity import CurrentUser
from cookmeet.domain.user import User
from cookmeet.infrastructure.persistence.sqlalchemy.engine import create_engine_for_url
from cookmeet.infrastructure.persistence.sqlalchemy.models import Base
from cookmeet.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

ALICE_EMAIL = "alice@example.com"
BOB_EMAIL = "bob@example.com"


@pytest.fixture
async def engine(tmp_path):
    """File-backed SQLite engine with foreign keys enforced."""
    engine = create_engine_for_url(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session


@pytest.fixture
async def alice(session) -> User:
    repo = UserRepositorySQLAlchemy(session)
    return await repo.create(User.create("Alice", ALICE_EMAIL, "hash-a"))


@pytest.fixture
async def bob(session) -> User:
    repo = UserRepositorySQLAlchemy(session)
    return await repo.create(User.create("Bob", BOB_EMAIL, "hash-b"))


@pytest.fixture
def alice_current_user(alice) -> CurrentUser:
    return CurrentUser(user_id=alice.id, email=ALICE_EMAIL)


@pytest.fixture
def bob_current_user(bob) -> CurrentUser:
    return CurrentUser(user_id=bob.id, email=BOB_EMAIL)
