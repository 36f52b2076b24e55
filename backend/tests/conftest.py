"""Root conftest — shared test configuration."""

import os

# Tests run against in-memory SQLite, never a real Postgres
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENV", "dev")
# No auth source configured by default: movie routes are bypassed in dev
os.environ.setdefault("JWT_SECRET", "")
os.environ.setdefault("JWT_JWKS_URL", "")
os.environ.setdefault("VERSION_FILE", "")
os.environ.setdefault("LOG_TO_FILE", "false")

# Imported after the env setup: settings are read at import time
from datetime import datetime, timezone  # noqa: E402

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blackslope.db.base import Base
from blackslope.models.movie import Movie


@pytest.fixture
async def test_engine():
    """Fresh in-memory SQLite database per test (StaticPool: one shared connection)."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seeded_movies(test_db):
    """Insert a few movies directly into the test DB."""
    movies = [
        Movie(title="Inception", description="Dreams within dreams",
              release_date=datetime(2010, 7, 16, tzinfo=timezone.utc)),
        Movie(title="Alien", description="In space no one can hear you scream",
              release_date=datetime(1979, 5, 25, tzinfo=timezone.utc)),
        Movie(title="Heat", description="Cops and robbers in Los Angeles",
              release_date=None),
    ]
    test_db.add_all(movies)
    await test_db.commit()
    for movie in movies:
        await test_db.refresh(movie)
    return movies
