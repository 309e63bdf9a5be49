"""Shared fixtures for the habit tracker tests.

Every test gets its own in-memory SQLite database (aiosqlite + StaticPool so
all sessions see the same connection), the FastAPI app with `get_db`
pointed at it, and small factories for habits and completion records.
"""

from datetime import date, timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base, enable_sqlite_foreign_keys, get_db
from app.main import app
from app.models import habit, user  # noqa: F401
from app.schemas.completion import CompletionCreate
from app.schemas.habit import HabitCreate
from app.services.completions import upsert_completion
from app.services.habits import create_habit

START = date(2024, 3, 1)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# =============================================================================
# Factories
# =============================================================================


@pytest.fixture
def habit_factory(db_session):
    """Create a habit through the registry service; keyword overrides win."""

    async def _create(**overrides):
        fields = {
            "name": "Exercise",
            "icon": "exercise",
            "color": "blue",
            "weekdays": "MTWTFSS",
        }
        fields.update(overrides)
        return await create_habit(db_session, HabitCreate(**fields))

    return _create


@pytest.fixture
def history_factory(db_session):
    """Record a run of days for a habit from a pattern like "TTFTT" (T=completed)."""

    async def _record(habit_id, pattern, start=START):
        records = []
        for offset, flag in enumerate(pattern):
            records.append(
                await upsert_completion(
                    db_session,
                    CompletionCreate(
                        habit_id=habit_id,
                        date=start + timedelta(days=offset),
                        completed=flag == "T",
                    ),
                )
            )
        return records

    return _record

