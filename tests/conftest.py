"""Shared fixtures: per-test SQLite databases and an ASGI client bound to them."""
from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from tasklens.database import get_db
from tasklens.main import app
from tasklens.models.base import Base


async def _engine_with_schema(url: str, **kwargs):
    engine = create_async_engine(url, echo=False, **kwargs)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine


@pytest_asyncio.fixture
async def test_engine():
    """In-memory database; every session shares the one connection."""
    engine = await _engine_with_schema("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def file_engine(tmp_path):
    """File database, so separate sessions use separate connections."""
    engine = await _engine_with_schema(f"sqlite+aiosqlite:///{tmp_path / 'streaks.db'}")
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(test_engine) -> AsyncGenerator[AsyncSession, None]:
    sessions = async_sessionmaker(bind=test_engine, class_=AsyncSession, expire_on_commit=False)
    async with sessions() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db) -> AsyncGenerator[AsyncClient, None]:
    """Client whose requests all run against the test session."""
    app.dependency_overrides[get_db] = lambda: db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
