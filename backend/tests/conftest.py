"""
Shared fixtures: in-memory SQLite database and an HTTP client bound to the app.

DATABASE_URL is set before the app is imported so the module-level engine
never needs a PostgreSQL driver.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models import Department, Staff


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    async def _get_test_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def seed_department(session_maker):
    """Factory: insert a department with the given staff last names; returns the department id."""

    async def _seed(name: str, last_names=()) -> int:
        async with session_maker() as session:
            dept = Department(name=name, location="HQ")
            session.add(dept)
            await session.flush()
            for i, last_name in enumerate(last_names):
                session.add(
                    Staff(
                        department_id=dept.id,
                        first_name=f"First{i}",
                        last_name=last_name,
                        email=f"{name.lower()}.{last_name.lower()}.{i}@example.com",
                        position="Engineer",
                        hired_on=date(2020, 1, i + 1),
                    )
                )
            await session.commit()
            return dept.id

    return _seed
