"""
PetClinic Owners — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── db_engine:        In-memory SQLite engine with the schema created
    ├── session_factory:  async_sessionmaker bound to db_engine
    ├── db_session:       One AsyncSession for repository tests
    ├── seed_owners:      Helper inserting owners and returning them
    ├── owner_form:       Valid owner form fields (HTML field names)
    └── test_client:      HTTPX AsyncClient talking to the app, with the
                          database dependency pointed at db_engine
"""

import os

# Override settings for testing BEFORE any petclinic imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator, Callable, List

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from petclinic.database import Base, get_db_session
from petclinic.models.owner import Owner


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def seed_owners(session_factory) -> Callable:
    """
    Insert owners and return them (committed, ids assigned).

    Usage:
        owners = await seed_owners("Davis", "Davis", "Franklin")
        owners = await seed_owners(Owner(id=5, last_name="Black", ...))
    """

    async def _seed(*entries) -> List[Owner]:
        owners = []
        for i, entry in enumerate(entries):
            if isinstance(entry, Owner):
                owners.append(entry)
            else:
                owners.append(
                    Owner(
                        first_name=f"Owner{i}",
                        last_name=entry,
                        address=f"{i} Main St.",
                        city="Madison",
                        telephone="6085551023",
                    )
                )
        async with session_factory() as session:
            session.add_all(owners)
            await session.commit()
        return owners

    return _seed


@pytest.fixture
def owner_form():
    """Valid owner form fields, keyed by HTML field name."""
    return {
        "firstName": "George",
        "lastName": "Franklin",
        "address": "110 W. Liberty St.",
        "city": "Madison",
        "telephone": "6085551023",
    }


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient configured to talk to the FastAPI app.

    Redirects are NOT followed so tests can assert on Location headers.

    Usage:
        async def test_detail(test_client):
            response = await test_client.get("/owners/1")
            assert response.status_code == 200
    """
    from petclinic.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
