"""Shared test fixtures — async DB, client, config factories.

Uses SQLite + aiosqlite in memory so the settings store runs without any
external database.
"""

from __future__ import annotations

import os

# Point the app at an in-memory database before pydantic-settings loads
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from decimal import Decimal
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from payroll_core.database import Base, get_db
from payroll_core.main import create_app
from payroll_core.salary.schemas import TaxConfig

# Import model modules so their tables register on Base.metadata
import payroll_core.settings_store.models  # noqa: F401


# ── Test database (SQLite in-memory) ────────────────────────────────

TEST_DATABASE_URL = "sqlite+aiosqlite://"

engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionFactory = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False,
)


@pytest.fixture
async def _setup_db():
    """Create all tables before a test, drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
    async with TestSessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── FastAPI test client ─────────────────────────────────────────────

@pytest.fixture
async def app(_setup_db):
    """Create a fresh app instance with DB dependency overridden."""
    application = create_app()
    application.dependency_overrides[get_db] = _override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ── Database session (for direct DB operations in tests) ────────────

@pytest.fixture
async def db(_setup_db) -> AsyncGenerator[AsyncSession, None]:
    async with TestSessionFactory() as session:
        yield session
        await session.commit()


# ── Shared inputs ────────────────────────────────────────────────────

@pytest.fixture
def standard_template() -> dict[str, Decimal]:
    """Basic 50 / HRA 20 / Special 30."""
    return {
        "basic": Decimal("50"),
        "hra": Decimal("20"),
        "special": Decimal("30"),
    }


@pytest.fixture
def tax_config() -> TaxConfig:
    """Default statutory rates: PF 12/12 capped at 15k, ESI under 21k."""
    return TaxConfig()
