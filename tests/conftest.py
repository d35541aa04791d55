"""Pytest fixtures for payroll tests."""

from __future__ import annotations

from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from png_payroll.api.app import create_app
from png_payroll.api.dependencies import get_db_session
from png_payroll.calculators import TaxBracket
from png_payroll.config import get_settings
from png_payroll.models import Base
from png_payroll.seed import seed_tax_brackets, seed_tax_configuration

D = Decimal

# In-memory SQLite shared across sessions through a single pooled connection
TEST_DATABASE_URL = "sqlite+aiosqlite://"

# Brackets from the in-app "How PNG Graduated Tax Works" explanation
EXPLAINER_BRACKETS = [
    TaxBracket(1, D("0"), D("12500"), D("0"), D("0")),
    TaxBracket(2, D("12500"), D("20000"), D("22"), D("0")),
    TaxBracket(3, D("20000"), D("33000"), D("30"), D("1650")),
    TaxBracket(4, D("33000"), D("50000"), D("35"), D("5550")),
]


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def explainer_brackets() -> list[TaxBracket]:
    return list(EXPLAINER_BRACKETS)


@pytest_asyncio.fixture
async def engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded_session(session: AsyncSession) -> AsyncSession:
    """Session over a database holding the 2025 tax table and configuration."""
    await seed_tax_brackets(session)
    await seed_tax_configuration(session)
    await session.commit()
    return session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app, bound to the test database."""
    app = create_app()

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
