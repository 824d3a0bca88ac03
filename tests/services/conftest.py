"""Service test fixtures — async DB, FastAPI test client, and in-memory fakes.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - get_site_selector overridden with a deterministic FixedSiteSelector
    - fake_repository never touches a database (pure service tests)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Protocol fakes (fakes.py) over unittest.mock: they record calls and
      mirror SqlCompanyRepository semantics
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from company_api.api.routes.company import get_site_selector
from company_api.db.base import Base
from company_api.infrastructure.database import get_db, DatabaseSessionManager
import company_api.infrastructure.database as db_module
from company_api.main import app

from tests.services.fakes import FakeCompanyRepository, FixedSiteSelector


@pytest.fixture
def fake_repository():
    return FakeCompanyRepository()


@pytest.fixture
def fixed_selector():
    return FixedSiteSelector()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
async def client(test_engine, test_session_factory, fixed_selector):
    """FastAPI test client with DB and site selector dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_site_selector] = lambda: fixed_selector

    # Readiness check reads db_manager directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
