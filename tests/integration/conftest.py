"""Integration test fixtures for database and HTTP client operations.

These run against an in-memory SQLite database (aiosqlite, one shared
connection) with foreign keys enforced, and a temporary media directory.
"""

from collections.abc import AsyncGenerator
from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.portfolio.api.dependencies import get_db_session
from src.portfolio.core.config import Settings
from src.portfolio.core.db import enable_sqlite_foreign_keys
from src.portfolio.core.health import reset_health_cache
from src.portfolio.core.storage import LocalBlobStorage, get_storage
from src.portfolio.main import create_app
from src.portfolio.models import Category, Technology
from src.portfolio.repositories import LeadRepository, ProjectRepository
from src.portfolio.services import ProjectService

TECHNOLOGY_NAMES = {1: "HTML", 3: "CSS", 5: "JavaScript", 7: "Vue", 9: "Laravel"}


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database with all tables created."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    Tests must explicitly call `await session.commit()` to persist changes.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def technologies(db_session: AsyncSession) -> dict[int, Technology]:
    """Technologies with fixed ids so tests can name them directly."""
    techs = {
        tech_id: Technology(id=tech_id, name=name) for tech_id, name in TECHNOLOGY_NAMES.items()
    }
    db_session.add_all(techs.values())
    await db_session.commit()
    return techs


@pytest.fixture
async def category(db_session: AsyncSession) -> Category:
    cat = Category(name="Full stack")
    db_session.add(cat)
    await db_session.commit()
    await db_session.refresh(cat)
    return cat


@pytest.fixture
def sent_emails() -> list[tuple]:
    """Record notification sends instead of calling Resend."""
    sent: list[tuple] = []

    def _record(to, lead):
        sent.append((to, lead))
        return True

    with patch("src.portfolio.services.project_service.send_new_project_email", _record):
        yield sent


@pytest.fixture
def project_service(
    db_session: AsyncSession, storage: LocalBlobStorage, settings: Settings
) -> ProjectService:
    return ProjectService(
        ProjectRepository(db_session),
        db_session,
        storage,
        LeadRepository(db_session),
        settings=settings,
    )


@pytest.fixture
async def client(
    engine: AsyncEngine, storage: LocalBlobStorage, sent_emails: list[tuple]
) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the app, wired to the test database and storage."""
    app = create_app()

    async def _override_db_session() -> AsyncGenerator[AsyncSession]:
        async with AsyncSession(engine, expire_on_commit=False) as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_db_session
    app.dependency_overrides[get_storage] = lambda: storage
    reset_health_cache()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    reset_health_cache()
