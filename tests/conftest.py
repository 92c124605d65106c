"""Shared fixtures.

Each test gets its own SQLite database file so store state never leaks
between tests.
"""

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from products_service.catalog.repository import ProductRepository
from products_service.catalog.service import ProductCatalogService, ProductCreate
from products_service.infrastructure.config import Settings
from products_service.infrastructure.database import Database
from products_service.main import create_app


def sqlite_url(tmp_path: Path) -> str:
    """Database URL for a throwaway SQLite file."""
    return f"sqlite+aiosqlite:///{tmp_path / 'products.db'}"


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    """Create a connected database with tables."""
    db = Database(sqlite_url(tmp_path))
    await db.connect(create_tables=True)
    yield db
    await db.disconnect()


@pytest.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Open a session on the test database."""
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def repository(session: AsyncSession) -> ProductRepository:
    """Create product repository."""
    return ProductRepository(session)


@pytest.fixture
def service(repository: ProductRepository) -> ProductCatalogService:
    """Create catalog service."""
    return ProductCatalogService(repository)


@pytest.fixture
def widget() -> ProductCreate:
    """Sample product input."""
    return ProductCreate(name="Widget", price=9.99)


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway database."""
    return Settings(
        database_url=sqlite_url(tmp_path),
        create_tables=True,
        log_json=False,
        default_page_limit=10,
    )


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """Create test client with the lifespan running."""
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client
