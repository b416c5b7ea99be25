"""
Pytest configuration and fixtures for Shop Service tests.
"""

import os
from typing import Any, AsyncGenerator

import httpx
import pytest

# Set up test environment variables before importing anything else
os.environ.setdefault("APP_NAME", "Shop Service Test")
os.environ.setdefault("APP_VERSION", "1.0.0")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SERVICE_NAME", "shop-service")
os.environ.setdefault("SHOP_DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

from shop_service.app.api.dependencies import get_async_session  # noqa: E402
from shop_service.app.core.database import ShopServiceDatabaseManager  # noqa: E402
from shop_service.app.core.sample_data import init_sample_data  # noqa: E402
from shop_service.app.main import app  # noqa: E402


@pytest.fixture
async def test_database_manager(tmp_path) -> AsyncGenerator[Any, None]:
    """Create a database manager backed by a fresh SQLite file per test."""
    manager = ShopServiceDatabaseManager(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False
    )
    await manager.create_tables()

    yield manager

    await manager.close()


@pytest.fixture
async def db_session(test_database_manager) -> AsyncGenerator[Any, None]:
    """Create a test database session."""
    async with test_database_manager.async_session_maker() as session:
        yield session


@pytest.fixture
async def sample_data(test_database_manager) -> None:
    """Insert the two sample members with their book orders."""
    async with test_database_manager.async_session_maker() as session:
        await init_sample_data(session)


@pytest.fixture
async def client(test_database_manager) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client bound to the app, one database session per request."""

    async def override_get_async_session() -> AsyncGenerator[Any, None]:
        async with test_database_manager.async_session_maker() as session:
            yield session

    app.dependency_overrides[get_async_session] = override_get_async_session
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
