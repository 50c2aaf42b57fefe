"""Pytest configuration and fixtures for testing."""
import asyncio
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from category_api.config.settings import Settings
from category_api.core import create_app
from category_api.repositories import CategoryRepository, Database
from category_api.schemas import Category

API_KEY = "RAHASIA"
HEADERS = {"X-API-KEY": API_KEY}


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file and log directory."""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        API_KEY=API_KEY,
        LOG_DIR=tmp_path / "logs",
        LOG_JSON=True,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
async def database(settings) -> Database:
    db = Database(settings)
    await db.connect()
    yield db
    await db.disconnect()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def api_client(app) -> Generator[TestClient, None, None]:
    """Create a test client; entering it runs the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seed_category(settings):
    """Insert a category directly through the repository and return it."""
    async def _save(name: str) -> Category:
        db = Database(settings)
        await db.connect()
        try:
            async with db.transaction() as conn:
                return await CategoryRepository().save(conn, Category(name=name))
        finally:
            await db.disconnect()

    def _seed(name: str = "Linux") -> Category:
        return asyncio.run(_save(name))

    return _seed


@pytest.fixture
def sample_category_data():
    """Sample category data."""
    return {
        "name": "Windows"
    }
