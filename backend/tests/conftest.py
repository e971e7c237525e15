"""Pytest configuration and shared fixtures."""

import os

# Must be set before any application module reads settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["EXPOSE_NOT_FOUND_STATUS"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.entities import Product
from infrastructure.config import get_settings
from infrastructure.database.session import Base, build_engine
from infrastructure.database.repositories import SQLAlchemyProductRepository
from application.services import ProductService


@pytest.fixture
def unsaved_product():
    """Fixture for a product that has not been stored yet."""
    return Product(category="books", name="Dune")


@pytest.fixture
async def db_session():
    """Fixture for a session on a fresh in-memory database."""
    engine = build_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    
    await engine.dispose()


@pytest.fixture
def product_repository(db_session):
    """Fixture for a repository bound to the test session."""
    return SQLAlchemyProductRepository(db_session)


@pytest.fixture
def product_service(product_repository):
    """Fixture for the catalog service over the test repository."""
    return ProductService(product_repository)


@pytest.fixture
def client():
    """Fixture for an HTTP client; each test starts with an empty catalog."""
    from main import app
    
    # Server errors must come back as responses, not re-raised in the test
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def expose_not_found(monkeypatch):
    """Fixture that switches missing products to 404 responses."""
    monkeypatch.setenv("EXPOSE_NOT_FOUND_STATUS", "true")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
