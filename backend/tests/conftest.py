"""
Journal API: Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── mongo_db: In-memory MongoDB (mongomock-motor), no server needed
    ├── make_user: Inserts a user document and returns the saved model
    ├── sample_user: A saved user named "alice"
    └── test_client: HTTPX AsyncClient with get_database routed to mongo_db
"""

import os

# Override settings BEFORE any journal_api import reads them
os.environ["MONGODB_URL"] = "mongodb://localhost:27017"
os.environ["MONGODB_DATABASE"] = "journal_test"
os.environ["MONGODB_USE_TRANSACTIONS"] = "false"  # mongomock has no sessions
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from journal_api.database import get_database
from journal_api.models.user import User
from journal_api.repository import UserRepository


@pytest_asyncio.fixture
async def mongo_db():
    """
    Provides an empty in-memory database.

    Usage:
        async def test_save(mongo_db):
            await UserRepository(mongo_db).save(User(user_name="bob"))
    """
    client = AsyncMongoMockClient()
    return client["journal_test"]


@pytest.fixture
def make_user(mongo_db):
    """Factory that saves a user straight through the repository."""

    async def _make(user_name: str, password: str = "secret", roles=None) -> User:
        user = User(user_name=user_name, password=password, roles=roles or ["USER"])
        return await UserRepository(mongo_db).save(user)

    return _make


@pytest_asyncio.fixture
async def sample_user(make_user) -> User:
    return await make_user("alice", "p1")


@pytest_asyncio.fixture
async def test_client(mongo_db):
    """
    Provides an async HTTP test client for endpoint testing.

    ASGITransport does not run the lifespan, so no MongoDB connection or
    index creation is attempted.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/users")
            assert response.status_code == 200
    """
    from journal_api.main import app

    async def _override_database():
        yield mongo_db

    app.dependency_overrides[get_database] = _override_database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
