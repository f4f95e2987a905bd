# ==============================================================================
# CONFTEST - Pytest Fixtures and Configuration
# ==============================================================================
# Shared fixtures for all tests. MongoDB is replaced by mongomock-motor's
# in-memory client, injected into the real MongoDBAdapter.
# ==============================================================================

from __future__ import annotations

import os
from typing import AsyncGenerator
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

# Set test environment before importing the package
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "false"
os.environ["MONGODB_DB"] = "realty_admin_test"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-32chars!"

API = "/api/v1"


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest_asyncio.fixture
async def adapter():
    """Connected adapter over a fresh in-memory database, indexes ensured."""
    from realty_admin.database.adapters.mongodb_adapter import MongoDBAdapter
    from realty_admin.services.master_engine import ensure_master_indexes
    from realty_admin.services.user_service import UserService

    db_adapter = MongoDBAdapter(
        database_name=f"realty_admin_test_{uuid4().hex[:8]}",
        client=AsyncMongoMockClient(),
    )
    await db_adapter.connect()
    await ensure_master_indexes(db_adapter)
    await UserService(db_adapter).ensure_indexes()

    yield db_adapter

    await db_adapter.disconnect()


# ==============================================================================
# HTTP CLIENT FIXTURES
# ==============================================================================

@pytest_asyncio.fixture
async def client(adapter) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    from realty_admin.database.factory import DatabaseFactory
    DatabaseFactory.reset()

    # Import app after environment is set
    from realty_admin.main import app

    await DatabaseFactory.initialize(adapter=adapter)

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        timeout=30.0,
    ) as async_client:
        yield async_client

    await DatabaseFactory.shutdown()
    DatabaseFactory.reset()


@pytest_asyncio.fixture
async def auth_client(client: AsyncClient) -> AsyncGenerator[tuple[AsyncClient, str], None]:
    """
    Create authenticated client with a registered admin.

    Returns:
        Tuple of (client, user_id)
    """
    from realty_admin.core.security import create_access_token

    user_data = {
        "email": f"admin_{uuid4().hex[:8]}@example.com",
        "password": "TestPassword123!",
        "full_name": "Test Admin",
    }

    response = await client.post(f"{API}/auth/register", json=user_data)
    assert response.status_code == 201, f"Failed to register: {response.text}"
    user_id = response.json()["data"]["id"]

    token = create_access_token(subject=user_id)
    client.headers["Authorization"] = f"Bearer {token}"

    yield client, user_id

    if "Authorization" in client.headers:
        del client.headers["Authorization"]


# ==============================================================================
# HELPER FIXTURES
# ==============================================================================

@pytest.fixture
def sample_user_data() -> dict:
    """Generate sample user registration data."""
    return {
        "email": f"user_{uuid4().hex[:8]}@example.com",
        "password": "SecurePass123!",
        "full_name": "Sample User",
    }


@pytest.fixture
def amenity_data() -> dict:
    return {
        "name": "swimming  pool",
        "code": "pool",
        "category": "recreational",
        "tags": ["Water", "Outdoor"],
        "importance_level": 4,
        "popularity_score": 90,
        "is_popular": True,
        "availability": {"residential": True, "luxury": True},
    }


@pytest.fixture
def city_data() -> dict:
    return {
        "name": "Mumbai",
        "state": "Maharashtra",
        "state_code": "MH",
        "pin_codes": ["400001", "400050"],
        "coordinates": [72.8777, 19.076],
        "is_popular": True,
        "real_estate_data": {"average_property_price": 25000},
    }
