"""
Global test fixtures for settings-store.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Setting and user document factories
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_app_db(mock_async_mongo_client):
    """Provide mock application database with the real indexes."""
    from settings_store.database.registry import create_indexes

    db = mock_async_mongo_client["settings_store"]
    await create_indexes(db)
    yield db


@pytest.fixture
def mock_documents_collection(mock_app_db):
    """The shared documents collection."""
    return mock_app_db["documents"]


@pytest.fixture
def mock_users_collection(mock_app_db):
    """The users collection."""
    return mock_app_db["users"]


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def setting_fields() -> dict:
    """Field set of a typical setting document."""
    return {
        "language": "en",
        "avatar": "default.png",
        "currencyCode": "USD",
        "currencySymbol": "$",
    }


@pytest.fixture
def other_fields() -> dict:
    """Fields of a document that belongs to another type."""
    return {"name": "Marketing", "budget": 1200}


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_credentials() -> dict:
    """Credentials as a login form would send them."""
    return {
        "email": "testuser@example.com",
        "password": "SecurePassword123!",
    }
