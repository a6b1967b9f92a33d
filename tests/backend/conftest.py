"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with repositories, backends and
authentication helpers.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Backend / Repository Fixtures
# =============================================================================

@pytest.fixture
def mongo_backend(mock_documents_collection):
    """MongoBackend over the in-memory documents collection."""
    from settings_store.database.mongo_backend import MongoBackend

    return MongoBackend(mock_documents_collection)


@pytest.fixture
def setting_repository(mongo_backend):
    """SettingRepository on the in-memory backend."""
    from settings_store.repositories.setting_repository import SettingRepository

    return SettingRepository(mongo_backend)


@pytest.fixture
def other_repository(mongo_backend):
    """Repository for a second type sharing the same collection."""
    from settings_store.repositories.document_repository import DocumentRepository

    return DocumentRepository(mongo_backend, "department")


@pytest.fixture
def mock_backend():
    """
    Create a fully mocked Backend.

    All methods are AsyncMock, allowing you to configure side effects:

        mock_backend.get.side_effect = PyMongoError("boom")
    """
    backend = MagicMock()
    backend.get = AsyncMock()
    backend.query = AsyncMock()
    backend.insert = AsyncMock()
    backend.replace = AsyncMock()
    backend.remove = AsyncMock()
    return backend


# =============================================================================
# Auth Fixtures
# =============================================================================

@pytest.fixture
def stored_user(test_user_credentials):
    """A User whose password hash matches test_user_credentials."""
    from settings_store.core.security import hash_password
    from settings_store.models.user import User

    return User(
        _id="507f1f77bcf86cd799439011",
        email=test_user_credentials["email"],
        hashed_password=hash_password(test_user_credentials["password"]),
    )


@pytest.fixture
def mock_user_lookup():
    """UserLookup whose find_by_email is an AsyncMock."""
    lookup = MagicMock()
    lookup.find_by_email = AsyncMock(return_value=None)
    return lookup


@pytest.fixture
def mock_password_verifier():
    """PasswordVerifier whose verify is an AsyncMock."""
    verifier = MagicMock()
    verifier.verify = AsyncMock(return_value=False)
    return verifier
