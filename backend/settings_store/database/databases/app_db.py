"""
Application database configuration.

All document types share one collection and are told apart by their
``type`` discriminator; users live in their own collection.
"""
from settings_store.config import get_settings


class Collections:
    """Collection names in the application database."""
    DOCUMENTS = "documents"
    USERS = "users"

    # Index definitions for each collection
    INDEXES = {
        DOCUMENTS: [
            {"keys": [("type", 1)]},  # find-by-type
        ],
        USERS: [
            {"keys": [("email", 1)], "unique": True},
        ],
    }


def documents_collection_name() -> str:
    return get_settings().documents_collection or Collections.DOCUMENTS


def users_collection_name() -> str:
    return get_settings().users_collection or Collections.USERS
