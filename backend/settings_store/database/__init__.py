"""
Database module - MongoDB connection, storage backend and database definitions.
"""
from settings_store.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from settings_store.database.backend import Backend, StoredDocument
from settings_store.models.durability import Durability
from settings_store.database.mongo_backend import MongoBackend
from settings_store.database.databases import app_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "Backend",
    "Durability",
    "StoredDocument",
    "MongoBackend",
    "app_db",
]
