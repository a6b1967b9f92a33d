"""
settings-store - storage lifecycle for a host application.

A host (e.g. the HTTP layer) wraps its own startup/shutdown around
``lifespan()`` and asks for repositories and the authenticator through the
factories below.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from pymongo.errors import PyMongoError

from settings_store.config import get_settings
from settings_store.core.logging_config import configure_logging
from settings_store.database.connections import close_connections, get_database
from settings_store.database.registry import create_indexes
from settings_store.services.auth_service import (
    BcryptPasswordVerifier,
    LocalAuthenticator,
    MongoUserLookup,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan() -> AsyncIterator[None]:
    """
    Storage lifespan manager.

    Startup:
    - Configure logging
    - Connect to MongoDB and create indexes

    Shutdown:
    - Close the MongoDB connection
    """
    settings = get_settings()
    configure_logging(settings)
    logger.info("Starting up settings-store...")

    try:
        db = await get_database(settings.database_name)
        await create_indexes(db)
        logger.info("Indexes created")
    except PyMongoError as e:
        logger.warning(f"Database initialization warning: {e}")

    try:
        yield
    finally:
        logger.info("Shutting down settings-store...")
        await close_connections()
        logger.info("Database connections closed")


async def get_authenticator() -> LocalAuthenticator:
    """Build the local email/password authenticator on the shared client."""
    db = await get_database()
    return LocalAuthenticator(MongoUserLookup(db), BcryptPasswordVerifier())
