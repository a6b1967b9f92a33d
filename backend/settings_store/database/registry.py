"""
Index management.
Ensures every collection has the indexes the repositories query on.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import OperationFailure

from settings_store.database.databases.app_db import (
    Collections,
    documents_collection_name,
    users_collection_name,
)

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for the documents and users collections."""
    targets = {
        documents_collection_name(): Collections.INDEXES[Collections.DOCUMENTS],
        users_collection_name(): Collections.INDEXES[Collections.USERS],
    }
    for collection_name, indexes in targets.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except OperationFailure as e:
                # Index might already exist with different options
                logger.debug(f"Index exists or error on {collection_name}: {e}")
