"""
MongoDB storage backend.

Every stored document carries its cas in the top-level ``_cas`` key next to
``_id``. Both are metadata: they are written and matched here and never
handed back as part of a document value.
"""
import logging
from typing import Any, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError

from settings_store.database.backend import CAS_KEY, ID_KEY, StoredDocument
from settings_store.models.durability import Durability
from settings_store.database.errors import (
    CasMismatchError,
    KeyExistsError,
    KeyNotFoundError,
)

logger = logging.getLogger(__name__)


def new_cas() -> str:
    """Generate a fresh, never reused cas value."""
    return str(ObjectId())


def _strip_metadata(value: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in value.items() if k not in (ID_KEY, CAS_KEY)}


def _to_stored(raw: dict[str, Any]) -> StoredDocument:
    return StoredDocument(
        id=str(raw[ID_KEY]),
        version=str(raw.get(CAS_KEY, "")),
        value=_strip_metadata(raw),
    )


class MongoBackend:
    """Backend over a single motor collection shared by all document types."""

    def __init__(self, collection: AsyncIOMotorCollection):
        """Initialize with the documents collection."""
        self.collection = collection

    def _collection_for(self, durability: Optional[Durability]) -> AsyncIOMotorCollection:
        if durability is None or durability.is_default():
            return self.collection
        return self.collection.with_options(write_concern=durability.write_concern())

    async def get(self, doc_id: str) -> StoredDocument:
        """
        Fetch one document by id.

        Raises:
            KeyNotFoundError: If nothing is stored under doc_id
        """
        raw = await self.collection.find_one({ID_KEY: doc_id})
        if raw is None:
            raise KeyNotFoundError(doc_id)
        return _to_stored(raw)

    async def query(self, doc_type: str) -> list[StoredDocument]:
        """Fetch every document whose type equals doc_type."""
        cursor = self.collection.find({"type": doc_type})
        docs = await cursor.to_list(length=None)
        return [_to_stored(raw) for raw in docs]

    async def insert(
        self,
        doc_id: str,
        payload: dict[str, Any],
        durability: Optional[Durability] = None,
    ) -> str:
        """
        Store a new document and return its initial cas.

        Raises:
            KeyExistsError: If doc_id is already taken
        """
        cas = new_cas()
        document = {ID_KEY: doc_id, CAS_KEY: cas, **_strip_metadata(payload)}

        try:
            await self._collection_for(durability).insert_one(document)
        except DuplicateKeyError:
            raise KeyExistsError(doc_id)

        return cas

    async def replace(
        self,
        doc_id: str,
        payload: dict[str, Any],
        expected_version: str,
    ) -> str:
        """
        Overwrite a document only if its stored cas equals expected_version.

        Returns:
            The new cas

        Raises:
            KeyNotFoundError: If nothing is stored under doc_id
            CasMismatchError: If the stored cas has moved on
        """
        cas = new_cas()
        replacement = {CAS_KEY: cas, **_strip_metadata(payload)}

        # Documents written outside this backend carry no cas and read back with ""
        expected = expected_version if expected_version else {"$exists": False}
        result = await self.collection.replace_one(
            {ID_KEY: doc_id, CAS_KEY: expected},
            replacement,
        )
        if result.matched_count:
            return cas

        # No match: either the document is gone or somebody else wrote first
        existing = await self.collection.find_one({ID_KEY: doc_id}, {ID_KEY: 1})
        if existing is None:
            raise KeyNotFoundError(doc_id)
        logger.debug(f"cas mismatch on {doc_id}: expected {expected_version}")
        raise CasMismatchError(doc_id)

    async def remove(self, doc_id: str) -> None:
        """
        Delete a document regardless of its cas.

        Raises:
            KeyNotFoundError: If nothing is stored under doc_id
        """
        result = await self.collection.delete_one({ID_KEY: doc_id})
        if result.deleted_count == 0:
            raise KeyNotFoundError(doc_id)
