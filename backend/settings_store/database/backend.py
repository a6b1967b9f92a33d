"""
Storage backend contract used by the document repositories.
"""
from typing import Any, Optional, Protocol

from pydantic import BaseModel, Field

from settings_store.models.durability import Durability

# Keys a backend keeps next to the payload; never part of a document's fields
ID_KEY = "_id"
CAS_KEY = "_cas"


class StoredDocument(BaseModel):
    """A document as the backend returns it: payload plus metadata."""
    id: str
    version: str
    value: dict[str, Any] = Field(default_factory=dict)


class Backend(Protocol):
    """
    Storage operations a DocumentRepository relies on.

    Implementations raise KeyNotFoundError, KeyExistsError and
    CasMismatchError from settings_store.database.errors; anything else they
    raise is treated as an opaque backend failure.
    """

    async def get(self, doc_id: str) -> StoredDocument:
        ...

    async def query(self, doc_type: str) -> list[StoredDocument]:
        ...

    async def insert(
        self,
        doc_id: str,
        payload: dict[str, Any],
        durability: Optional[Durability] = None,
    ) -> str:
        ...

    async def replace(
        self,
        doc_id: str,
        payload: dict[str, Any],
        expected_version: str,
    ) -> str:
        ...

    async def remove(self, doc_id: str) -> None:
        ...
