"""
Generic repository for documents of a single type.

Every operation talks to the backend once (replace may look the key up once more to
tell a missing document from a stale version), logs any failure with the
operation name and document type, and re-raises it as one of the
RepositoryError kinds.
"""
import logging
import uuid
from typing import Any, Mapping, NoReturn, Optional, Union

from settings_store.core.exceptions import translate_error
from settings_store.database.backend import Backend
from settings_store.models.document import Document, from_storage, to_storage
from settings_store.models.durability import Durability

logger = logging.getLogger(__name__)


def generate_id() -> str:
    """Time-ordered unique id for documents inserted without one."""
    return str(uuid.uuid1())


class DocumentRepository:
    """CRUD with optimistic concurrency for one document type."""

    def __init__(
        self,
        backend: Backend,
        doc_type: str,
        durability: Optional[Durability] = None,
    ):
        """
        Initialize the repository.

        Args:
            backend: Storage backend shared with other repositories
            doc_type: Discriminator written into every document of this repository
            durability: Acknowledgement requirements applied to inserts
        """
        if not doc_type:
            raise ValueError("doc_type is required")
        self.backend = backend
        self.doc_type = doc_type
        self.durability = durability

    def _fail(self, operation: str, error: Exception, doc_id: Optional[str] = None) -> NoReturn:
        logger.error(f"DB {operation} - {self.doc_type} - {error}")
        translated = translate_error(error, doc_type=self.doc_type, doc_id=doc_id)
        if translated is error:
            raise error
        raise translated from error

    @staticmethod
    def _require_id(doc_id: Optional[str]) -> str:
        if not doc_id:
            raise ValueError("Document id is required")
        return doc_id

    async def find_by_id(self, doc_id: str) -> Document:
        """
        Retrieve a document by id.

        Raises:
            NotFound: If no document is stored under doc_id
            BackendError: On any other retrieval failure
        """
        self._require_id(doc_id)
        try:
            stored = await self.backend.get(doc_id)
            return from_storage(doc_id, stored.version, stored.value)
        except Exception as e:
            self._fail("findByID", e, doc_id)

    async def find(self) -> list[Document]:
        """
        Retrieve every document of this repository's type.

        Raises:
            BackendError: If the query fails
        """
        try:
            stored_docs = await self.backend.query(self.doc_type)
            return [from_storage(s.id, s.version, s.value) for s in stored_docs]
        except Exception as e:
            self._fail("find", e)

    async def insert(
        self,
        fields: Mapping[str, Any],
        doc_id: Optional[str] = None,
    ) -> Document:
        """
        Create a document.

        Args:
            fields: Field values; id, version and type keys are ignored
            doc_id: Id to store under, generated when omitted

        Returns:
            The stored document with its initial version

        Raises:
            AlreadyExists: If doc_id is already taken
            BackendError: On any other write failure
        """
        if doc_id is None:
            doc_id = generate_id()
        self._require_id(doc_id)

        payload = to_storage(fields, self.doc_type)
        try:
            version = await self.backend.insert(doc_id, payload, self.durability)
        except Exception as e:
            self._fail("insert", e, doc_id)

        return from_storage(doc_id, version, payload)

    async def update(self, doc: Union[Document, Mapping[str, Any]]) -> Document:
        """
        Replace a document's fields if nobody has written it since it was read.

        Args:
            doc: Document (or flat mapping with id and version/cas) from a prior read

        Returns:
            The stored document with its new version

        Raises:
            VersionConflict: If the stored version no longer matches doc.version
            NotFound: If the document no longer exists
            BackendError: On any other write failure
        """
        if not isinstance(doc, Document):
            doc = Document.from_flat(doc, self.doc_type)
        doc_id = self._require_id(doc.id)

        payload = to_storage(doc.fields, self.doc_type)
        try:
            version = await self.backend.replace(doc_id, payload, doc.version)
        except Exception as e:
            self._fail("update", e, doc_id)

        return from_storage(doc_id, version, payload)

    async def remove(self, doc_id: str) -> None:
        """
        Delete a document, whatever its version.

        Raises:
            NotFound: If no document is stored under doc_id
            BackendError: On any other failure
        """
        self._require_id(doc_id)
        try:
            await self.backend.remove(doc_id)
        except Exception as e:
            self._fail("remove", e, doc_id)
