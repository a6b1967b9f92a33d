"""
Repository error taxonomy.

Callers of a repository only ever see these exceptions; backend-native
failures are translated by ``translate_error``.
"""
from typing import Optional

from settings_store.database.errors import (
    CasMismatchError,
    KeyExistsError,
    KeyNotFoundError,
)


class RepositoryError(Exception):
    """Base class for every repository failure."""

    def __init__(
        self,
        message: str,
        doc_type: Optional[str] = None,
        doc_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.doc_type = doc_type
        self.doc_id = doc_id


class NotFound(RepositoryError):
    """The operation targeted an id with no stored document."""


class AlreadyExists(RepositoryError):
    """An insert targeted an id that is already in use."""


class VersionConflict(RepositoryError):
    """The stored version changed since the caller's read."""


class BackendError(RepositoryError):
    """Any other storage failure. The original exception is kept on ``cause``."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        doc_type: Optional[str] = None,
        doc_id: Optional[str] = None,
    ):
        super().__init__(message, doc_type=doc_type, doc_id=doc_id)
        self.cause = cause


def translate_error(
    error: BaseException,
    doc_type: Optional[str] = None,
    doc_id: Optional[str] = None,
) -> RepositoryError:
    """
    Map a backend exception onto the repository taxonomy.

    Args:
        error: Exception raised by the backend
        doc_type: Discriminator of the repository that hit the error
        doc_id: Document id involved, if any

    Returns:
        The translated exception (not raised)
    """
    if isinstance(error, RepositoryError):
        return error

    message = str(error) or error.__class__.__name__

    if isinstance(error, KeyNotFoundError):
        return NotFound(message, doc_type=doc_type, doc_id=doc_id)
    if isinstance(error, KeyExistsError):
        return AlreadyExists(message, doc_type=doc_type, doc_id=doc_id)
    if isinstance(error, CasMismatchError):
        return VersionConflict(message, doc_type=doc_type, doc_id=doc_id)

    return BackendError(message, cause=error, doc_type=doc_type, doc_id=doc_id)
