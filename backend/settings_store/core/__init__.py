"""
Core module - Errors, security and logging utilities.
"""
from settings_store.core.exceptions import (
    RepositoryError,
    NotFound,
    AlreadyExists,
    VersionConflict,
    BackendError,
    translate_error,
)
from settings_store.core.security import hash_password, verify_password

__all__ = [
    "RepositoryError",
    "NotFound",
    "AlreadyExists",
    "VersionConflict",
    "BackendError",
    "translate_error",
    "hash_password",
    "verify_password",
]
