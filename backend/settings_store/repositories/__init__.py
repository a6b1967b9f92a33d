"""
Repositories exposing CRUD over typed documents.
"""
from settings_store.repositories.document_repository import DocumentRepository
from settings_store.repositories.setting_repository import (
    SettingRepository,
    get_setting_repository,
)

__all__ = [
    "DocumentRepository",
    "SettingRepository",
    "get_setting_repository",
]
