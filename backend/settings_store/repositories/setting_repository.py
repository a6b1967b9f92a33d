"""
Repository for ``setting`` documents.
"""
from typing import Optional

from settings_store.config import get_settings
from settings_store.database.backend import Backend
from settings_store.database.connections import get_database
from settings_store.database.databases.app_db import documents_collection_name
from settings_store.database.mongo_backend import MongoBackend
from settings_store.models.document import Document
from settings_store.models.durability import Durability
from settings_store.models.setting import DOC_TYPE, SettingFields
from settings_store.repositories.document_repository import DocumentRepository


class SettingRepository(DocumentRepository):
    """Application settings stored as ``type: "setting"`` documents."""

    def __init__(self, backend: Backend, durability: Optional[Durability] = None):
        super().__init__(backend, DOC_TYPE, durability=durability)

    async def insert_setting(
        self,
        setting: SettingFields,
        doc_id: Optional[str] = None,
    ) -> Document:
        """Create a setting document from a validated model."""
        return await self.insert(setting.to_fields(), doc_id)


async def get_setting_repository() -> SettingRepository:
    """Build a SettingRepository on the shared MongoDB client."""
    settings = get_settings()
    db = await get_database(settings.database_name)
    backend = MongoBackend(db[documents_collection_name()])
    return SettingRepository(backend, durability=settings.durability())
