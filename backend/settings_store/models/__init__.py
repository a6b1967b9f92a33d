"""
Pydantic models for stored documents and data structures.
"""
from settings_store.models.document import Document, from_storage, to_storage
from settings_store.models.durability import Durability
from settings_store.models.setting import SettingFields
from settings_store.models.user import User, UserStatus

__all__ = [
    "Document",
    "from_storage",
    "to_storage",
    "Durability",
    "SettingFields",
    "User",
    "UserStatus",
]
