"""
Database definitions and collection constants.
"""
from settings_store.database.databases import app_db

__all__ = ["app_db"]
