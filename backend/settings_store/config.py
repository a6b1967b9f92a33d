"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from settings_store.models.durability import Durability


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    database_name: str = "settings_store"
    documents_collection: str = "documents"
    users_collection: str = "users"

    # Write durability (None leaves the server default in place)
    durability_w: int | str | None = None
    durability_journal: bool | None = None
    durability_timeout_ms: int | None = None

    # Logging
    log_level: str = "INFO"

    def durability(self) -> Durability:
        """Durability requirements for inserts."""
        return Durability(
            w=self.durability_w,
            journal=self.durability_journal,
            timeout_ms=self.durability_timeout_ms,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
