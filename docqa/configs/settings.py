"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from docqa.configs.base import BaseSettings
from docqa.configs.providers import ProviderSettings
from docqa.configs.storage import StorageSettings
from docqa.configs.vector_store import VectorStoreSettings
from docqa.core.document_processing.configs import DocumentPipelineSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    providers: ProviderSettings = Field(default_factory=ProviderSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    pipeline: DocumentPipelineSettings = Field(default_factory=DocumentPipelineSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from docqa.configs import get_settings
        settings = get_settings()
    """
    return Settings()
