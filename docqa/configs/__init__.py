"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from docqa.configs.base import require_setting
from docqa.configs.providers import ProviderSettings
from docqa.configs.settings import Settings, get_settings
from docqa.configs.storage import StorageSettings
from docqa.configs.vector_store import VectorStoreSettings

__all__ = [
    "ProviderSettings",
    "Settings",
    "StorageSettings",
    "VectorStoreSettings",
    "get_settings",
    "require_setting",
]
