"""
Core business logic module.

Contains domain business logic and the exception hierarchy.
Document processing and the RAG orchestrator live in subpackages.
"""

from docqa.core.exceptions import (
    ConfigurationError,
    DocQAException,
    DocumentProcessingError,
    DocumentReadError,
    ParsingError,
    ProviderError,
    ProviderTimeoutError,
    StorageError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "DocQAException",
    "DocumentProcessingError",
    "DocumentReadError",
    "ParsingError",
    "ProviderError",
    "ProviderTimeoutError",
    "StorageError",
    "ValidationError",
]
