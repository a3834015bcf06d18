"""
Dependency injection container.

Builds the long-lived collaborators once per process and exposes them as
FastAPI dependencies.

Dependencies: docqa.configs, docqa.application, docqa.boundary, docqa.core
System role: DI container for service injection
"""

import logging

from docqa.application.services import UploadService
from docqa.boundary.storage import StorageBackend, get_storage_backend
from docqa.boundary.vdb import VectorStoreManager
from docqa.configs import Settings, get_settings
from docqa.core.document_processing import DocumentProcessor
from docqa.core.rag_query import RagOrchestrator

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._processor = None
        self._vector_store = None
        self._orchestrator = None
        self._storage = None
        self._upload_service = None

    @property
    def settings(self) -> Settings:
        """Get settings (environment-backed unless injected)."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def processor(self) -> DocumentProcessor:
        """Get cached document processor."""
        if self._processor is None:
            self._processor = DocumentProcessor(self.settings.pipeline)
        return self._processor

    @property
    def vector_store(self) -> VectorStoreManager:
        """Get cached vector store manager."""
        if self._vector_store is None:
            self._vector_store = VectorStoreManager(
                settings=self.settings.vector_store,
                provider_settings=self.settings.providers,
            )
        return self._vector_store

    @property
    def orchestrator(self) -> RagOrchestrator:
        """Get cached RAG orchestrator."""
        if self._orchestrator is None:
            self._orchestrator = RagOrchestrator(
                processor=self.processor,
                vector_store=self.vector_store,
                provider_settings=self.settings.providers,
                global_top_k=self.settings.vector_store.global_top_k,
                ephemeral_top_k=self.settings.vector_store.ephemeral_top_k,
            )
        return self._orchestrator

    @property
    def storage(self) -> StorageBackend:
        """Get cached storage backend."""
        if self._storage is None:
            self._storage = get_storage_backend(self.settings.storage)
        return self._storage

    @property
    def upload_service(self) -> UploadService:
        """Get cached upload service."""
        if self._upload_service is None:
            self._upload_service = UploadService(
                storage=self.storage,
                orchestrator=self.orchestrator,
            )
        return self._upload_service

    async def dispose(self) -> None:
        """Release pooled connections and clear all cached instances."""
        if self._vector_store is not None:
            await self._vector_store.dispose()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._processor = None
        self._vector_store = None
        self._orchestrator = None
        self._storage = None
        self._upload_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_rag_orchestrator() -> RagOrchestrator:
    """
    Get RAG orchestrator instance.

    Returns:
        RagOrchestrator: Orchestrator bound to the cached vector store
    """
    return get_service_cache().orchestrator


def get_upload_service() -> UploadService:
    """
    Get upload service instance.

    Returns:
        UploadService: Upload service bound to the configured storage backend
    """
    return get_service_cache().upload_service
