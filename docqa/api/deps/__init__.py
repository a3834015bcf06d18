"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_rag_orchestrator,
    get_service_cache,
    get_upload_service,
)

__all__ = [
    "ServiceCache",
    "get_rag_orchestrator",
    "get_service_cache",
    "get_upload_service",
]
