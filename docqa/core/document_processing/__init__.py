"""
Document processing pipeline for ingestion.

Parsing, chunking and metadata enrichment of PDF and text documents.

Dependencies: langchain_community, langchain_text_splitters, pydantic
System role: Document ingestion pipeline entrypoint
"""

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .document_processor import DocumentProcessor
from .models import IngestionOutcome, PersistResult, VectorRecord

__all__ = [
    "DocumentProcessor",
    "DocumentPipelineSettings",
    "get_pipeline_settings",
    "IngestionOutcome",
    "PersistResult",
    "VectorRecord",
]
