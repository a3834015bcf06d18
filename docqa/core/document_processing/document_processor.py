"""
Document processing facade.

Loads, splits and enriches documents. Each step is a standalone task
(parsing, chunking, enrichment); this class wires them with pipeline settings.

Dependencies: langchain_core, docqa.core.document_processing.tasks
System role: Document processing business logic
"""

import logging

from langchain_core.documents import Document

from .configs import DocumentPipelineSettings, get_pipeline_settings
from .tasks import ChunkingTask, EnrichmentTask, ParsingTask

logger = logging.getLogger(__name__)


class DocumentProcessor:
    """Load, split and enrich documents for retrieval."""

    def __init__(self, settings: DocumentPipelineSettings | None = None) -> None:
        """
        Initialize processor with its pipeline tasks.

        Args:
            settings: Pipeline settings (defaults to cached environment settings)
        """
        self.settings = settings or get_pipeline_settings()
        self._parser = ParsingTask(
            pdf_extensions=self.settings.pdf_extensions,
            text_encoding=self.settings.text_encoding,
        )
        self._chunker = ChunkingTask(
            chunk_size=self.settings.chunk_size,
            chunk_overlap=self.settings.chunk_overlap,
        )
        self._enricher = EnrichmentTask()

    def load_document(self, path: str) -> list[Document]:
        """
        Load a document from disk.

        Args:
            path: File path; PDFs are loaded page by page

        Returns:
            list[Document]: Loaded documents with source metadata

        Raises:
            DocumentReadError: File missing or unreadable
            ParsingError: Content cannot be decoded
        """
        documents = self._parser.parse(path)
        logger.info(
            f"{__name__}:load_document - Loaded {len(documents)} documents",
            extra={"source": path, "document_count": len(documents)},
        )
        return documents

    def load_document_from_buffer(self, data: bytes, display_name: str) -> list[Document]:
        """
        Load a document from an in-memory buffer.

        Args:
            data: Raw file bytes
            display_name: Original file name

        Returns:
            list[Document]: Documents with source memory://<display_name>

        Raises:
            ParsingError: Content cannot be decoded
        """
        documents = self._parser.parse_bytes(data, display_name)
        logger.info(
            f"{__name__}:load_document_from_buffer - Loaded {len(documents)} documents",
            extra={"display_name": display_name, "size_bytes": len(data)},
        )
        return documents

    def split_documents(self, documents: list[Document]) -> list[Document]:
        """Split documents into chunks of at most chunk_size characters."""
        chunks = self._chunker.chunk(documents)
        logger.debug(
            f"{__name__}:split_documents - {len(documents)} documents -> {len(chunks)} chunks"
        )
        return chunks

    def enrich_metadata(self, chunks: list[Document]) -> list[Document]:
        """Drop empty metadata values and stamp chunk_index / processed_at."""
        return self._enricher.enrich(chunks)
