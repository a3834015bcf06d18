"""
Upload service orchestrator.

Stores uploaded files and indexes them into the persistent collection,
and answers instant questions about a file without storing it.

Dependencies: docqa.boundary.storage, docqa.core.rag_query
System role: Upload use-case orchestration
"""

import logging

from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from docqa.boundary.storage import StorageBackend, StoredFile
from docqa.core.document_processing import IngestionOutcome
from docqa.core.rag_query import RagOrchestrator
from docqa.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class UploadResult(BaseModel):
    """Saved file plus the outcome of indexing it."""

    file: StoredFile
    ingestion: IngestionOutcome = Field(description="Indexing outcome; failure does not fail the upload")


class UploadService:
    """
    Upload service orchestrator.

    Indexing runs synchronously after the file is saved. An indexing failure
    is reported in the result instead of failing the upload; storage
    failures propagate.
    """

    def __init__(self, storage: StorageBackend, orchestrator: RagOrchestrator) -> None:
        """
        Initialize upload service.

        Args:
            storage: Backend receiving uploaded files
            orchestrator: RAG orchestrator used for indexing and instant questions
        """
        self._storage = storage
        self._orchestrator = orchestrator

    async def upload(
        self,
        data: bytes,
        filename: str,
        content_type: str | None = None,
    ) -> UploadResult:
        """
        Save a file and index it into the persistent collection.

        Args:
            data: File content
            filename: Original file name
            content_type: MIME type reported by the client

        Returns:
            UploadResult: Stored file and indexing outcome

        Raises:
            StorageError: When the file cannot be saved
        """
        stored = await run_in_threadpool(self._storage.save, data, filename, content_type)
        logger.info(
            f"{__name__}:upload - Stored {filename}",
            extra={"stored_path": stored.stored_path, "size_bytes": stored.size_bytes},
        )

        try:
            async with self._storage.open_local(stored.stored_path) as local_path:
                result = await self._orchestrator.process_document(local_path)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:upload - Indexing failed, file kept",
                e,
                stored_path=stored.stored_path,
            )
            return UploadResult(file=stored, ingestion=IngestionOutcome.failed(e))

        return UploadResult(file=stored, ingestion=IngestionOutcome.succeeded(result))

    async def ask_instant(self, data: bytes, filename: str, question: str) -> str:
        """
        Answer a question about a file without storing or indexing it.

        Args:
            data: File content
            filename: Original file name
            question: Natural-language question

        Returns:
            str: Answer text
        """
        return await self._orchestrator.answer_ephemeral_question(data, filename, question)
