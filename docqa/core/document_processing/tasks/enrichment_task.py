"""
Chunk metadata enrichment task.

Drops empty metadata values and stamps audit fields (chunk_index,
processed_at) so persisted JSONB metadata stays clean and traceable.

Dependencies: langchain_core
System role: Third stage of document ingestion pipeline
"""

from datetime import datetime, timezone
from typing import Any

from langchain_core.documents import Document


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _scalar(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class EnrichmentTask:
    """Clean chunk metadata and add chunk_index / processed_at."""

    def enrich(self, chunks: list[Document]) -> list[Document]:
        """
        Produce enriched copies of the chunks.

        chunk_index runs over the entire input, not per source document.

        Args:
            chunks: Split chunks, in output order of the splitter

        Returns:
            list[Document]: New Documents with cleaned and stamped metadata
        """
        enriched = []
        for index, chunk in enumerate(chunks):
            metadata = {
                key: _scalar(value)
                for key, value in chunk.metadata.items()
                if not _is_empty(value)
            }
            metadata["chunk_index"] = index
            metadata["processed_at"] = datetime.now(timezone.utc).isoformat()
            enriched.append(Document(page_content=chunk.page_content, metadata=metadata))
        return enriched
