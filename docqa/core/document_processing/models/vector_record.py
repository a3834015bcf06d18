"""
Vector record domain model.

Persisted form of a chunk: deterministic ID, content, metadata and embedding.

Dependencies: pydantic, hashlib
System role: Data structure handed to the persistent vector index
"""

import hashlib
from typing import Any

from langchain_core.documents import Document
from pydantic import BaseModel, Field


class VectorRecord(BaseModel):
    """Document chunk with its embedding vector."""

    id: str = Field(description="Deterministic record identifier (content hash)")
    content: str = Field(description="Chunk text content")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Chunk metadata (source, page, chunk_index)")
    embedding: list[float] = Field(description="Embedding vector")

    @staticmethod
    def make_id(content: str, metadata: dict[str, Any]) -> str:
        """
        Generate deterministic record ID from content and metadata.

        Args:
            content: Chunk text content
            metadata: Chunk metadata

        Returns:
            str: SHA-256 hash of content + source + page + start_index
        """
        source = metadata.get("source", "")
        page = metadata.get("page", "")
        start_index = metadata.get("start_index", 0)
        hash_input = f"{content}:{source}:{page}:{start_index}"
        return hashlib.sha256(hash_input.encode()).hexdigest()[:32]

    @classmethod
    def from_document(cls, document: Document, embedding: list[float]) -> "VectorRecord":
        """Build a record from an enriched chunk and its embedding."""
        return cls(
            id=cls.make_id(document.page_content, document.metadata),
            content=document.page_content,
            metadata=dict(document.metadata),
            embedding=embedding,
        )
