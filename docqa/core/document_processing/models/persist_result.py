"""
Persist result models.

Outcome of writing chunks to the persistent index, and the success/failure
union reported by the upload flow.

Dependencies: pydantic
System role: Return types for VectorStoreManager.persist() and ingestion
"""

from typing import Literal

from pydantic import BaseModel, Field


class PersistResult(BaseModel):
    """Result of persisting chunks into the vector index."""

    total_chunks: int = Field(description="Number of chunks written")
    status: Literal["persisted"] = Field(default="persisted", description="Persist status")


class IngestionOutcome(BaseModel):
    """Outcome of indexing an uploaded file; failure does not fail the upload."""

    status: Literal["persisted", "failed"] = Field(description="Whether indexing completed")
    total_chunks: int = Field(default=0, description="Chunks written when persisted")
    error: str | None = Field(default=None, description="Failure reason when failed")

    @classmethod
    def succeeded(cls, result: PersistResult) -> "IngestionOutcome":
        """Wrap a successful persist."""
        return cls(status="persisted", total_chunks=result.total_chunks)

    @classmethod
    def failed(cls, error: Exception) -> "IngestionOutcome":
        """Wrap an indexing failure."""
        return cls(status="failed", error=f"{type(error).__name__}: {error}")
