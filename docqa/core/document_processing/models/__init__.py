"""
Models for document processing pipeline.

Exports: VectorRecord, PersistResult, IngestionOutcome
"""

from .persist_result import IngestionOutcome, PersistResult
from .vector_record import VectorRecord

__all__ = [
    "IngestionOutcome",
    "PersistResult",
    "VectorRecord",
]
