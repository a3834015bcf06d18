"""
Task modules for document processing pipeline.

Exports: ParsingTask, ChunkingTask, EnrichmentTask
"""

from .chunking_task import ChunkingTask
from .enrichment_task import EnrichmentTask
from .parsing_task import ParsingTask, memory_source

__all__ = [
    "ParsingTask",
    "ChunkingTask",
    "EnrichmentTask",
    "memory_source",
]
