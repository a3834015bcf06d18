"""
Vector database boundary layer.

Provides the persistent pgvector store and per-call FAISS indexes.
- VectorStoreManager: embedding, upsert and retriever construction

Dependencies: langchain_postgres, langchain_community, langchain_google_genai
System role: Vector store adapter for RAG retrieval
"""

from docqa.boundary.vdb.embeddings_wrapper import FixedDimensionEmbeddings
from docqa.boundary.vdb.ephemeral_store import EmptyRetriever
from docqa.boundary.vdb.vector_store_manager import VectorStoreManager

__all__ = [
    "EmptyRetriever",
    "FixedDimensionEmbeddings",
    "VectorStoreManager",
]
