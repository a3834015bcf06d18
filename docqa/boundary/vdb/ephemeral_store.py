"""
In-memory FAISS index for single-question retrieval.

Builds a throwaway FAISS index over the chunks of one uploaded document.
Nothing is written to disk and nothing touches the persistent collection;
the index is released with the retriever that holds it.

Dependencies: faiss-cpu, langchain_community.vectorstores
System role: Ephemeral vector store for instant questions
"""

import logging

from langchain_community.vectorstores import FAISS
from langchain_core.callbacks import (
    AsyncCallbackManagerForRetrieverRun,
    CallbackManagerForRetrieverRun,
)
from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from langchain_core.retrievers import BaseRetriever

logger = logging.getLogger(__name__)


class EmptyRetriever(BaseRetriever):
    """Retriever over an empty index; always returns no documents."""

    def _get_relevant_documents(
        self, query: str, *, run_manager: CallbackManagerForRetrieverRun
    ) -> list[Document]:
        return []

    async def _aget_relevant_documents(
        self, query: str, *, run_manager: AsyncCallbackManagerForRetrieverRun
    ) -> list[Document]:
        return []


async def build_ephemeral_index(chunks: list[Document], embeddings: Embeddings) -> FAISS:
    """
    Embed chunks into a fresh in-memory FAISS index.

    Args:
        chunks: Non-empty list of chunks from a single document
        embeddings: Embedding model (same model as the persistent index)

    Returns:
        FAISS: In-memory index, never saved
    """
    index = await FAISS.afrom_documents(chunks, embeddings)
    logger.info(
        f"{__name__}:build_ephemeral_index - Indexed {len(chunks)} chunks in memory",
        extra={"chunk_count": len(chunks)},
    )
    return index
