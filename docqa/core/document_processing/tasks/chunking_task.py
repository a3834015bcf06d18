"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits documents into retrievable chunks while preserving context.
Cuts prefer paragraph, then line, then sentence, then whitespace boundaries,
and fall back to a hard character cut.

Dependencies: langchain_text_splitters
System role: Second stage of document ingestion pipeline
"""

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

BOUNDARY_SEPARATORS = ["\n\n", "\n", ". ", " ", ""]


class ChunkingTask:
    """Split documents into chunks using RecursiveCharacterTextSplitter."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
        """
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=BOUNDARY_SEPARATORS,
            keep_separator="end",
            add_start_index=True,
            length_function=len,
        )

    def chunk(self, documents: list[Document]) -> list[Document]:
        """
        Split documents into chunks.

        Each source Document is split on its own; output keeps input order.

        Args:
            documents: LangChain Documents to split

        Returns:
            list[Document]: Chunked documents with preserved metadata
        """
        if not documents:
            return []

        return self._splitter.split_documents(documents)
