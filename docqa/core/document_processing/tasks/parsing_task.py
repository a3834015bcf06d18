"""
Document parsing task using LangChain PDF loaders.

Converts files on disk or in-memory buffers into LangChain Documents.
PDFs yield one Document per page; every other format is read as text.

Dependencies: langchain_community.document_loaders, langchain_core
System role: First stage of document ingestion pipeline
"""

import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader
from langchain_community.document_loaders.parsers.pdf import PyPDFParser
from langchain_core.documents import Document
from langchain_core.documents.base import Blob

from docqa.core.exceptions import DocumentReadError, ParsingError

logger = logging.getLogger(__name__)

MEMORY_SOURCE_PREFIX = "memory://"


def memory_source(display_name: str) -> str:
    """Synthetic source identifier for documents loaded from memory."""
    return f"{MEMORY_SOURCE_PREFIX}{display_name}"


class ParsingTask:
    """Parse PDF and text sources into LangChain Documents."""

    def __init__(
        self,
        pdf_extensions: tuple[str, ...] = (".pdf",),
        text_encoding: str = "utf-8",
    ) -> None:
        """
        Initialize parsing task.

        Args:
            pdf_extensions: Extensions handled by the paginated PDF parser
            text_encoding: Encoding used to decode every other source
        """
        self._pdf_extensions = tuple(ext.lower() for ext in pdf_extensions)
        self._text_encoding = text_encoding

    def is_pdf(self, name: str) -> bool:
        """Whether a file name is routed to the PDF parser."""
        return Path(name).suffix.lower() in self._pdf_extensions

    def parse(self, file_path: str) -> list[Document]:
        """
        Parse a document from disk.

        Args:
            file_path: Path to the document

        Returns:
            list[Document]: One Document per PDF page, or a single text Document

        Raises:
            DocumentReadError: When the file is missing or unreadable
            ParsingError: When the content cannot be decoded
        """
        path = Path(file_path)
        if not path.is_file():
            raise DocumentReadError(f"File not found: {file_path}", file_path)

        if self.is_pdf(path.name):
            try:
                documents = PyPDFLoader(str(path)).load()
            except PermissionError as e:
                raise DocumentReadError(f"File is not readable: {e}", file_path) from e
            except Exception as e:
                raise ParsingError(f"Failed to parse PDF: {e}", file_path, file_type="pdf") from e

            for doc in documents:
                doc.metadata["source"] = file_path
            logger.info(f"{__name__}:parse - Loaded {len(documents)} PDF pages from {file_path}")
            return documents

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise DocumentReadError(f"File is not readable: {e}", file_path) from e

        return [self._text_document(raw, file_path)]

    def parse_bytes(self, data: bytes, display_name: str) -> list[Document]:
        """
        Parse a document held in memory, without touching the filesystem.

        Args:
            data: Raw file content
            display_name: Original file name (selects the parser, names the source)

        Returns:
            list[Document]: Documents whose source is memory://<display_name>

        Raises:
            ParsingError: When the content cannot be decoded
        """
        source = memory_source(display_name)

        if self.is_pdf(display_name):
            blob = Blob.from_data(data, path=source, mime_type="application/pdf")
            try:
                documents = list(PyPDFParser().lazy_parse(blob))
            except Exception as e:
                raise ParsingError(f"Failed to parse PDF: {e}", source, file_type="pdf") from e

            for doc in documents:
                doc.metadata["source"] = source
            logger.info(f"{__name__}:parse_bytes - Loaded {len(documents)} PDF pages from {source}")
            return documents

        return [self._text_document(data, source)]

    def _text_document(self, raw: bytes, source: str) -> Document:
        """Decode a text source into a single Document."""
        try:
            content = raw.decode(self._text_encoding)
        except UnicodeDecodeError as e:
            raise ParsingError(
                f"Content is not valid {self._text_encoding} text: {e}",
                source,
                file_type="text",
            ) from e
        return Document(page_content=content, metadata={"source": source})
