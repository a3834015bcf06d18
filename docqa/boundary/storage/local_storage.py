"""
Local disk storage backend.

Saves uploads under a single directory with a timestamp/random prefix so
repeated uploads of the same name never collide.

Dependencies: pathlib (stdlib)
System role: Development storage backend for uploaded files
"""

import logging
import secrets
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from docqa.boundary.storage.models import StoredFile
from docqa.core.exceptions import StorageError

logger = logging.getLogger(__name__)


def unique_name(original_name: str) -> str:
    """<epoch millis>-<random>-<original name>"""
    safe_name = Path(original_name).name
    return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}-{safe_name}"


class LocalStorage:
    """Store uploaded files on local disk."""

    def __init__(self, upload_dir: str = "./uploads") -> None:
        """
        Initialize local storage and create the upload directory.

        Args:
            upload_dir: Directory receiving uploads
        """
        self._upload_dir = Path(upload_dir)
        self._upload_dir.mkdir(parents=True, exist_ok=True)

    def save(self, data: bytes, name: str, content_type: str | None = None) -> StoredFile:
        """
        Write an upload to disk.

        Args:
            data: File content
            name: Original file name
            content_type: MIME type reported by the client

        Returns:
            StoredFile: Saved file description

        Raises:
            StorageError: When the file cannot be written
        """
        file_path = self._upload_dir / unique_name(name)
        try:
            file_path.write_bytes(data)
        except OSError as e:
            logger.error(f"{__name__}:save - Failed to write {file_path}: {e}")
            raise StorageError(
                f"Failed to save file locally: {e}",
                details={"path": str(file_path)},
            ) from e

        logger.info(f"{__name__}:save - Saved file to {file_path}")
        return StoredFile(
            original_name=name,
            stored_path=str(file_path),
            size_bytes=len(data),
            content_type=content_type,
        )

    @asynccontextmanager
    async def open_local(self, stored_path: str) -> AsyncIterator[str]:
        """Yield the stored path itself; local files need no staging."""
        yield stored_path
