"""
S3 storage backend.

Uploads files with put_object and stages them back to a temp directory
when the ingestion pipeline needs a local path.

Dependencies: boto3, fastapi.concurrency
System role: Production storage backend for uploaded files
"""

import logging
import shutil
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool

from docqa.boundary.storage.local_storage import unique_name
from docqa.boundary.storage.models import StoredFile
from docqa.core.exceptions import StorageError

logger = logging.getLogger(__name__)

S3_SCHEME = "s3://"


def parse_s3_uri(uri: str) -> tuple[str, str]:
    """
    Split an s3:// URI into bucket and key.

    Raises:
        StorageError: When the URI is not an s3:// URI with a key
    """
    if not uri.startswith(S3_SCHEME):
        raise StorageError(f"Not an S3 URI: {uri}")
    bucket, _, key = uri[len(S3_SCHEME):].partition("/")
    if not bucket or not key:
        raise StorageError(f"Invalid S3 URI: {uri}")
    return bucket, key


class S3Storage:
    """Store uploaded files in an S3 bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        prefix: str = "uploads",
        client=None,
    ) -> None:
        """
        Initialize S3 storage.

        Args:
            bucket: S3 bucket name
            region: AWS region for the bucket
            prefix: Key prefix for uploaded objects
            client: Optional boto3 S3 client (created from region if None)
        """
        self._bucket = bucket
        self._region = region
        self._prefix = prefix.strip("/")
        self._s3_client = client or boto3.client("s3", region_name=region)

    def _key_for(self, name: str) -> str:
        filename = unique_name(name)
        return f"{self._prefix}/{filename}" if self._prefix else filename

    def save(self, data: bytes, name: str, content_type: str | None = None) -> StoredFile:
        """
        Upload a file to S3.

        Args:
            data: File content
            name: Original file name
            content_type: MIME type reported by the client

        Returns:
            StoredFile: Saved file description with an s3:// URI

        Raises:
            StorageError: When the upload fails
        """
        key = self._key_for(name)
        params = {"Bucket": self._bucket, "Key": key, "Body": data}
        if content_type:
            params["ContentType"] = content_type

        try:
            self._s3_client.put_object(**params)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:save - Failed to upload {key}: {e}")
            raise StorageError(
                f"Failed to upload to S3: {e}",
                details={"bucket": self._bucket, "key": key},
            ) from e

        uri = f"{S3_SCHEME}{self._bucket}/{key}"
        logger.info(f"{__name__}:save - Uploaded file to {uri}")
        return StoredFile(
            original_name=name,
            stored_path=uri,
            size_bytes=len(data),
            content_type=content_type,
        )

    def _download(self, bucket: str, key: str, local_path: str) -> None:
        try:
            self._s3_client.download_file(Bucket=bucket, Key=key, Filename=local_path)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code in ("404", "NoSuchKey"):
                raise StorageError(f"File not found in S3: {key}") from e
            raise StorageError(f"Failed to download from S3: {e}") from e
        except BotoCoreError as e:
            raise StorageError(f"Failed to download from S3: {e}") from e

    @asynccontextmanager
    async def open_local(self, stored_path: str) -> AsyncIterator[str]:
        """
        Download an object to a temp directory for the duration of the block.

        The download and the cleanup run in the threadpool so the event loop
        keeps serving other requests.

        Args:
            stored_path: s3:// URI returned by save()

        Yields:
            str: Local file path (removed on exit)

        Raises:
            StorageError: When the object cannot be downloaded
        """
        bucket, key = parse_s3_uri(stored_path)
        temp_dir = await run_in_threadpool(tempfile.mkdtemp, prefix="docqa_")
        local_path = str(Path(temp_dir) / Path(key).name)

        try:
            await run_in_threadpool(self._download, bucket, key, local_path)
            logger.info(f"{__name__}:open_local - Staged {stored_path}", extra={"local_path": local_path})
            yield local_path
        finally:
            await run_in_threadpool(shutil.rmtree, temp_dir, ignore_errors=True)
