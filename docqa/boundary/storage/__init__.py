"""
File storage boundary.

Selects the upload storage backend (local disk or S3) from configuration.

Dependencies: boto3, docqa.configs
System role: Storage adapter for uploaded files
"""

import logging

from docqa.boundary.storage.local_storage import LocalStorage
from docqa.boundary.storage.models import StoredFile
from docqa.boundary.storage.s3_storage import S3Storage
from docqa.configs.base import require_setting
from docqa.configs.storage import StorageSettings
from docqa.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

StorageBackend = LocalStorage | S3Storage


def get_storage_backend(settings: StorageSettings) -> StorageBackend:
    """
    Build the storage backend selected by STORAGE_PROVIDER.

    Args:
        settings: Storage settings

    Returns:
        LocalStorage or S3Storage

    Raises:
        ConfigurationError: Provider missing or unknown, or s3 without a bucket
    """
    provider = require_setting(settings.provider, "STORAGE_PROVIDER").strip().lower()

    if provider == "local":
        logger.info(f"{__name__}:get_storage_backend - Using local storage at {settings.upload_dir}")
        return LocalStorage(upload_dir=settings.upload_dir)

    if provider == "s3":
        bucket = require_setting(settings.s3_bucket, "STORAGE_S3_BUCKET")
        logger.info(f"{__name__}:get_storage_backend - Using S3 storage bucket={bucket}")
        return S3Storage(bucket=bucket, region=settings.s3_region, prefix=settings.s3_prefix)

    raise ConfigurationError(
        f"Invalid STORAGE_PROVIDER: {provider}. Must be 'local' or 's3'.",
        setting="STORAGE_PROVIDER",
    )


__all__ = [
    "LocalStorage",
    "S3Storage",
    "StorageBackend",
    "StoredFile",
    "get_storage_backend",
]
