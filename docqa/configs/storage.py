"""
File storage configuration.

Selects where uploaded files are kept (local disk or S3) and the
bucket/directory details of each backend.

Dependencies: pydantic_settings
System role: Storage backend configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings


class StorageSettings(BaseSettings):
    """Settings for the uploaded-file storage backend."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="",
        description="Storage backend: 'local' or 's3' (STORAGE_PROVIDER)",
    )
    upload_dir: str = Field(
        default="./uploads",
        description="Directory for the local backend",
    )
    s3_bucket: str = Field(default="", description="S3 bucket for the s3 backend")
    s3_region: str = Field(default="us-east-1", description="AWS region of the bucket")
    s3_prefix: str = Field(default="uploads", description="Key prefix for stored objects")
