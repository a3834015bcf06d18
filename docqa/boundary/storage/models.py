"""
Stored file model.

Dependencies: pydantic
System role: Return type of storage backends
"""

from pydantic import BaseModel, Field


class StoredFile(BaseModel):
    """Location and description of a saved upload."""

    original_name: str = Field(description="File name as uploaded by the client")
    stored_path: str = Field(description="Local path or s3:// URI of the saved file")
    size_bytes: int = Field(description="File size in bytes")
    content_type: str | None = Field(default=None, description="MIME type reported by the client")
