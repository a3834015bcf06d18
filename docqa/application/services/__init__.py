"""Service orchestrators."""

from .upload_service import UploadResult, UploadService

__all__ = [
    "UploadResult",
    "UploadService",
]
