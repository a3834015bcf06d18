"""
Configuration settings for document processing pipeline.

Provides environment-based configuration for loading and chunking.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentPipelineSettings(BaseSettings):
    """Settings for document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DOC_PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings
    chunk_size: int = Field(
        default=1000,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        description="Overlap between consecutive chunks",
    )

    # Loading settings
    pdf_extensions: tuple[str, ...] = Field(
        default=(".pdf",),
        description="Extensions parsed page by page as PDF; everything else is UTF-8 text",
    )
    text_encoding: str = Field(
        default="utf-8",
        description="Encoding used for non-PDF sources",
    )

    @model_validator(mode="after")
    def _check_chunk_geometry(self) -> "DocumentPipelineSettings":
        # Overlap must leave room for new content in every window
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if not 0 <= self.chunk_overlap < self.chunk_size:
            raise ValueError("chunk_overlap must be in [0, chunk_size)")
        return self


@lru_cache
def get_pipeline_settings() -> DocumentPipelineSettings:
    """
    Get cached pipeline settings instance.

    Returns:
        DocumentPipelineSettings: Singleton settings loaded from environment
    """
    return DocumentPipelineSettings()
