"""
Vector store configuration settings.

Manages the pgvector connection used for the persistent index and the
retrieval depth of the persistent and ephemeral retrievers.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """pgvector configuration (persistent) and retriever depths."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PGVECTOR_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="",
        description="PostgreSQL connection string with pgvector installed (PGVECTOR_URL)",
    )
    collection_name: str = Field(
        default="documents",
        description="Shared collection holding every persisted chunk",
    )
    global_top_k: int = Field(default=15, description="Chunks retrieved for global questions")
    ephemeral_top_k: int = Field(default=10, description="Chunks retrieved for instant questions")

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")

    @property
    def async_url(self) -> str:
        """
        Connection string for the async psycopg driver.

        Returns:
            str: SQLAlchemy async-compatible database URL
        """
        url = self.url
        for prefix in ("postgresql+psycopg://", "postgresql://", "postgres://"):
            if url.startswith(prefix):
                return "postgresql+psycopg://" + url[len(prefix):]
        return url
