"""
Model provider configuration settings.

Manages Google Generative AI credentials and model selection for both
embeddings and answer generation, plus timeout/retry bounds for provider calls.

Dependencies: pydantic, pydantic_settings
System role: Embedding and generation provider configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from docqa.configs.base import BaseSettings


class ProviderSettings(BaseSettings):
    """Google Generative AI provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GOOGLE_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(
        default="",
        description="Google API key used for embeddings and generation (GOOGLE_API_KEY)",
    )
    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Chat model used to generate grounded answers",
    )
    temperature: float = Field(
        default=0.0,
        description="Sampling temperature for answers (0.0 for deterministic)",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID (gemini-embedding-001 supports reduced dimensions)",
    )
    embedding_dimension: int = Field(
        default=1024,
        description="Embedding vector dimension stored in pgvector",
    )
    timeout_seconds: float = Field(
        default=60.0,
        description="Upper bound for a single provider call",
    )
    max_attempts: int = Field(
        default=3,
        description="Attempts for a provider call that timed out",
    )
