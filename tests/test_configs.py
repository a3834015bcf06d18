"""
Test suite for configuration settings.

Defaults, environment overrides and required-value checks.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from docqa.configs import ProviderSettings, Settings, StorageSettings, VectorStoreSettings, require_setting
from docqa.core.document_processing import DocumentPipelineSettings
from docqa.core.exceptions import ConfigurationError


class TestDefaults:
    """Default values mirror the production pipeline."""

    def test_pipeline_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DOC_PIPELINE_CHUNK_SIZE", raising=False)
        monkeypatch.delenv("DOC_PIPELINE_CHUNK_OVERLAP", raising=False)

        settings = DocumentPipelineSettings()

        assert settings.chunk_size == 1000
        assert settings.chunk_overlap == 200
        assert settings.pdf_extensions == (".pdf",)

    def test_overlap_must_be_smaller_than_chunk(self) -> None:
        with pytest.raises(PydanticValidationError):
            DocumentPipelineSettings(chunk_size=100, chunk_overlap=100)

    def test_retriever_depths(self) -> None:
        settings = VectorStoreSettings(url="postgresql://localhost/db")

        assert settings.global_top_k == 15
        assert settings.ephemeral_top_k == 10
        assert settings.collection_name == "documents"

    def test_generation_is_deterministic(self) -> None:
        assert ProviderSettings(api_key="k").temperature == 0.0


class TestEnvironment:
    """Environment variables populate nested settings."""

    def test_env_prefixes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PGVECTOR_URL", "postgresql://u:p@db/app")
        monkeypatch.setenv("GOOGLE_API_KEY", "secret")
        monkeypatch.setenv("STORAGE_PROVIDER", "s3")
        monkeypatch.setenv("DOC_PIPELINE_CHUNK_SIZE", "500")

        settings = Settings()

        assert settings.vector_store.url == "postgresql://u:p@db/app"
        assert settings.vector_store.async_url == "postgresql+psycopg://u:p@db/app"
        assert settings.providers.api_key == "secret"
        assert settings.storage.provider == "s3"
        assert settings.pipeline.chunk_size == 500

    def test_storage_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STORAGE_UPLOAD_DIR", raising=False)

        assert StorageSettings().upload_dir == "./uploads"


class TestRequireSetting:
    """Required values fail at boot."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_values_raise(self, value) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            require_setting(value, "GOOGLE_API_KEY")

        assert exc_info.value.details == {"setting": "GOOGLE_API_KEY"}
        assert "GOOGLE_API_KEY" in str(exc_info.value)

    def test_present_value_is_returned(self) -> None:
        assert require_setting("abc", "GOOGLE_API_KEY") == "abc"
