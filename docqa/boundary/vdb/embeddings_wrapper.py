"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

Wraps GoogleGenerativeAIEmbeddings so every sync and async embedding call
uses the same vector dimension. The pgvector collection is created for that
dimension, so a mismatch would fail at insert or query time.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency for the pgvector collection
"""

import logging
from typing import Any, List

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """
    GoogleGenerativeAIEmbeddings with a fixed output dimensionality.

    The base class only honours output_dimensionality per call; this wrapper
    injects the configured value unless the caller overrides it.
    """

    _output_dimensionality: int = 1024

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1024,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        No network call happens here; the client authenticates on first use.

        Args:
            model: Google embedding model ID
            output_dimensionality: Fixed dimension for all embeddings
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings (google_api_key)
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    def _with_dimension(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        if kwargs.get("output_dimensionality") is None:
            kwargs["output_dimensionality"] = self._output_dimensionality
        return kwargs

    def embed_documents(self, texts: List[str], **kwargs: Any) -> List[List[float]]:
        """Embed documents at the configured dimension."""
        return super().embed_documents(texts, **self._with_dimension(kwargs))

    def embed_query(self, text: str, **kwargs: Any) -> List[float]:
        """Embed a query at the configured dimension."""
        return super().embed_query(text, **self._with_dimension(kwargs))

    async def aembed_documents(self, texts: List[str], **kwargs: Any) -> List[List[float]]:
        """Async variant of embed_documents."""
        return await super().aembed_documents(texts, **self._with_dimension(kwargs))

    async def aembed_query(self, text: str, **kwargs: Any) -> List[float]:
        """Async variant of embed_query."""
        return await super().aembed_query(text, **self._with_dimension(kwargs))
