"""
Vector store manager for persistent and ephemeral retrieval.

Owns the embedding client, the lazily created pgvector store and the
in-memory FAISS indexes used for instant questions.

- Persistent: langchain_postgres.PGVector over an async SQLAlchemy engine,
  one shared collection, created on first use and cached for the process.
- Ephemeral: FAISS index built per call over a single document's chunks.

Dependencies: langchain_postgres, sqlalchemy, langchain_community, docqa.configs
System role: Vector store adapter for ingestion and RAG retrieval
"""

import asyncio
import logging

from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from langchain_core.retrievers import BaseRetriever
from langchain_postgres import PGVector
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from docqa.boundary.vdb.embeddings_wrapper import FixedDimensionEmbeddings
from docqa.boundary.vdb.ephemeral_store import EmptyRetriever, build_ephemeral_index
from docqa.configs.base import require_setting
from docqa.configs.providers import ProviderSettings
from docqa.configs.vector_store import VectorStoreSettings
from docqa.core.document_processing.models import PersistResult, VectorRecord
from docqa.core.exceptions import ConfigurationError
from docqa.core.provider_calls import call_provider

logger = logging.getLogger(__name__)

VECTOR_EXTENSION_QUERY = "SELECT 1 FROM pg_extension WHERE extname = 'vector'"


class VectorStoreManager:
    """
    Persistent and ephemeral vector indexes behind one embedding model.

    Credentials are checked at construction; the database is only
    contacted on first use of the persistent store.
    """

    def __init__(
        self,
        settings: VectorStoreSettings,
        provider_settings: ProviderSettings,
        embeddings: Embeddings | None = None,
    ) -> None:
        """
        Initialize manager and embedding client.

        Args:
            settings: pgvector connection and retriever depths
            provider_settings: Embedding model, credentials and call bounds
            embeddings: Embedding model override (defaults to Gemini embeddings)

        Raises:
            ConfigurationError: PGVECTOR_URL or GOOGLE_API_KEY is missing
        """
        require_setting(settings.url, "PGVECTOR_URL")
        api_key = require_setting(provider_settings.api_key, "GOOGLE_API_KEY")

        self._settings = settings
        self._provider_settings = provider_settings
        self._embeddings = embeddings or FixedDimensionEmbeddings(
            model=provider_settings.embedding_model,
            output_dimensionality=provider_settings.embedding_dimension,
            google_api_key=api_key,
        )

        self._engine: AsyncEngine | None = None
        self._store: PGVector | None = None
        self._lock = asyncio.Lock()

    @property
    def embeddings(self) -> Embeddings:
        """Embedding model shared by both indexes."""
        return self._embeddings

    async def _call(self, operation: str, call):
        return await call_provider(
            operation,
            call,
            timeout=self._provider_settings.timeout_seconds,
            max_attempts=self._provider_settings.max_attempts,
        )

    async def get_persistent_store(self) -> PGVector:
        """
        Return the process-wide pgvector store, creating it on first use.

        Concurrent first callers wait on one initialization and receive
        the same handle.

        Returns:
            PGVector: Store bound to the shared collection

        Raises:
            ConfigurationError: The vector extension is not installed
            ProviderError: The database is unreachable
        """
        if self._store is not None:
            return self._store

        async with self._lock:
            if self._store is None:
                self._store = await self._initialize_store()
        return self._store

    async def _initialize_store(self) -> PGVector:
        """Create engine, verify pgvector and create table/collection if absent."""
        logger.info(
            f"{__name__}:_initialize_store - Connecting to pgvector",
            extra={"collection_name": self._settings.collection_name},
        )
        engine = create_async_engine(
            self._settings.async_url,
            pool_size=self._settings.pool_size,
            max_overflow=self._settings.max_overflow,
            pool_pre_ping=True,
        )

        try:
            await self._call("connect", lambda: self._verify_vector_extension(engine))

            store = PGVector(
                embeddings=self._embeddings,
                connection=engine,
                collection_name=self._settings.collection_name,
                embedding_length=self._provider_settings.embedding_dimension,
                use_jsonb=True,
                create_extension=False,
                async_mode=True,
            )
            await self._call("connect", lambda: self._create_schema(store))
        except Exception:
            await engine.dispose()
            logger.warning(f"{__name__}:_initialize_store - Initialization failed, engine disposed")
            raise

        self._engine = engine
        logger.info(
            f"{__name__}:_initialize_store - Persistent store ready",
            extra={"collection_name": self._settings.collection_name},
        )
        return store

    @staticmethod
    async def _create_schema(store: PGVector) -> None:
        # __apost_init__ marks the store initialized before creating anything,
        # so every attempt clears the flag to rerun table and collection creation
        store._async_init = False
        await store.__apost_init__()

    @staticmethod
    async def _verify_vector_extension(engine: AsyncEngine) -> None:
        async with engine.connect() as conn:
            result = await conn.execute(text(VECTOR_EXTENSION_QUERY))
            if result.scalar() is None:
                raise ConfigurationError(
                    "pgvector extension is not installed in the target database",
                    setting="PGVECTOR_URL",
                )

    async def persist(self, chunks: list[Document]) -> PersistResult:
        """
        Embed and upsert chunks into the persistent collection.

        Record IDs are content hashes, so re-ingesting an identical chunk
        overwrites it instead of duplicating it.

        Args:
            chunks: Enriched chunks

        Returns:
            PersistResult: Number of chunks written

        Raises:
            ProviderError: Embedding or upsert failed (nothing is reported as persisted)
        """
        if not chunks:
            logger.info(f"{__name__}:persist - No chunks to persist")
            return PersistResult(total_chunks=0)

        store = await self.get_persistent_store()

        texts = [chunk.page_content for chunk in chunks]
        vectors = await self._call("embed", lambda: self._embeddings.aembed_documents(texts))

        records: dict[str, VectorRecord] = {}
        for chunk, vector in zip(chunks, vectors):
            record = VectorRecord.from_document(chunk, vector)
            records[record.id] = record
        batch = list(records.values())

        await self._call(
            "upsert",
            lambda: store.aadd_embeddings(
                texts=[r.content for r in batch],
                embeddings=[r.embedding for r in batch],
                metadatas=[r.metadata for r in batch],
                ids=[r.id for r in batch],
            ),
        )

        logger.info(
            f"{__name__}:persist - Persisted {len(batch)} chunks",
            extra={"total_chunks": len(batch), "collection_name": self._settings.collection_name},
        )
        return PersistResult(total_chunks=len(batch))

    async def build_global_retriever(self, k: int | None = None) -> BaseRetriever:
        """
        Retriever over the persistent collection.

        Args:
            k: Number of nearest chunks (defaults to global_top_k)

        Returns:
            BaseRetriever: Similarity retriever bound to pgvector
        """
        store = await self.get_persistent_store()
        return store.as_retriever(
            search_type="similarity",
            search_kwargs={"k": k if k is not None else self._settings.global_top_k},
        )

    async def build_ephemeral_retriever(
        self,
        chunks: list[Document],
        k: int | None = None,
    ) -> BaseRetriever:
        """
        Retriever over an in-memory index of exactly the given chunks.

        Args:
            chunks: Chunks of the in-flight document
            k: Number of nearest chunks (defaults to ephemeral_top_k)

        Returns:
            BaseRetriever: FAISS retriever, or an empty retriever for no chunks
        """
        if not chunks:
            return EmptyRetriever()

        index = await self._call(
            "embed", lambda: build_ephemeral_index(chunks, self._embeddings)
        )
        return index.as_retriever(
            search_type="similarity",
            search_kwargs={"k": k if k is not None else self._settings.ephemeral_top_k},
        )

    async def dispose(self) -> None:
        """Dispose the database engine and forget the cached store."""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info(f"{__name__}:dispose - Database engine disposed")
        self._engine = None
        self._store = None
