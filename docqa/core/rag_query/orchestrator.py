"""
RAG orchestrator.

Coordinates document preparation, persistence and grounded answering:
- process_document: load -> split -> enrich -> persist
- answer_global_question: question over the persistent collection
- answer_ephemeral_question: question over one in-memory document

Dependencies: langchain_google_genai, docqa.core.document_processing, docqa.boundary.vdb
System role: RAG use-case orchestration
"""

import logging

from fastapi.concurrency import run_in_threadpool
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from docqa.boundary.vdb import VectorStoreManager
from docqa.configs.base import require_setting
from docqa.configs.providers import ProviderSettings
from docqa.core.document_processing import DocumentProcessor, PersistResult
from docqa.core.rag_query.chain import RagChainOptions, build_rag_chain
from docqa.core.rag_query.prompts import get_ephemeral_prompt, get_global_prompt
from docqa.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

GLOBAL_SEPARATOR = "\n\n---\n\n"
EPHEMERAL_SEPARATOR = "\n\n"


class RagOrchestrator:
    """
    Ingestion and question answering over persistent and ephemeral indexes.

    Every failure is logged with its stage and input, then re-raised unchanged.
    """

    def __init__(
        self,
        processor: DocumentProcessor,
        vector_store: VectorStoreManager,
        provider_settings: ProviderSettings,
        llm: BaseChatModel | None = None,
        global_top_k: int = 15,
        ephemeral_top_k: int = 10,
    ) -> None:
        """
        Initialize orchestrator and chat model.

        Args:
            processor: Document loading/splitting/enrichment
            vector_store: Persistent and ephemeral vector indexes
            provider_settings: Chat model, credentials and call bounds
            llm: Chat model override (defaults to Gemini at temperature 0)
            global_top_k: Chunks retrieved for global questions
            ephemeral_top_k: Chunks retrieved for instant questions

        Raises:
            ConfigurationError: GOOGLE_API_KEY is missing
        """
        api_key = require_setting(provider_settings.api_key, "GOOGLE_API_KEY")

        self._processor = processor
        self._vector_store = vector_store
        self._provider_settings = provider_settings
        self._global_top_k = global_top_k
        self._ephemeral_top_k = ephemeral_top_k
        self._llm = llm or ChatGoogleGenerativeAI(
            model=provider_settings.chat_model,
            temperature=provider_settings.temperature,
            google_api_key=api_key,
        )

    def _options(self, prompt, separator: str, include_source_log: bool) -> RagChainOptions:
        return RagChainOptions(
            prompt=prompt,
            separator=separator,
            include_source_log=include_source_log,
            timeout_seconds=self._provider_settings.timeout_seconds,
            max_attempts=self._provider_settings.max_attempts,
        )

    async def process_document(self, path: str) -> PersistResult:
        """
        Load, split, enrich and persist a stored document.

        Args:
            path: Local path of the document

        Returns:
            PersistResult: Number of chunks persisted

        Raises:
            DocumentReadError: File missing or unreadable
            ParsingError: Content cannot be decoded
            ProviderError: Embedding or upsert failed
        """
        logger.info(f"{__name__}:process_document - START", extra={"path": path})

        stage = "load"
        try:
            documents = await run_in_threadpool(self._processor.load_document, path)
            stage = "split"
            chunks = await run_in_threadpool(self._processor.split_documents, documents)
            stage = "enrich"
            enriched = self._processor.enrich_metadata(chunks)
            stage = "persist"
            result = await self._vector_store.persist(enriched)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:process_document - Failed at {stage}",
                e,
                stage=stage,
                path=path,
            )
            raise

        logger.info(
            f"{__name__}:process_document - COMPLETE",
            extra={"path": path, "total_chunks": result.total_chunks},
        )
        return result

    async def answer_global_question(self, question: str) -> str:
        """
        Answer a question from the persistent collection.

        Args:
            question: Natural-language question

        Returns:
            str: Grounded answer, or the no-answer fallback

        Raises:
            ProviderError: Retrieval or generation failed
        """
        logger.info(
            f"{__name__}:answer_global_question - START",
            extra={"question_len": len(question)},
        )
        try:
            retriever = await self._vector_store.build_global_retriever(self._global_top_k)
            chain = build_rag_chain(
                retriever,
                self._llm,
                self._options(get_global_prompt(), GLOBAL_SEPARATOR, include_source_log=True),
            )
            return await chain.ainvoke(question)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:answer_global_question - Failed",
                e,
                question=question,
            )
            raise

    async def answer_ephemeral_question(
        self,
        data: bytes,
        display_name: str,
        question: str,
    ) -> str:
        """
        Answer a question about a single document without storing it.

        Args:
            data: Raw document bytes
            display_name: Original file name
            question: Natural-language question

        Returns:
            str: Grounded answer, or the no-answer fallback

        Raises:
            ParsingError: Content cannot be decoded
            ProviderError: Embedding, retrieval or generation failed
        """
        logger.info(
            f"{__name__}:answer_ephemeral_question - START",
            extra={"display_name": display_name, "size_bytes": len(data)},
        )
        try:
            documents = await run_in_threadpool(
                self._processor.load_document_from_buffer, data, display_name
            )
            chunks = await run_in_threadpool(self._processor.split_documents, documents)
            retriever = await self._vector_store.build_ephemeral_retriever(
                chunks, self._ephemeral_top_k
            )
            chain = build_rag_chain(
                retriever,
                self._llm,
                self._options(
                    get_ephemeral_prompt(), EPHEMERAL_SEPARATOR, include_source_log=False
                ),
            )
            return await chain.ainvoke(question)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:answer_ephemeral_question - Failed",
                e,
                display_name=display_name,
                question=question,
            )
            raise
