"""
Test suite for the generic RAG chain.

Uses a static retriever and either FakeListChatModel or an AsyncMock model
so prompts can be inspected without calling a provider.
"""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.callbacks import (
    AsyncCallbackManagerForRetrieverRun,
    CallbackManagerForRetrieverRun,
)
from langchain_core.documents import Document
from langchain_core.language_models import FakeListChatModel
from langchain_core.messages import AIMessage
from langchain_core.retrievers import BaseRetriever

from docqa.core.rag_query import NO_ANSWER_FALLBACK, RagChainOptions, RetrievedContext, build_rag_chain
from docqa.core.rag_query.prompts import get_ephemeral_prompt, get_global_prompt


class StaticRetriever(BaseRetriever):
    """Retriever returning a fixed list and recording queries."""

    documents: list[Document] = []
    queries: list[str] = []

    def _get_relevant_documents(
        self, query: str, *, run_manager: CallbackManagerForRetrieverRun
    ) -> list[Document]:
        self.queries.append(query)
        return list(self.documents)

    async def _aget_relevant_documents(
        self, query: str, *, run_manager: AsyncCallbackManagerForRetrieverRun
    ) -> list[Document]:
        self.queries.append(query)
        return list(self.documents)


@pytest.fixture
def ranked_documents() -> list[Document]:
    """Three chunks, two from the same source."""
    return [
        Document(page_content="Refunds within 30 days.", metadata={"source": "policy.pdf"}),
        Document(page_content="Store credit otherwise.", metadata={"source": "policy.pdf"}),
        Document(page_content="Shipping is free.", metadata={"source": "faq.txt"}),
    ]


@pytest.fixture
def mock_llm() -> MagicMock:
    """Chat model double recording the rendered prompt."""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content="Within 30 days."))
    return llm


def global_options(**overrides) -> RagChainOptions:
    values = {
        "prompt": get_global_prompt(),
        "separator": "\n\n---\n\n",
        "include_source_log": True,
        "timeout_seconds": 5.0,
        "max_attempts": 1,
    }
    values.update(overrides)
    return RagChainOptions(**values)


class TestRetrievedContext:
    """Tests for RetrievedContext helpers."""

    def test_distinct_sources_keep_first_seen_order(self, ranked_documents: list[Document]) -> None:
        """Should list each source once in rank order."""
        context = RetrievedContext(question="q", documents=ranked_documents)

        assert context.distinct_sources() == ["policy.pdf", "faq.txt"]

    def test_assemble_joins_in_rank_order(self, ranked_documents: list[Document]) -> None:
        """Should join contents with the separator."""
        context = RetrievedContext(question="q", documents=ranked_documents)

        assert context.assemble(" | ") == (
            "Refunds within 30 days. | Store credit otherwise. | Shipping is free."
        )


class TestBuildRagChain:
    """Tests for build_rag_chain."""

    @pytest.mark.asyncio
    async def test_returns_model_answer_text(self, ranked_documents: list[Document]) -> None:
        """Should return plain answer text from the model."""
        retriever = StaticRetriever(documents=ranked_documents, queries=[])
        llm = FakeListChatModel(responses=["Within 30 days."])

        answer = await build_rag_chain(retriever, llm, global_options()).ainvoke("Refund window?")

        assert answer == "Within 30 days."
        assert retriever.queries == ["Refund window?"]

    @pytest.mark.asyncio
    async def test_context_uses_separator_and_rank_order(
        self, ranked_documents: list[Document], mock_llm: MagicMock
    ) -> None:
        """Should render context joined by the configured separator."""
        retriever = StaticRetriever(documents=ranked_documents, queries=[])

        await build_rag_chain(retriever, mock_llm, global_options()).ainvoke("Refund window?")

        messages = mock_llm.ainvoke.await_args.args[0].to_messages()
        system, human = messages[0].content, messages[1].content
        assert "Refunds within 30 days.\n\n---\n\nStore credit otherwise.\n\n---\n\nShipping is free." in system
        assert human == "Refund window?"

    @pytest.mark.asyncio
    async def test_ephemeral_prompt_mentions_unsaved_document(
        self, ranked_documents: list[Document], mock_llm: MagicMock
    ) -> None:
        """Should use the ephemeral prompt and plain paragraph separator."""
        retriever = StaticRetriever(documents=ranked_documents[:2], queries=[])
        options = global_options(prompt=get_ephemeral_prompt(), separator="\n\n", include_source_log=False)

        await build_rag_chain(retriever, mock_llm, options).ainvoke("Refund window?")

        system = mock_llm.ainvoke.await_args.args[0].to_messages()[0].content
        assert "NOT stored" in system
        assert "Refunds within 30 days.\n\nStore credit otherwise." in system

    @pytest.mark.asyncio
    @pytest.mark.parametrize("prompt_factory", [get_global_prompt, get_ephemeral_prompt])
    async def test_system_message_names_exact_fallback(
        self, prompt_factory, ranked_documents: list[Document], mock_llm: MagicMock
    ) -> None:
        """Should instruct the model to reply with the fallback answer verbatim."""
        retriever = StaticRetriever(documents=ranked_documents, queries=[])

        await build_rag_chain(retriever, mock_llm, global_options(prompt=prompt_factory())).ainvoke("Warranty?")

        system = mock_llm.ainvoke.await_args.args[0].to_messages()[0].content
        assert NO_ANSWER_FALLBACK in system
        assert "{context}" not in system

    @pytest.mark.asyncio
    async def test_no_documents_returns_fallback_without_model_call(self, mock_llm: MagicMock) -> None:
        """Should short-circuit to the fallback answer when nothing is retrieved."""
        retriever = StaticRetriever(documents=[], queries=[])

        answer = await build_rag_chain(retriever, mock_llm, global_options()).ainvoke("Unknown?")

        assert answer == NO_ANSWER_FALLBACK
        mock_llm.ainvoke.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_source_log_lists_distinct_sources(
        self, ranked_documents: list[Document], mock_llm: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Should log each source once when source logging is on."""
        retriever = StaticRetriever(documents=ranked_documents, queries=[])
        caplog.set_level(logging.DEBUG, logger="docqa.core.rag_query.chain")

        await build_rag_chain(retriever, mock_llm, global_options()).ainvoke("q")

        assert "policy.pdf, faq.txt" in caplog.text

    @pytest.mark.asyncio
    async def test_source_log_off(
        self, ranked_documents: list[Document], mock_llm: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Should not log sources when source logging is off."""
        retriever = StaticRetriever(documents=ranked_documents, queries=[])
        caplog.set_level(logging.DEBUG, logger="docqa.core.rag_query.chain")

        await build_rag_chain(retriever, mock_llm, global_options(include_source_log=False)).ainvoke("q")

        assert "policy.pdf" not in caplog.text

    @pytest.mark.asyncio
    async def test_generation_failure_raises_provider_error(
        self, ranked_documents: list[Document], mock_llm: MagicMock
    ) -> None:
        """Should surface model failures as ProviderError."""
        from docqa.core.exceptions import ProviderError

        mock_llm.ainvoke.side_effect = RuntimeError("quota exceeded")
        retriever = StaticRetriever(documents=ranked_documents, queries=[])

        with pytest.raises(ProviderError) as exc_info:
            await build_rag_chain(retriever, mock_llm, global_options()).ainvoke("q")

        assert exc_info.value.operation == "generate"
