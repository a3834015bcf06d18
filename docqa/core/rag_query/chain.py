"""
Generic RAG chain built with LCEL.

retrieve -> (log sources) -> assemble context -> prompt -> model -> text.
An empty retrieval short-circuits to the no-answer fallback without calling
the model.

Dependencies: langchain_core.runnables, langchain_core.output_parsers, docqa.core.provider_calls
System role: Shared answer pipeline for global and instant questions
"""

import logging

from langchain_core.documents import Document
from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.prompt_values import PromptValue
from langchain_core.retrievers import BaseRetriever
from langchain_core.runnables import Runnable, RunnableBranch, RunnableLambda
from pydantic import BaseModel, ConfigDict, Field

from docqa.core.provider_calls import call_provider
from docqa.core.rag_query.prompts import NO_ANSWER_FALLBACK

logger = logging.getLogger(__name__)


class RagChainOptions(BaseModel):
    """Per-mode chain configuration."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    prompt: ChatPromptTemplate
    separator: str = Field(default="\n\n", description="Joins chunk contents in the context")
    include_source_log: bool = Field(default=False, description="Log distinct chunk sources")
    timeout_seconds: float = Field(default=60.0, description="Bound for retrieval and generation")
    max_attempts: int = Field(default=3, description="Attempts for a timed-out provider call")


class RetrievedContext(BaseModel):
    """Question together with the ranked chunks retrieved for it."""

    question: str
    documents: list[Document] = Field(default_factory=list)

    def distinct_sources(self) -> list[str]:
        """Sources of the retrieved chunks, first-seen order."""
        return list(dict.fromkeys(str(doc.metadata.get("source")) for doc in self.documents))

    def assemble(self, separator: str) -> str:
        """Join chunk contents in ranked order."""
        return separator.join(doc.page_content for doc in self.documents)


def build_rag_chain(
    retriever: BaseRetriever,
    llm: BaseChatModel,
    options: RagChainOptions,
) -> Runnable:
    """
    Compose the retrieval-augmented answer chain.

    Args:
        retriever: Retriever returning ranked chunks for a question
        llm: Chat model used for generation
        options: Prompt, separator, source logging and provider bounds

    Returns:
        Runnable: Async chain taking the question string and returning answer text
    """

    async def retrieve(question: str) -> RetrievedContext:
        documents = await call_provider(
            "search",
            lambda: retriever.ainvoke(question),
            timeout=options.timeout_seconds,
            max_attempts=options.max_attempts,
        )
        return RetrievedContext(question=question, documents=documents)

    def log_sources(context: RetrievedContext) -> RetrievedContext:
        if options.include_source_log:
            logger.debug(
                f"{__name__}:log_sources - Context found in: {', '.join(context.distinct_sources())}"
            )
        return context

    def assemble(context: RetrievedContext) -> dict:
        return {
            "context": context.assemble(options.separator),
            "question": context.question,
        }

    async def generate(prompt_value: PromptValue):
        return await call_provider(
            "generate",
            lambda: llm.ainvoke(prompt_value),
            timeout=options.timeout_seconds,
            max_attempts=options.max_attempts,
        )

    def no_answer(context: RetrievedContext) -> str:
        logger.info(f"{__name__}:no_answer - No chunks retrieved, returning fallback")
        return NO_ANSWER_FALLBACK

    answer = (
        RunnableLambda(assemble)
        | options.prompt
        | RunnableLambda(generate)
        | StrOutputParser()
    )

    return (
        RunnableLambda(retrieve)
        | RunnableLambda(log_sources)
        | RunnableBranch(
            (lambda context: not context.documents, RunnableLambda(no_answer)),
            answer,
        )
    )
