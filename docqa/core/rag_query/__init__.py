"""
RAG query module.

Generic retrieval-augmented chain and the orchestrator that drives
ingestion, global questions and instant questions.
"""

from docqa.core.rag_query.chain import RagChainOptions, RetrievedContext, build_rag_chain
from docqa.core.rag_query.orchestrator import RagOrchestrator
from docqa.core.rag_query.prompts import NO_ANSWER_FALLBACK

__all__ = [
    "NO_ANSWER_FALLBACK",
    "RagChainOptions",
    "RagOrchestrator",
    "RetrievedContext",
    "build_rag_chain",
]
