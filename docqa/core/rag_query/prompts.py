"""
RAG prompt templates.

Global questions run against the shared knowledge base; instant questions
run against a single document that is never stored. Both templates take
{context} and {question}.

Dependencies: langchain_core.prompts
System role: Prompt templates for grounded answers
"""

from langchain_core.prompts import ChatPromptTemplate

NO_ANSWER_FALLBACK = "I don't know. The available documents do not contain the answer."

GLOBAL_SYSTEM_PROMPT = f"""You are a helpful assistant for a company knowledge base.
Use the following pieces of context retrieved from the knowledge base to answer the question.
Always base your answer only on the context below. If the answer is not in the context, \
reply with exactly: {NO_ANSWER_FALLBACK}

Context:
{{context}}"""

EPHEMERAL_SYSTEM_PROMPT = f"""You are a helpful assistant. Use the retrieved context to answer the question.
This document is NOT stored in the knowledge base; answer only about this document.
If the answer is not in the context, reply with exactly: {NO_ANSWER_FALLBACK}

Context:
{{context}}"""

GLOBAL_RAG_PROMPT = ChatPromptTemplate.from_messages([
    ("system", GLOBAL_SYSTEM_PROMPT),
    ("human", "{question}"),
])

EPHEMERAL_RAG_PROMPT = ChatPromptTemplate.from_messages([
    ("system", EPHEMERAL_SYSTEM_PROMPT),
    ("human", "{question}"),
])


def get_global_prompt() -> ChatPromptTemplate:
    """Prompt for questions answered from the persistent collection."""
    return GLOBAL_RAG_PROMPT


def get_ephemeral_prompt() -> ChatPromptTemplate:
    """Prompt for questions about a single in-flight document."""
    return EPHEMERAL_RAG_PROMPT
