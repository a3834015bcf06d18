"""
Document Q&A service.

Ingests PDF and text documents into a pgvector knowledge base and answers
questions over it, or over a single in-memory document.
"""

__version__ = "0.1.0"
