"""
Logging utilities for failure reporting across the ingestion and query paths.

Converts request payloads (questions, raw uploads, LangChain documents) into
short log-safe strings and attaches the failure classification of the
exception being logged.

Dependencies: logging (stdlib), langchain_core, docqa.core.exceptions
System role: Logging helper functions
"""

import logging
from typing import Any

from langchain_core.documents import Document

from docqa.core.exceptions import DocQAException, ProviderError


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Convert a value into a bounded string for log records.

    Raw bytes and documents are summarised instead of dumped, since they
    carry uploaded content.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, (bytes, bytearray)):
        return f"bytes({len(value)})"
    if isinstance(value, Document):
        return f"Document(source={value.metadata.get('source', '?')}, chars={len(value.page_content)})"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    val_str = value if isinstance(value, str) else repr(value)
    if len(val_str) > max_length:
        return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
    return val_str


def describe_exception(exc: BaseException) -> dict[str, str]:
    """
    Classification fields for a failure.

    Args:
        exc: Exception being reported

    Returns:
        dict[str, str]: error_type, error_msg and, for provider failures,
            the provider operation that failed
    """
    fields = {
        "error_type": type(exc).__name__,
        "error_msg": exc.message if isinstance(exc, DocQAException) else str(exc),
    }
    if isinstance(exc, ProviderError) and exc.operation:
        fields["provider_operation"] = exc.operation
    return fields


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with its traceback and structured context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Operation inputs (path, question, stage, ...)
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context.update(describe_exception(exc))
    logger.exception(message, extra=safe_context)
