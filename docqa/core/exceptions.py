"""
Exception hierarchy for the document Q&A service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DocQAException(Exception):
    """Base exception for all document Q&A errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(DocQAException):
    """Raised at construction when a required setting is missing or invalid."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Environment variable / setting name at fault
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class ValidationError(DocQAException):
    """Raised when caller input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class DocumentProcessingError(DocQAException):
    """Base exception for document loading errors."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            source: Path or memory identifier of the document
            details: Additional context
        """
        details = details or {}
        if source:
            details["source"] = source
        self.source = source
        super().__init__(message, details)


class DocumentReadError(DocumentProcessingError):
    """Raised when a source file cannot be read (missing, unreadable)."""

    pass


class ParsingError(DocumentProcessingError):
    """Raised when document content cannot be decoded."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            source: Path or memory identifier of the document
            file_type: Type of file that failed parsing
            details: Additional context
        """
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, source, details)


class ProviderError(DocQAException):
    """Raised when an embedding, generation or vector store call fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message
            operation: Operation that failed (embed, upsert, search, generate)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        self.operation = operation
        super().__init__(message, details)


class ProviderTimeoutError(ProviderError):
    """Raised when a provider call exceeds its configured bound."""

    pass


class StorageError(DocQAException):
    """Raised when an uploaded file cannot be stored or fetched back."""

    pass
