"""
Exception handlers.

Translate the domain exception hierarchy into HTTP responses.

Dependencies: fastapi, docqa.core.exceptions
System role: Error-to-HTTP mapping
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from docqa.core.exceptions import (
    ConfigurationError,
    DocQAException,
    DocumentProcessingError,
    ProviderError,
    ProviderTimeoutError,
    StorageError,
    ValidationError,
)
from docqa.models.common import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; subclasses before their bases
STATUS_BY_EXCEPTION: list[tuple[type[DocQAException], int]] = [
    (ValidationError, 422),
    (DocumentProcessingError, 422),
    (ProviderTimeoutError, 504),
    (ProviderError, 502),
    (ConfigurationError, 500),
    (StorageError, 500),
]


def status_for(exc: DocQAException) -> int:
    """HTTP status code for a domain exception."""
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def handle_docqa_exception(request: Request, exc: DocQAException) -> JSONResponse:
    """Render a domain exception as an ErrorResponse."""
    status_code = status_for(exc)
    log = logger.warning if status_code < 500 else logger.error
    log(
        f"{request.method} {request.url.path} - {type(exc).__name__}: {exc.message}",
        extra={"status_code": status_code, "error_type": type(exc).__name__},
    )
    body = ErrorResponse(
        message=exc.message,
        error_type=type(exc).__name__,
        details=exc.details or None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach domain exception handlers to the application."""
    app.add_exception_handler(DocQAException, handle_docqa_exception)
