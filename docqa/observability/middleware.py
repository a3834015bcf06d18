"""
FastAPI middleware for observability.

Binds a correlation ID to each request and logs request outcomes with timing.

Dependencies: fastapi, starlette, docqa.observability.correlation
System role: Request/response observability injection
"""

import logging
import time
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from docqa.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request on the way in and one on the way out.

    Liveness probes are logged at DEBUG so they do not drown upload and
    question traffic. Error responses are logged at WARNING (4xx) or
    ERROR (5xx).
    """

    quiet_paths: tuple[str, ...] = ("/api/v1/health",)

    async def dispatch(self, request: Request, call_next):
        method = request.method
        path = request.url.path
        level = logging.DEBUG if path in self.quiet_paths else logging.INFO

        logger.log(
            level,
            f"{__name__}:dispatch - {method} {path}",
            extra={
                "method": method,
                "path": path,
                "content_length": request.headers.get("content-length"),
                "client_host": request.client.host if request.client else None,
            },
        )

        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{__name__}:dispatch - {method} {path} raised",
                extra={
                    "method": method,
                    "path": path,
                    "elapsed_ms": _elapsed_ms(start),
                    "error_type": type(e).__name__,
                },
            )
            raise

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        logger.log(
            level,
            f"{__name__}:dispatch - {method} {path} -> {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "elapsed_ms": _elapsed_ms(start),
            },
        )
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Bind the request's correlation ID to the logging context.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
