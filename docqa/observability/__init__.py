"""
Observability module.

Provides structured logging and correlation ID tracking.
"""

from docqa.observability.correlation import (
    CorrelationIdFilter,
    get_correlation_id,
    set_correlation_id,
)
from docqa.observability.logger import configure_logging

__all__ = [
    "CorrelationIdFilter",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
