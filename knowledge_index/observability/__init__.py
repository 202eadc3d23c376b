"""
Observability module.

Provides logging configuration, correlation ID tracking and request logging.
"""

from knowledge_index.observability.correlation import get_correlation_id, set_correlation_id
from knowledge_index.observability.logger import configure_logging
from knowledge_index.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

__all__ = [
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
