"""
Correlation ID context.

Carries the request's correlation ID across async and threadpool boundaries
using contextvars.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "X-Correlation-ID"

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> Token:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Optional correlation ID (generates new if None)

    Returns:
        Token: Token for resetting the previous value
    """
    return correlation_id_ctx.set(correlation_id or uuid.uuid4().hex)


def get_correlation_id() -> str:
    return correlation_id_ctx.get()


def reset_correlation_id(token: Token) -> None:
    correlation_id_ctx.reset(token)
