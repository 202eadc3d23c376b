"""
Index and search error handling utilities.

Provides a decorator for consistent error handling across the index and
search endpoints, plus app-level handlers for errors raised while building
dependencies (e.g. missing credentials).
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from knowledge_index.core.exceptions import (
    ConfigurationError,
    EmbeddingDimensionMismatch,
    EmptyEmbeddingResult,
    InvalidRequestError,
    KnowledgeIndexException,
    NoIndexableContent,
)
from knowledge_index.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

# Most specific first
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (EmbeddingDimensionMismatch, status.HTTP_409_CONFLICT),
    (EmptyEmbeddingResult, status.HTTP_502_BAD_GATEWAY),
    (NoIndexableContent, 422),
    (InvalidRequestError, status.HTTP_400_BAD_REQUEST),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: Exception) -> int:
    """Map a domain exception to its HTTP status code."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_index_errors(func: F) -> F:
    """
    Decorator to handle indexing/search errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping domain exceptions to HTTP status codes
    - Uniform {"detail": ...} error bodies
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except KnowledgeIndexException as e:
            code = status_for(e)
            if code >= 500:
                log_exception_with_context(logger, "Index operation failed", e, **e.details)
            else:
                logger.warning(
                    f"{func.__name__} rejected: {e.message}",
                    extra={"status_code": code, "error_type": type(e).__name__},
                )
            raise HTTPException(status_code=code, detail=e.message)

        except ValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=422,
                detail=e.errors(),
            )

        except ValueError as e:
            logger.warning("Invalid request (ValueError)", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except Exception as e:
            log_exception_with_context(logger, "Unexpected failure in index operation", e)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred: {e}",
            )

    return wrapper  # type: ignore


async def _knowledge_index_exception_handler(
    request: Request, exc: KnowledgeIndexException
) -> JSONResponse:
    code = status_for(exc)
    log_exception_with_context(
        logger, "Request failed before reaching the endpoint", exc, path=request.url.path
    )
    return JSONResponse(status_code=code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors raised inside dependencies to JSON error responses."""
    app.add_exception_handler(KnowledgeIndexException, _knowledge_index_exception_handler)
