"""
Exception hierarchy for the knowledge index.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class KnowledgeIndexException(Exception):
    """Base exception for all knowledge index errors."""

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


class ConfigurationError(KnowledgeIndexException):
    """Raised when provider credentials or store connection settings are missing."""

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
            setting: Name of the missing or invalid setting
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class InvalidRequestError(KnowledgeIndexException):
    """Raised when a caller-supplied request is malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize request validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class EmbeddingError(KnowledgeIndexException):
    """Base exception for embedding provider and model resolution errors."""

    pass


class EmbeddingDimensionMismatch(EmbeddingError):
    """Raised when no usable embedding model produces vectors of the stored width."""

    def __init__(
        self,
        expected_dimension: int,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize dimension mismatch error.

        Args:
            expected_dimension: Vector width enforced by the index table
            message: Optional override for the default message
            details: Additional context (e.g. probed dimensions per model)
        """
        self.expected_dimension = expected_dimension
        details = details or {}
        details["expected_dimension"] = expected_dimension
        super().__init__(
            message
            or (
                f"No embedding model produces {expected_dimension}-dimensional vectors. "
                "Rebuild the index table or configure a compatible model."
            ),
            details,
        )


class EmptyEmbeddingResult(EmbeddingError):
    """Raised when a single-text query embedding comes back empty."""

    def __init__(self, model: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize empty embedding error.

        Args:
            model: Embedding model that returned the empty vector
            details: Additional context
        """
        details = details or {}
        details["model"] = model
        super().__init__(f"Embedding model {model} returned an empty query vector", details)


class IndexingError(KnowledgeIndexException):
    """Base exception for indexing request failures."""

    pass


class NoIndexableContent(IndexingError):
    """Raised when an indexing batch yields zero persistable chunks."""

    def __init__(
        self,
        message: str = "No documents could be processed into indexable chunks.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class VectorStoreError(KnowledgeIndexException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (insert, query, delete, scan)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class RetrievalError(KnowledgeIndexException):
    """Raised when retrieval or answer generation fails."""

    def __init__(
        self,
        message: str,
        tenant_prefix: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize retrieval error.

        Args:
            message: Error message
            tenant_prefix: Tenant prefix of the failed retrieval
            details: Additional context
        """
        details = details or {}
        if tenant_prefix:
            details["tenant_prefix"] = tenant_prefix
        super().__init__(message, details)
