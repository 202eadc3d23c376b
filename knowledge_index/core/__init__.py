"""
Core business logic module.

Contains the exception hierarchy, the indexing pipeline and retrieval.
Pipeline modules are imported from their subpackages:
knowledge_index.core.indexing and knowledge_index.core.retrieval.
"""

from knowledge_index.core.exceptions import (
    ConfigurationError,
    EmbeddingDimensionMismatch,
    EmbeddingError,
    EmptyEmbeddingResult,
    IndexingError,
    InvalidRequestError,
    KnowledgeIndexException,
    NoIndexableContent,
    RetrievalError,
    VectorStoreError,
)

__all__ = [
    "ConfigurationError",
    "EmbeddingDimensionMismatch",
    "EmbeddingError",
    "EmptyEmbeddingResult",
    "IndexingError",
    "InvalidRequestError",
    "KnowledgeIndexException",
    "NoIndexableContent",
    "RetrievalError",
    "VectorStoreError",
]
