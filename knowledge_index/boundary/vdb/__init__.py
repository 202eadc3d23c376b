"""
Vector database boundary layer.

Provides vector store clients for storage and retrieval operations.
- PGVectorStore: PostgreSQL + pgvector chunk table (import from pgvector_store)
- InMemoryVectorStore: in-process store for tests and local runs

Dependencies: sqlalchemy, pgvector, numpy
System role: Vector store adapter for indexing and retrieval
"""

from knowledge_index.boundary.vdb.base_vector_store import (
    MAX_SCAN_ROWS,
    DimensionProbe,
    VectorStore,
)
from knowledge_index.boundary.vdb.memory_vector_store import InMemoryVectorStore
from knowledge_index.boundary.vdb.vector_schemas import (
    ChunkMetadata,
    ChunkRecord,
    IndexStats,
    VectorSearchResult,
)


__all__ = [
    "MAX_SCAN_ROWS",
    "ChunkMetadata",
    "ChunkRecord",
    "DimensionProbe",
    "IndexStats",
    "InMemoryVectorStore",
    "VectorSearchResult",
    "VectorStore",
]
