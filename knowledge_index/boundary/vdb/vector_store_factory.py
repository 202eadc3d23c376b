"""
Vector store factory for selecting between pgvector and the in-memory store.

Depends on VECTOR_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: knowledge_index.boundary.vdb, knowledge_index.boundary.db, knowledge_index.configs
System role: Vector store instantiation and selection
"""

import logging

from knowledge_index.boundary.db import get_engine
from knowledge_index.boundary.vdb.base_vector_store import VectorStore
from knowledge_index.boundary.vdb.memory_vector_store import InMemoryVectorStore
from knowledge_index.boundary.vdb.pgvector_store import PGVectorStore
from knowledge_index.configs import Settings, get_settings

logger = logging.getLogger(__name__)


def get_vector_store(settings: Settings | None = None) -> VectorStore:
    """
    Factory function to get vector store based on environment configuration.

    Args:
        settings: Application settings (defaults to the cached singleton)

    Returns:
        PGVectorStore or InMemoryVectorStore: Configured vector store instance

    Raises:
        ValueError: If VECTOR_STORE_STORE_TYPE is invalid
        ConfigurationError: If pgvector is selected without database settings
    """
    settings = settings or get_settings()
    store_type = settings.vector_store.store_type.lower()

    if store_type == "memory":
        logger.info(f"{__name__}:get_vector_store - Creating in-memory vector store")
        return InMemoryVectorStore(max_scan_rows=settings.vector_store.max_scan_rows)

    elif store_type == "pgvector":
        logger.info(
            f"{__name__}:get_vector_store - Creating pgvector store",
            extra={"table": settings.vector_store.table_name},
        )
        return PGVectorStore(
            engine=get_engine(settings.database),
            table_name=settings.vector_store.table_name,
            max_scan_rows=settings.vector_store.max_scan_rows,
        )

    else:
        raise ValueError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'pgvector' or 'memory'."
        )
