"""
Index service for indexing requests and index maintenance.

Wraps the IndexSynchronizer and the vector store's maintenance operations
(delete by prefix, drop/truncate, status).

Dependencies: knowledge_index.core.indexing, knowledge_index.boundary.vdb
System role: Indexing service orchestration layer
"""

import logging
from dataclasses import dataclass

from knowledge_index.boundary.vdb import IndexStats, VectorStore
from knowledge_index.core.exceptions import InvalidRequestError
from knowledge_index.core.indexing import IndexReport, IndexSynchronizer, SourceDocument

logger = logging.getLogger(__name__)

REBUILD_MODES = ("drop", "truncate")


@dataclass(frozen=True)
class IndexStatus:
    table_exists: bool
    has_any_index: bool
    has_context_index: bool


class IndexService:
    """
    Index service for the chunk table.

    Coordinates batch indexing through the synchronizer and exposes the
    store-level maintenance operations.
    """

    def __init__(self, store: VectorStore, synchronizer: IndexSynchronizer) -> None:
        """
        Initialize index service.

        Args:
            store: Vector store holding the chunk table
            synchronizer: Incremental indexing pipeline
        """
        self.store = store
        self.synchronizer = synchronizer

    def index(self, documents: list[SourceDocument], incremental: bool = True) -> IndexReport:
        """
        Index a batch of documents.

        Raises:
            InvalidRequestError: If the batch is empty
            EmbeddingDimensionMismatch: No model matches the table's dimension
            NoIndexableContent: Nothing could be indexed
        """
        if not documents:
            raise InvalidRequestError("No files provided for indexing.", field="files")

        logger.info(
            f"{__name__}:index - START",
            extra={"file_count": len(documents), "incremental": incremental},
        )
        report = self.synchronizer.sync(documents, incremental=incremental)
        logger.info(
            f"{__name__}:index - END",
            extra={"files": report.files_count, "chunks": report.chunks_count},
        )
        return report

    def delete_by_prefix(self, prefix: str) -> int:
        """
        Delete every chunk whose source starts with prefix.

        Raises:
            InvalidRequestError: If prefix is empty
        """
        if not prefix or not prefix.strip():
            raise InvalidRequestError("Missing or invalid prefix parameter.", field="prefix")

        deleted = self.store.delete_by_prefix(prefix)
        logger.info(f"{__name__}:delete_by_prefix - Deleted {deleted} rows", extra={"prefix": prefix})
        return deleted

    def rebuild(self, mode: str = "drop") -> str:
        """
        Drop or truncate the chunk table.

        Dropping also forgets the vector dimension D; truncating keeps it.

        Raises:
            InvalidRequestError: If mode is not 'drop' or 'truncate'
        """
        mode = (mode or "drop").strip().lower()
        if mode not in REBUILD_MODES:
            raise InvalidRequestError(
                "Invalid rebuild mode. Use mode=drop or mode=truncate.", field="mode"
            )

        if mode == "drop":
            self.store.drop()
        else:
            self.store.truncate()
        logger.warning(f"{__name__}:rebuild - Index table {mode} completed")
        return mode

    def index_status(self, context_id: str | None = None) -> IndexStatus:
        """Report table existence and whether rows exist globally and for a context."""
        if not self.store.table_exists():
            return IndexStatus(table_exists=False, has_any_index=False, has_context_index=False)

        has_any = self.store.has_rows()
        context_id = (context_id or "").strip()
        has_context = bool(context_id) and self.store.has_rows(f"{context_id}:")
        return IndexStatus(
            table_exists=True,
            has_any_index=has_any,
            has_context_index=has_context,
        )

    def knowledge_base_status(self, prefix: str | None = None) -> IndexStats:
        """Aggregate statistics, optionally scoped to a source prefix."""
        return self.store.stats(prefix or None)
