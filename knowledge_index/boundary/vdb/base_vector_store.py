"""
Vector store protocols.

Structural interfaces shared by the pgvector and in-memory stores.
Uses structural subtyping - no inheritance required.

Dependencies: typing
System role: Contract between the indexing/retrieval core and storage
"""

from typing import Protocol, runtime_checkable

from knowledge_index.boundary.vdb.vector_schemas import (
    ChunkRecord,
    IndexStats,
    VectorSearchResult,
)

# Full-scan reads never return more rows than this.
MAX_SCAN_ROWS = 10_000


@runtime_checkable
class DimensionProbe(Protocol):
    """Reports the fixed vector width of the index table."""

    def get_dimension(self) -> int | None:
        """Return D, or None when the table is absent or has no typed vector column."""
        ...


@runtime_checkable
class VectorStore(DimensionProbe, Protocol):
    """Append/query primitives over the chunk table keyed by source."""

    def table_exists(self) -> bool:
        ...

    def has_rows(self, source_prefix: str | None = None) -> bool:
        ...

    def latest_file_hashes(self, sources: list[str]) -> dict[str, str]:
        """Return MAX(file_hash) per exact source; sources with no rows are omitted."""
        ...

    def insert_chunks(self, records: list[ChunkRecord]) -> int:
        """Write rows, creating the table with the first record's width if needed."""
        ...

    def delete_by_sources(self, sources: list[str]) -> int:
        """Delete rows whose source equals one of the given values."""
        ...

    def delete_by_prefix(self, prefix: str) -> int:
        """Delete rows whose source starts with prefix."""
        ...

    def query_top_k(
        self,
        vector: list[float],
        k: int,
        source_prefix: str | None = None,
    ) -> list[VectorSearchResult]:
        """Return the k nearest rows by cosine distance, best first."""
        ...

    def scan_all(
        self,
        source_prefix: str | None = None,
        limit: int = MAX_SCAN_ROWS,
    ) -> list[VectorSearchResult]:
        """Return rows without ranking, never more than the store's row cap."""
        ...

    def stats(self, source_prefix: str | None = None) -> IndexStats:
        ...

    def drop(self) -> None:
        ...

    def truncate(self) -> None:
        ...


def escape_like(prefix: str) -> str:
    """Escape LIKE wildcards so a prefix only matches literally."""
    return prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def effective_scan_limit(limit: int | None, cap: int = MAX_SCAN_ROWS) -> int:
    """Clamp a caller's scan limit to the hard row cap."""
    if limit is None or limit <= 0:
        return cap
    return min(limit, cap)
