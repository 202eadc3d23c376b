"""
In-process vector store.

Same contract as PGVectorStore, backed by a Python list and numpy cosine
similarity. Used by the test suite and for local runs without PostgreSQL.

Dependencies: numpy, knowledge_index.boundary.vdb
System role: Local vector store for development and tests
"""

import logging
import threading

import numpy as np

from knowledge_index.boundary.vdb.base_vector_store import (
    MAX_SCAN_ROWS,
    effective_scan_limit,
)
from knowledge_index.boundary.vdb.vector_schemas import (
    ChunkRecord,
    IndexStats,
    VectorSearchResult,
)
from knowledge_index.core.exceptions import EmbeddingDimensionMismatch

logger = logging.getLogger(__name__)


class InMemoryVectorStore:
    """Chunk table held in memory; the 'table' exists once anything was written."""

    def __init__(self, max_scan_rows: int = MAX_SCAN_ROWS) -> None:
        self._max_scan_rows = max_scan_rows
        self._rows: list[ChunkRecord] = []
        self._dimension: int | None = None
        self._exists = False
        self._lock = threading.Lock()

    @property
    def rows(self) -> list[ChunkRecord]:
        """Snapshot of stored rows."""
        with self._lock:
            return list(self._rows)

    def table_exists(self) -> bool:
        return self._exists

    def get_dimension(self) -> int | None:
        return self._dimension

    def has_rows(self, source_prefix: str | None = None) -> bool:
        with self._lock:
            return any(self._matches(r, source_prefix) for r in self._rows)

    def latest_file_hashes(self, sources: list[str]) -> dict[str, str]:
        wanted = set(sources)
        latest: dict[str, str] = {}
        with self._lock:
            for row in self._rows:
                source = row.metadata.source
                if source in wanted and row.metadata.file_hash:
                    latest[source] = max(latest.get(source, ""), row.metadata.file_hash)
        return latest

    def insert_chunks(self, records: list[ChunkRecord]) -> int:
        if not records:
            return 0
        with self._lock:
            width = self._dimension or len(records[0].embedding)
            for record in records:
                if len(record.embedding) != width:
                    raise EmbeddingDimensionMismatch(
                        expected_dimension=width,
                        details={"actual_dimension": len(record.embedding)},
                    )
            self._dimension = width
            self._exists = True
            self._rows.extend(r.model_copy(deep=True) for r in records)
        logger.info(f"{__name__}:insert_chunks - Inserted {len(records)} rows")
        return len(records)

    def delete_by_sources(self, sources: list[str]) -> int:
        wanted = set(sources)
        with self._lock:
            before = len(self._rows)
            self._rows = [r for r in self._rows if r.metadata.source not in wanted]
            return before - len(self._rows)

    def delete_by_prefix(self, prefix: str) -> int:
        if not prefix:
            raise ValueError("prefix must be a non-empty string")
        with self._lock:
            before = len(self._rows)
            self._rows = [r for r in self._rows if not r.metadata.source.startswith(prefix)]
            return before - len(self._rows)

    def drop(self) -> None:
        with self._lock:
            self._rows = []
            self._dimension = None
            self._exists = False

    def truncate(self) -> None:
        # Truncation keeps the column type, so D survives.
        with self._lock:
            self._rows = []

    def query_top_k(
        self,
        vector: list[float],
        k: int,
        source_prefix: str | None = None,
    ) -> list[VectorSearchResult]:
        query = np.asarray(vector, dtype=np.float32)
        with self._lock:
            candidates = [r for r in self._rows if self._matches(r, source_prefix)]

        scored = [
            (self._cosine_similarity(query, np.asarray(r.embedding, dtype=np.float32)), r)
            for r in candidates
        ]
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [
            VectorSearchResult(
                content=r.content,
                metadata=r.metadata.model_copy(),
                similarity_score=score,
            )
            for score, r in scored[:k]
        ]

    def scan_all(
        self,
        source_prefix: str | None = None,
        limit: int = MAX_SCAN_ROWS,
    ) -> list[VectorSearchResult]:
        cap = effective_scan_limit(limit, self._max_scan_rows)
        with self._lock:
            rows = [r for r in self._rows if self._matches(r, source_prefix)][:cap]
        return [
            VectorSearchResult(content=r.content, metadata=r.metadata.model_copy())
            for r in rows
        ]

    def stats(self, source_prefix: str | None = None) -> IndexStats:
        if not self._exists:
            return IndexStats(table_exists=False)
        with self._lock:
            rows = [r for r in self._rows if self._matches(r, source_prefix)]
        sources = sorted({r.metadata.source for r in rows})
        timestamps = [r.metadata.indexed_at for r in rows if r.metadata.indexed_at]
        return IndexStats(
            table_exists=True,
            total_chunks=len(rows),
            total_files=len(sources),
            embedding_dimension=self._dimension,
            last_indexed_at=max(timestamps) if timestamps else None,
            sample_sources=sources[:10],
        )

    @staticmethod
    def _matches(row: ChunkRecord, source_prefix: str | None) -> bool:
        return not source_prefix or row.metadata.source.startswith(source_prefix)

    @staticmethod
    def _cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
        """Compute cosine similarity between two vectors."""
        norm_a = np.linalg.norm(a)
        norm_b = np.linalg.norm(b)
        if norm_a == 0 or norm_b == 0:
            return 0.0
        return float(np.dot(a, b) / (norm_a * norm_b))
