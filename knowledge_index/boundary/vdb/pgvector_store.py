"""
PostgreSQL + pgvector store.

One row per chunk in a single table (id, content, metadata jsonb, embedding vector(D)).
The table is created lazily on first insert, which is what fixes D.
Tenant isolation relies on the metadata source prefix only.

Dependencies: sqlalchemy, pgvector, knowledge_index.boundary.vdb
System role: Production vector store adapter
"""

import logging
import re
import uuid
from typing import Any

from pgvector.sqlalchemy import Vector
from sqlalchemy import Column, MetaData, Table, Text, func, select, text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from knowledge_index.boundary.vdb.base_vector_store import (
    MAX_SCAN_ROWS,
    effective_scan_limit,
    escape_like,
)
from knowledge_index.boundary.vdb.vector_schemas import (
    ChunkMetadata,
    ChunkRecord,
    IndexStats,
    VectorSearchResult,
)
from knowledge_index.core.exceptions import EmbeddingDimensionMismatch, VectorStoreError

logger = logging.getLogger(__name__)

_VECTOR_TYPE_RE = re.compile(r"vector\((\d+)\)")

_DIMENSION_SQL = text(
    """
    SELECT format_type(a.atttypid, a.atttypmod) AS type
    FROM pg_attribute a
    WHERE a.attrelid = to_regclass(:table_name)
      AND a.attname = 'embedding'
      AND a.attnum > 0
      AND NOT a.attisdropped
    """
)


class PGVectorStore:
    """
    pgvector-backed chunk table.

    All read operations treat a missing table as an empty index.
    """

    def __init__(
        self,
        engine: Engine,
        table_name: str = "file_index",
        max_scan_rows: int = MAX_SCAN_ROWS,
    ) -> None:
        """
        Initialize the store.

        Args:
            engine: SQLAlchemy engine bound to PostgreSQL
            table_name: Name of the chunk table
            max_scan_rows: Hard cap for full-scan reads
        """
        self._engine = engine
        self._table_name = table_name
        self._max_scan_rows = max_scan_rows

    def _table(self, dimension: int | None = None) -> Table:
        return Table(
            self._table_name,
            MetaData(),
            Column("id", UUID(as_uuid=True), primary_key=True),
            Column("content", Text),
            Column("metadata", JSONB),
            Column("embedding", Vector(dimension)),
        )

    @staticmethod
    def _source_column(table: Table):
        return table.c["metadata"]["source"].astext

    def _prefix_clause(self, table: Table, prefix: str):
        return self._source_column(table).like(escape_like(prefix) + "%", escape="\\")

    # Introspection

    def table_exists(self) -> bool:
        try:
            with self._engine.connect() as conn:
                reg = conn.execute(
                    text("SELECT to_regclass(:table_name) AS reg"),
                    {"table_name": self._table_name},
                ).scalar()
            return reg is not None
        except SQLAlchemyError as e:
            raise VectorStoreError(
                f"Failed to check index table: {e}", operation="table_exists"
            ) from e

    def get_dimension(self) -> int | None:
        """Read D from the embedding column type, e.g. 'vector(768)'."""
        try:
            with self._engine.connect() as conn:
                type_name = conn.execute(
                    _DIMENSION_SQL, {"table_name": self._table_name}
                ).scalar()
        except SQLAlchemyError as e:
            raise VectorStoreError(
                f"Failed to read embedding dimension: {e}", operation="get_dimension"
            ) from e

        if not type_name:
            return None
        match = _VECTOR_TYPE_RE.search(type_name)
        return int(match.group(1)) if match else None

    def has_rows(self, source_prefix: str | None = None) -> bool:
        if not self.table_exists():
            return False
        table = self._table()
        stmt = select(table.c.id).limit(1)
        if source_prefix:
            stmt = stmt.where(self._prefix_clause(table, source_prefix))
        try:
            with self._engine.connect() as conn:
                return conn.execute(stmt).first() is not None
        except SQLAlchemyError as e:
            raise VectorStoreError(
                f"Failed to check for rows: {e}", operation="has_rows"
            ) from e

    def latest_file_hashes(self, sources: list[str]) -> dict[str, str]:
        if not sources or not self.table_exists():
            return {}
        table = self._table()
        source_col = self._source_column(table)
        hash_col = table.c["metadata"]["file_hash"].astext
        stmt = (
            select(source_col.label("source"), func.max(hash_col).label("file_hash"))
            .where(source_col.in_(list(set(sources))))
            .group_by(source_col)
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).all()
        except SQLAlchemyError as e:
            raise VectorStoreError(
                f"Failed to read stored hashes: {e}", operation="latest_file_hashes"
            ) from e
        return {row.source: row.file_hash for row in rows if row.file_hash}

    # Writes

    def insert_chunks(self, records: list[ChunkRecord]) -> int:
        if not records:
            return 0

        width = len(records[0].embedding)
        for record in records:
            if len(record.embedding) != width:
                raise EmbeddingDimensionMismatch(
                    expected_dimension=width,
                    message="Chunk batch mixes vectors of different lengths",
                    details={"actual_dimension": len(record.embedding)},
                )

        existing = self.get_dimension() if self.table_exists() else None
        if existing is not None and existing != width:
            raise EmbeddingDimensionMismatch(
                expected_dimension=existing,
                details={"actual_dimension": width},
            )

        table = self._table(existing or width)
        rows: list[dict[str, Any]] = [
            {
                "id": uuid.uuid4(),
                "content": record.content,
                "metadata": record.metadata.model_dump(exclude_none=True),
                "embedding": record.embedding,
            }
            for record in records
        ]

        try:
            with self._engine.begin() as conn:
                if existing is None:
                    conn.execute(text("CREATE EXTENSION IF NOT EXISTS vector"))
                    table.create(conn, checkfirst=True)
                    logger.info(
                        f"{__name__}:insert_chunks - Created index table",
                        extra={"table": self._table_name, "dimension": width},
                    )
                conn.execute(table.insert(), rows)
        except SQLAlchemyError as e:
            logger.error(
                f"{__name__}:insert_chunks - FAILED: {type(e).__name__}: {e}",
                extra={"row_count": len(rows)},
            )
            raise VectorStoreError(
                f"Failed to insert chunks: {e}",
                operation="insert",
                details={"row_count": len(rows)},
            ) from e

        logger.info(
            f"{__name__}:insert_chunks - Inserted {len(rows)} rows",
            extra={"table": self._table_name},
        )
        return len(rows)

    def delete_by_sources(self, sources: list[str]) -> int:
        if not sources or not self.table_exists():
            return 0
        table = self._table()
        stmt = table.delete().where(self._source_column(table).in_(list(set(sources))))
        return self._execute_delete(stmt, operation="delete_by_sources")

    def delete_by_prefix(self, prefix: str) -> int:
        if not prefix:
            raise ValueError("prefix must be a non-empty string")
        if not self.table_exists():
            return 0
        table = self._table()
        stmt = table.delete().where(self._prefix_clause(table, prefix))
        return self._execute_delete(stmt, operation="delete_by_prefix")

    def _execute_delete(self, stmt, operation: str) -> int:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(stmt)
        except SQLAlchemyError as e:
            raise VectorStoreError(f"Failed to delete chunks: {e}", operation=operation) from e
        deleted = result.rowcount or 0
        logger.info(f"{__name__}:{operation} - Deleted {deleted} rows")
        return deleted

    def drop(self) -> None:
        self._execute_ddl(f'DROP TABLE IF EXISTS "{self._table_name}"', operation="drop")

    def truncate(self) -> None:
        if not self.table_exists():
            return
        self._execute_ddl(f'TRUNCATE TABLE "{self._table_name}"', operation="truncate")

    def _execute_ddl(self, statement: str, operation: str) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(text(statement))
        except SQLAlchemyError as e:
            raise VectorStoreError(f"Failed to {operation} index table: {e}", operation=operation) from e
        logger.info(f"{__name__}:{operation} - {self._table_name} done")

    # Reads

    def query_top_k(
        self,
        vector: list[float],
        k: int,
        source_prefix: str | None = None,
    ) -> list[VectorSearchResult]:
        if not self.table_exists():
            return []
        table = self._table()
        distance = table.c.embedding.cosine_distance(vector)
        stmt = (
            select(table.c.content, table.c["metadata"], distance.label("distance"))
            .order_by(distance)
            .limit(k)
        )
        if source_prefix:
            stmt = stmt.where(self._prefix_clause(table, source_prefix))

        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).all()
        except SQLAlchemyError as e:
            raise VectorStoreError(f"Similarity search failed: {e}", operation="query") from e

        return [
            VectorSearchResult(
                content=row.content,
                metadata=ChunkMetadata.model_validate(row.metadata or {"source": ""}),
                similarity_score=1.0 - float(row.distance),
            )
            for row in rows
        ]

    def scan_all(
        self,
        source_prefix: str | None = None,
        limit: int = MAX_SCAN_ROWS,
    ) -> list[VectorSearchResult]:
        if not self.table_exists():
            return []
        table = self._table()
        stmt = select(table.c.content, table.c["metadata"]).limit(
            effective_scan_limit(limit, self._max_scan_rows)
        )
        if source_prefix:
            stmt = stmt.where(self._prefix_clause(table, source_prefix))

        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).all()
        except SQLAlchemyError as e:
            raise VectorStoreError(f"Full scan failed: {e}", operation="scan") from e

        return [
            VectorSearchResult(
                content=row.content,
                metadata=ChunkMetadata.model_validate(row.metadata or {"source": ""}),
            )
            for row in rows
        ]

    def stats(self, source_prefix: str | None = None) -> IndexStats:
        if not self.table_exists():
            return IndexStats(table_exists=False)

        table = self._table()
        source_col = self._source_column(table)
        indexed_at_col = table.c["metadata"]["indexed_at"].astext

        totals = select(
            func.count().label("chunks"),
            func.count(func.distinct(source_col)).label("files"),
            func.max(indexed_at_col).label("latest"),
        ).select_from(table)
        source_label = source_col.label("source")
        samples = select(source_label).distinct().order_by(source_label).limit(10)
        if source_prefix:
            totals = totals.where(self._prefix_clause(table, source_prefix))
            samples = samples.where(self._prefix_clause(table, source_prefix))

        try:
            with self._engine.connect() as conn:
                row = conn.execute(totals).one()
                sample_sources = [r.source for r in conn.execute(samples)]
        except SQLAlchemyError as e:
            raise VectorStoreError(f"Status query failed: {e}", operation="stats") from e

        return IndexStats(
            table_exists=True,
            total_chunks=row.chunks or 0,
            total_files=row.files or 0,
            embedding_dimension=self.get_dimension(),
            last_indexed_at=row.latest,
            sample_sources=sample_sources,
        )
