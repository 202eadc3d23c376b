"""
Incremental index synchronizer.

Keeps the chunk table consistent with a caller-supplied document set:
hash -> partition against stored hashes -> chunk + embed changed documents ->
delete stale rows -> insert new rows.

Dependencies: knowledge_index.boundary.vdb, knowledge_index.core.indexing
System role: Indexing orchestration (coordinates only)
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from knowledge_index.boundary.vdb import ChunkMetadata, ChunkRecord, VectorStore
from knowledge_index.core.exceptions import NoIndexableContent
from knowledge_index.core.indexing.content_hasher import compute_content_hash
from knowledge_index.core.indexing.model_resolver import EmbeddingModelResolver
from knowledge_index.core.indexing.models import IndexReport, SourceDocument
from knowledge_index.core.indexing.models.index_report import (
    SKIP_ALL_CHUNKS_EMPTY,
    SKIP_DUPLICATE_IN_BATCH,
    SKIP_EMPTY_CONTENT,
    SKIP_PROCESSING_ERROR,
    SKIP_UNCHANGED,
)
from knowledge_index.core.indexing.tasks import ChunkingTask, EmbeddingTask

logger = logging.getLogger(__name__)

EmbedderFactory = Callable[[str], EmbeddingTask]


@dataclass
class _PendingDocument:
    document: SourceDocument
    records: list[ChunkRecord]


class IndexSynchronizer:
    """Orchestrate incremental indexing of a document batch."""

    def __init__(
        self,
        store: VectorStore,
        resolver: EmbeddingModelResolver,
        chunker: ChunkingTask,
        embedder_factory: EmbedderFactory,
        preferred_model: str | None = None,
        hash_algorithm: str = "sha256",
    ) -> None:
        """
        Initialize synchronizer with its collaborators.

        Args:
            store: Vector store holding the chunk table
            resolver: Embedding model resolver
            chunker: Chunking task
            embedder_factory: Builds an EmbeddingTask for a resolved model name
            preferred_model: Model tried first during resolution
            hash_algorithm: Content fingerprint algorithm
        """
        self._store = store
        self._resolver = resolver
        self._chunker = chunker
        self._embedder_factory = embedder_factory
        self._preferred_model = preferred_model
        self._hash_algorithm = hash_algorithm

    def sync(
        self,
        documents: list[SourceDocument],
        incremental: bool = True,
    ) -> IndexReport:
        """
        Bring the index up to date with documents.

        Args:
            documents: Documents to index; names are used as sources
            incremental: Skip documents whose stored hash is unchanged

        Returns:
            IndexReport: Counts, skip reasons and the model/dimension used

        Raises:
            EmbeddingDimensionMismatch: No model matches the table's dimension
            NoIndexableContent: Changed documents produced zero usable chunks
            VectorStoreError: Reading, deleting or inserting rows failed
        """
        report = IndexReport(mode="incremental" if incremental else "full")

        candidates = self._candidates(documents, report)
        hashes = {
            doc.name: compute_content_hash(doc.content, self._hash_algorithm)
            for doc in candidates
        }

        changed = candidates
        if incremental and candidates:
            stored = self._store.latest_file_hashes([doc.name for doc in candidates])
            changed = []
            for doc in candidates:
                if stored.get(doc.name) == hashes[doc.name]:
                    report.skip(doc.name, SKIP_UNCHANGED)
                else:
                    changed.append(doc)

        if not changed:
            report.embedding_dimension = self._store.get_dimension()
            logger.info(
                f"{__name__}:sync - Nothing to index",
                extra={"skipped": len(report.skipped_files)},
            )
            return report

        resolved = self._resolver.resolve(self._store.get_dimension(), self._preferred_model)
        embedder = self._embedder_factory(resolved.name)
        report.embedding_model = resolved.name

        indexed_at = datetime.now(timezone.utc).isoformat()
        width = resolved.dimension
        pending: list[_PendingDocument] = []

        for doc in changed:
            try:
                records, width = self._build_records(
                    doc, hashes[doc.name], indexed_at, embedder, width, report
                )
            except Exception as e:
                logger.warning(
                    f"{__name__}:sync - Failed to process {doc.name}: {type(e).__name__}: {e}"
                )
                report.skip(doc.name, f"{SKIP_PROCESSING_ERROR}: {e}")
                continue

            if not records:
                report.skip(doc.name, SKIP_ALL_CHUNKS_EMPTY)
                continue
            pending.append(_PendingDocument(doc, records))

        if not pending:
            raise NoIndexableContent(
                details={"skipped_files": [s.model_dump() for s in report.skipped_files]}
            )

        report.deleted_chunks = self._store.delete_by_sources([p.document.name for p in pending])
        for item in pending:
            report.chunks_count += self._store.insert_chunks(item.records)
            report.files_count += 1

        report.embedding_dimension = self._store.get_dimension() or width
        logger.info(
            f"{__name__}:sync - Indexed {report.files_count} files",
            extra={
                "chunks": report.chunks_count,
                "deleted": report.deleted_chunks,
                "model": resolved.name,
                "dimension": report.embedding_dimension,
            },
        )
        return report

    @staticmethod
    def _candidates(
        documents: list[SourceDocument],
        report: IndexReport,
    ) -> list[SourceDocument]:
        """Drop earlier duplicates and empty documents, keeping input order."""
        last_position = {doc.name: i for i, doc in enumerate(documents)}
        candidates: list[SourceDocument] = []
        for i, doc in enumerate(documents):
            if last_position[doc.name] != i:
                report.skip(doc.name, SKIP_DUPLICATE_IN_BATCH)
            elif not doc.content.strip():
                report.skip(doc.name, SKIP_EMPTY_CONTENT)
            else:
                candidates.append(doc)
        return candidates

    def _build_records(
        self,
        doc: SourceDocument,
        file_hash: str,
        indexed_at: str,
        embedder: EmbeddingTask,
        width: int | None,
        report: IndexReport,
    ) -> tuple[list[ChunkRecord], int | None]:
        """
        Chunk and embed one document.

        Vectors that are empty or differ from the request's width are dropped
        and counted as bad embeddings. Counters are only applied to the report
        once the document has been processed without error.

        Returns:
            Records to write and the request's vector width (set by the first
            usable vector when the table is empty)
        """
        chunking = self._chunker.split(doc.content)
        vectors = embedder.embed(chunking.chunks) if chunking.chunks else []

        metadata = ChunkMetadata(
            source=doc.name,
            file_hash=file_hash,
            indexed_at=indexed_at,
            line_count=doc.line_count,
            file_size=doc.file_size,
        )

        records: list[ChunkRecord] = []
        bad = 0
        for chunk, vector in zip(chunking.chunks, vectors):
            if not vector or (width is not None and len(vector) != width):
                bad += 1
                continue
            width = width or len(vector)
            records.append(ChunkRecord(content=chunk, embedding=vector, metadata=metadata))

        report.skipped_empty_chunks += chunking.skipped_empty
        report.skipped_bad_embeddings += bad
        if bad:
            logger.warning(
                f"{__name__}:_build_records - Dropped {bad} chunks without a usable vector",
                extra={"source": doc.name},
            )
        return records, width
