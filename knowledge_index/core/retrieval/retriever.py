"""
Retrieval with tenant filtering and a bounded context window.

Serves either a similarity search (query embedded with a model compatible
with the table's dimension) or a full scan of every chunk under a prefix.

Dependencies: knowledge_index.boundary.vdb, knowledge_index.core.indexing
System role: RAG retrieval business logic
"""

import logging
from typing import Callable

from knowledge_index.boundary.vdb import MAX_SCAN_ROWS, VectorSearchResult, VectorStore
from knowledge_index.core.indexing.model_resolver import EmbeddingModelResolver
from knowledge_index.core.indexing.tasks import EmbeddingTask
from knowledge_index.core.retrieval.retrieval_result import RetrievalResult, SourceInfo

logger = logging.getLogger(__name__)


class Retriever:
    """Retrieval business logic."""

    def __init__(
        self,
        store: VectorStore,
        resolver: EmbeddingModelResolver,
        embedder_factory: Callable[[str], EmbeddingTask],
        preferred_model: str | None = None,
    ) -> None:
        self._store = store
        self._resolver = resolver
        self._embedder_factory = embedder_factory
        self._preferred_model = preferred_model

    def retrieve(
        self,
        query: str,
        top_k: int = 5,
        tenant_prefix: str | None = None,
        use_full_scan: bool = False,
        max_context_chunks: int = 200,
    ) -> RetrievalResult:
        """
        Retrieve chunks for a query.

        Args:
            query: Natural-language query (unused for full scans)
            top_k: Nearest chunks to fetch in similarity mode
            tenant_prefix: Only chunks whose source starts with this are returned
            use_full_scan: Return every chunk under the prefix instead of ranking
            max_context_chunks: Cap on chunks kept for the context window

        Returns:
            RetrievalResult: Capped chunks, distinct sources and counters

        Raises:
            ValueError: top_k or max_context_chunks below 1
            EmbeddingDimensionMismatch: No query model matches the table
            EmptyEmbeddingResult: The query embedding came back empty
        """
        if top_k < 1:
            raise ValueError("top_k must be at least 1")
        if max_context_chunks < 1:
            raise ValueError("max_context_chunks must be at least 1")

        model_name: str | None = None
        if use_full_scan:
            retrieved = self._store.scan_all(tenant_prefix, MAX_SCAN_ROWS)
        else:
            dimension = self._store.get_dimension()
            if dimension is None:
                logger.info(f"{__name__}:retrieve - Index is empty")
                return RetrievalResult()

            resolved = self._resolver.resolve(dimension, self._preferred_model)
            model_name = resolved.name
            vector = self._embedder_factory(resolved.name).embed_query(query)
            retrieved = self._store.query_top_k(vector, top_k, tenant_prefix)

        if tenant_prefix:
            retrieved = [r for r in retrieved if r.source.startswith(tenant_prefix)]

        result = RetrievalResult(
            chunks=retrieved[:max_context_chunks],
            sources=collect_sources(retrieved),
            truncated=len(retrieved) > max_context_chunks,
            total_retrieved=len(retrieved),
            embedding_model=model_name,
        )
        logger.info(
            f"{__name__}:retrieve - Retrieved {result.total_retrieved} chunks",
            extra={
                "mode": "full_scan" if use_full_scan else "similarity",
                "sources": len(result.sources),
                "truncated": result.truncated,
            },
        )
        return result


def collect_sources(results: list[VectorSearchResult]) -> list[SourceInfo]:
    """Distinct sources in first-seen order, facts taken from the first chunk."""
    seen: dict[str, SourceInfo] = {}
    for r in results:
        if r.source not in seen:
            seen[r.source] = SourceInfo(
                path=r.source,
                line_count=r.metadata.line_count,
                file_size=r.metadata.file_size,
            )
    return list(seen.values())
