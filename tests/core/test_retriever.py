"""Tests for retrieval, tenant filtering and the context cap."""

from unittest.mock import MagicMock

import pytest

from knowledge_index.boundary.vdb import ChunkMetadata, VectorSearchResult
from knowledge_index.core.exceptions import EmbeddingDimensionMismatch, EmptyEmbeddingResult
from knowledge_index.core.indexing import EmbeddingTask, SourceDocument
from knowledge_index.core.retrieval import Retriever, collect_sources


class TestRetrieverValidation:
    @pytest.mark.parametrize("top_k,cap", [(0, 10), (5, 0), (-1, 200)])
    def test_invalid_limits_raise(self, retriever, top_k: int, cap: int) -> None:
        with pytest.raises(ValueError):
            retriever.retrieve("q", top_k=top_k, max_context_chunks=cap)


class TestSimilarityRetrieval:
    """Test ranked retrieval through the resolved query model."""

    def test_empty_index_returns_empty_result(self, retriever, fake_provider) -> None:
        result = retriever.retrieve("anything")

        assert result.chunks == []
        assert result.total_retrieved == 0
        assert result.truncated is False
        assert fake_provider.query_calls == []

    def test_exact_text_ranks_first(self, synchronizer, retriever) -> None:
        synchronizer.sync([
            SourceDocument(name="a.txt", content="apples and pears"),
            SourceDocument(name="b.txt", content="bicycles"),
        ])

        result = retriever.retrieve("apples and pears", top_k=2)

        assert result.chunks[0].source == "a.txt"
        assert result.chunks[0].similarity_score == pytest.approx(1.0)
        assert result.embedding_model == "fake-embed-8"
        assert result.total_retrieved == 2

    def test_top_k_limits_results(self, synchronizer, retriever) -> None:
        synchronizer.sync([SourceDocument(name=f"{i}.txt", content=f"doc {i}") for i in range(6)])
        assert len(retriever.retrieve("doc", top_k=3).chunks) == 3

    def test_query_uses_model_matching_table(self, memory_store, make_record, retriever) -> None:
        memory_store.insert_chunks([make_record("wide.txt", dimension=16)])

        result = retriever.retrieve("q")

        assert result.embedding_model == "fake-embed-16"
        assert [s.path for s in result.sources] == ["wide.txt"]

    def test_no_compatible_query_model(self, memory_store, make_record, retriever) -> None:
        memory_store.insert_chunks([make_record("odd.txt", dimension=5)])
        with pytest.raises(EmbeddingDimensionMismatch):
            retriever.retrieve("q")

    def test_empty_query_vector_raises(self, synchronizer, retriever) -> None:
        synchronizer.sync([SourceDocument(name="a.txt", content="text")])
        with pytest.raises(EmptyEmbeddingResult):
            retriever.retrieve("NOVEC")


class TestTenantIsolation:
    def test_prefix_filters_sources(self, synchronizer, retriever) -> None:
        """Should only return the first tenant's document."""
        synchronizer.sync([
            SourceDocument(name="t1:a.csv", content="id,value\n1,10"),
            SourceDocument(name="t2:a.csv", content="id,value\n1,10"),
        ])

        similar = retriever.retrieve("id,value", top_k=10, tenant_prefix="t1:")
        scanned = retriever.retrieve("", use_full_scan=True, tenant_prefix="t1:")

        assert [s.path for s in similar.sources] == ["t1:a.csv"]
        assert [s.path for s in scanned.sources] == ["t1:a.csv"]

    def test_post_filter_applied_to_store_results(self, fake_provider, resolver) -> None:
        """Rows outside the prefix are dropped even if the store returns them."""
        leaky = MagicMock()
        leaky.get_dimension.return_value = 8
        leaky.query_top_k.return_value = [
            _result("t2:x"), _result("t1:y"),
        ]
        retriever = Retriever(leaky, resolver, lambda m: _embedder(fake_provider, m))

        result = retriever.retrieve("q", tenant_prefix="t1:")

        assert [c.source for c in result.chunks] == ["t1:y"]
        assert result.total_retrieved == 1


class TestContextCap:
    """Test the bounded context window."""

    def test_500_capped_to_200(self, memory_store, make_record, retriever) -> None:
        memory_store.insert_chunks(
            [make_record(f"s{i % 25}.txt", content=f"c{i}", file_size=10) for i in range(500)]
        )

        result = retriever.retrieve("", use_full_scan=True, max_context_chunks=200)

        assert len(result.chunks) == 200
        assert result.total_retrieved == 500
        assert result.truncated is True
        assert len(result.sources) == 25

    def test_50_not_truncated(self, memory_store, make_record, retriever) -> None:
        memory_store.insert_chunks([make_record("s.txt", content=f"c{i}") for i in range(50)])

        result = retriever.retrieve("", use_full_scan=True, max_context_chunks=200)

        assert len(result.chunks) == 50
        assert result.truncated is False

    def test_similarity_mode_cap(self, memory_store, make_record, retriever) -> None:
        memory_store.insert_chunks([make_record("s.txt", content=f"c{i}") for i in range(500)])

        result = retriever.retrieve("q", top_k=500, max_context_chunks=200)

        assert len(result.chunks) == 200
        assert result.truncated is True

    def test_full_scan_does_not_embed(self, memory_store, make_record, retriever, fake_provider) -> None:
        memory_store.insert_chunks([make_record("s.txt")])
        retriever.retrieve("q", use_full_scan=True)
        assert fake_provider.query_calls == []


class TestCollectSources:
    def test_first_seen_order_and_metadata(self) -> None:
        results = [
            _result("b", line_count=2, file_size=20),
            _result("a", line_count=1, file_size=10),
            _result("b", line_count=99, file_size=99),
        ]

        sources = collect_sources(results)

        assert [(s.path, s.line_count, s.file_size) for s in sources] == [
            ("b", 2, 20),
            ("a", 1, 10),
        ]

    def test_totals(self, synchronizer, retriever) -> None:
        synchronizer.sync([
            SourceDocument(name="a.txt", content="one\ntwo"),
            SourceDocument(name="b.txt", content="three"),
        ])

        result = retriever.retrieve("", use_full_scan=True)

        assert result.total_lines == 3
        assert result.total_bytes == len("one\ntwo") + len("three")


def _result(source: str, **metadata) -> VectorSearchResult:
    return VectorSearchResult(content="x", metadata=ChunkMetadata(source=source, **metadata))


def _embedder(provider, model: str) -> EmbeddingTask:
    return EmbeddingTask(provider, model)
