"""Tests for SearchService orchestration."""

import pytest

from knowledge_index.application.services import SearchService
from knowledge_index.core.exceptions import InvalidRequestError
from knowledge_index.core.indexing import SourceDocument


@pytest.fixture
def indexed(synchronizer):
    synchronizer.sync([
        SourceDocument(name="t1:notes.txt", content="line one\nline two"),
        SourceDocument(name="t2:other.txt", content="someone else's data"),
    ])


class TestSearchValidation:
    @pytest.mark.parametrize("query", ["", "  "])
    def test_missing_query(self, search_service, query) -> None:
        with pytest.raises(InvalidRequestError, match="Missing query."):
            search_service.search(query)

    def test_limits_become_invalid_request(self, search_service) -> None:
        with pytest.raises(InvalidRequestError, match="top_k"):
            search_service.search("q", top_k=0)


class TestSearch:
    def test_analyze_only_skips_generation(self, indexed, search_service, generator_calls) -> None:
        outcome = search_service.search("notes", tenant_prefix="t1:", analyze_only=True)

        assert outcome.text is None
        assert generator_calls == []
        assert [s.path for s in outcome.retrieval.sources] == ["t1:notes.txt"]

    def test_generates_answer(self, indexed, search_service, generator_calls) -> None:
        outcome = search_service.search("notes", tenant_prefix="t1:")

        assert outcome.text == "the answer"
        assert all(c.source.startswith("t1:") for c in outcome.retrieval.chunks)

    def test_generator_built_once(self, indexed, search_service, generator_calls) -> None:
        search_service.search("first")
        search_service.search("second")
        assert len(generator_calls) == 1

    def test_full_scan(self, indexed, search_service) -> None:
        outcome = search_service.search(
            "ignored", use_all_documents=True, tenant_prefix="t2:", analyze_only=True
        )

        assert outcome.retrieval.total_retrieved == 1
        assert outcome.retrieval.embedding_model is None


def test_request_defaults_come_from_service(retriever, synchronizer) -> None:
    synchronizer.sync([SourceDocument(name=f"{i}.txt", content=f"doc {i}") for i in range(4)])
    service = SearchService(retriever, lambda: None, default_top_k=3, default_max_context_chunks=2)

    outcome = service.search("doc", analyze_only=True)

    assert outcome.retrieval.total_retrieved == 3
    assert len(outcome.retrieval.chunks) == 2
    assert outcome.retrieval.truncated is True
