"""Tests for the embedding task wrapper."""

from unittest.mock import MagicMock

import pytest

from knowledge_index.core.exceptions import EmptyEmbeddingResult
from knowledge_index.core.indexing import EmbeddingTask


class TestEmbeddingTask:
    """Test batch and query embedding behavior."""

    def test_empty_model_name_raises(self, fake_provider) -> None:
        with pytest.raises(ValueError):
            EmbeddingTask(fake_provider, "")

    def test_embed_one_call_per_batch(self, fake_provider) -> None:
        """Should issue a single provider call for all texts."""
        task = EmbeddingTask(fake_provider, "fake-embed-8")
        vectors = task.embed(["a", "b", "c"])

        assert len(vectors) == 3
        assert all(len(v) == 8 for v in vectors)
        assert fake_provider.document_calls == [("fake-embed-8", 3)]

    def test_embed_no_texts_skips_provider(self, fake_provider) -> None:
        assert EmbeddingTask(fake_provider, "fake-embed-8").embed([]) == []
        assert fake_provider.document_calls == []

    def test_empty_vectors_pass_through(self, fake_provider) -> None:
        vectors = EmbeddingTask(fake_provider, "fake-embed-8").embed(["ok", "NOVEC here"])
        assert len(vectors[0]) == 8
        assert vectors[1] == []

    def test_short_provider_response_padded(self) -> None:
        provider = MagicMock()
        provider.embed_documents.return_value = [[0.1, 0.2]]

        vectors = EmbeddingTask(provider, "m").embed(["a", "b", "c"])

        assert vectors == [[0.1, 0.2], [], []]

    def test_embed_query(self, fake_provider) -> None:
        vector = EmbeddingTask(fake_provider, "fake-embed-16").embed_query("hello")
        assert len(vector) == 16

    def test_empty_query_vector_raises(self, fake_provider) -> None:
        with pytest.raises(EmptyEmbeddingResult) as exc_info:
            EmbeddingTask(fake_provider, "fake-embed-8").embed_query("NOVEC")
        assert exc_info.value.details["model"] == "fake-embed-8"
