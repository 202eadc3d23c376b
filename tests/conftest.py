"""
Shared test fixtures and configuration for entire test suite.

Provides: fake embedding provider, static model catalog, in-memory vector store,
wired indexing/retrieval components
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import hashlib
from collections.abc import Callable

import pytest

from knowledge_index.boundary.embeddings import StaticModelCatalog
from knowledge_index.boundary.vdb import ChunkMetadata, ChunkRecord, InMemoryVectorStore
from knowledge_index.core.indexing import (
    ChunkingTask,
    DimensionCache,
    EmbeddingModelResolver,
    EmbeddingTask,
    IndexSynchronizer,
)
from knowledge_index.core.retrieval import Retriever

DEFAULT_MODEL = "fake-embed-8"
NO_VECTOR_MARKER = "NOVEC"
FAILURE_MARKER = "EXPLODE"


class FakeEmbeddingProvider:
    """
    Deterministic embedding provider.

    Vectors are derived from sha256(model|text), so equal texts embed equally.
    Texts containing NO_VECTOR_MARKER get an empty vector; texts containing
    FAILURE_MARKER make the whole call raise.
    """

    def __init__(
        self,
        dimensions: dict[str, int] | None = None,
        failing_models: set[str] | None = None,
    ) -> None:
        self.dimensions = dict(dimensions or {DEFAULT_MODEL: 8})
        self.failing_models = set(failing_models or ())
        self.document_calls: list[tuple[str, int]] = []
        self.query_calls: list[tuple[str, str]] = []

    def _vector(self, model: str, text: str) -> list[float]:
        digest = hashlib.sha256(f"{model}|{text}".encode("utf-8")).digest()
        dimension = self.dimensions[model]
        return [(digest[i % len(digest)] + 1) / 256.0 for i in range(dimension)]

    def _check(self, model: str, texts: list[str]) -> None:
        if model in self.failing_models or model not in self.dimensions:
            raise RuntimeError(f"model {model} unavailable")
        if any(FAILURE_MARKER in t for t in texts):
            raise RuntimeError("provider rejected the batch")

    def embed_documents(self, model: str, texts: list[str]) -> list[list[float]]:
        self.document_calls.append((model, len(texts)))
        self._check(model, texts)
        return [[] if NO_VECTOR_MARKER in t else self._vector(model, t) for t in texts]

    def embed_query(self, model: str, text: str) -> list[float]:
        self.query_calls.append((model, text))
        self._check(model, [text])
        if NO_VECTOR_MARKER in text:
            return []
        return self._vector(model, text)


@pytest.fixture
def make_provider() -> type[FakeEmbeddingProvider]:
    return FakeEmbeddingProvider


@pytest.fixture
def fake_provider() -> FakeEmbeddingProvider:
    """Provide fake provider with an 8-d and a 16-d model."""
    return FakeEmbeddingProvider(dimensions={DEFAULT_MODEL: 8, "fake-embed-16": 16})


@pytest.fixture
def model_catalog() -> StaticModelCatalog:
    return StaticModelCatalog([DEFAULT_MODEL, "fake-embed-16"])


@pytest.fixture
def memory_store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture
def dimension_cache() -> DimensionCache:
    return DimensionCache()


@pytest.fixture
def resolver(model_catalog, fake_provider, dimension_cache) -> EmbeddingModelResolver:
    return EmbeddingModelResolver(
        catalog=model_catalog,
        provider=fake_provider,
        cache=dimension_cache,
        default_model=DEFAULT_MODEL,
    )


@pytest.fixture
def embedder_factory(fake_provider) -> Callable[[str], EmbeddingTask]:
    return lambda model_name: EmbeddingTask(fake_provider, model_name)


@pytest.fixture
def chunker() -> ChunkingTask:
    return ChunkingTask(chunk_size=200, chunk_overlap=20)


@pytest.fixture
def synchronizer(memory_store, resolver, chunker, embedder_factory) -> IndexSynchronizer:
    """Provide synchronizer wired to the in-memory store and fake provider."""
    return IndexSynchronizer(
        store=memory_store,
        resolver=resolver,
        chunker=chunker,
        embedder_factory=embedder_factory,
        preferred_model=DEFAULT_MODEL,
    )


@pytest.fixture
def retriever(memory_store, resolver, embedder_factory) -> Retriever:
    return Retriever(
        store=memory_store,
        resolver=resolver,
        embedder_factory=embedder_factory,
        preferred_model=DEFAULT_MODEL,
    )


@pytest.fixture
def make_record() -> Callable[..., ChunkRecord]:
    """Factory for chunk rows written straight into a store."""

    def _make(
        source: str,
        content: str = "chunk",
        dimension: int = 8,
        value: float = 1.0,
        **metadata,
    ) -> ChunkRecord:
        return ChunkRecord(
            content=content,
            embedding=[value] * dimension,
            metadata=ChunkMetadata(source=source, **metadata),
        )

    return _make
