"""
Test suite for dependency injection container.

Tests lazy component construction and caching in ServiceCache.
Verifies IndexService, SearchService and resolver wiring.

System role: Verification of DI container
"""

from unittest.mock import patch

import pytest

from knowledge_index.api.deps import (
    ServiceCache,
    get_index_service,
    get_search_service,
    get_vector_store_dependency,
)
from knowledge_index.application.services import IndexService, SearchService
from knowledge_index.boundary.vdb import InMemoryVectorStore
from knowledge_index.configs import Settings
from knowledge_index.configs.embedding import EmbeddingSettings
from knowledge_index.configs.indexing import IndexingSettings
from knowledge_index.configs.retrieval import GenerationSettings
from knowledge_index.configs.vector_store import VectorStoreSettings
from knowledge_index.core.exceptions import ConfigurationError


@pytest.fixture
def settings() -> Settings:
    """Provide settings selecting the in-memory store and no credentials."""
    return Settings(
        vector_store=VectorStoreSettings(store_type="memory"),
        embedding=EmbeddingSettings(model="fake-embed-8", google_api_key=None),
        indexing=IndexingSettings(chunk_size=300, chunk_overlap=30),
        generation=GenerationSettings(google_api_key=None),
    )


@pytest.fixture
def cache(settings, fake_provider, model_catalog) -> ServiceCache:
    return ServiceCache(
        settings=settings,
        embedding_provider=fake_provider,
        model_catalog=model_catalog,
    )


class TestServiceCache:
    """Test suite for lazily built services."""

    def test_services_are_cached(self, cache: ServiceCache) -> None:
        assert isinstance(cache.index_service, IndexService)
        assert cache.index_service is cache.index_service
        assert isinstance(cache.search_service, SearchService)
        assert cache.search_service is cache.search_service

    def test_store_built_from_settings(self, cache: ServiceCache) -> None:
        assert isinstance(cache.vector_store, InMemoryVectorStore)
        assert cache.index_service.store is cache.vector_store

    def test_indexing_and_search_share_resolver_cache(self, cache: ServiceCache) -> None:
        resolver = cache.resolver

        assert resolver.cache is cache.dimension_cache
        assert cache.search_service.retriever._resolver is resolver
        assert cache.index_service.synchronizer._resolver is resolver

    def test_embedder_factory_uses_provider(self, cache: ServiceCache, fake_provider) -> None:
        embedder = cache.embedder_factory("fake-embed-16")

        assert embedder.model_name == "fake-embed-16"
        assert len(embedder.embed_query("hello")) == 16
        assert fake_provider.query_calls == [("fake-embed-16", "hello")]

    def test_missing_key_raises_on_first_use(self, settings: Settings) -> None:
        cache = ServiceCache(settings=settings)

        with pytest.raises(ConfigurationError):
            _ = cache.embedding_provider
        with pytest.raises(ConfigurationError):
            _ = cache.model_catalog

    def test_gemini_provider_built_with_settings(self) -> None:
        settings = Settings(
            embedding=EmbeddingSettings(
                google_api_key="k", output_dimensionality=256, batch_size=20
            ),
        )
        cache = ServiceCache(settings=settings)

        with patch(
            "knowledge_index.boundary.embeddings.gemini_provider.GeminiEmbeddingProvider"
        ) as provider_cls:
            provider = cache.embedding_provider

        assert provider is provider_cls.return_value
        provider_cls.assert_called_once_with(
            google_api_key="k", output_dimensionality=256, batch_size=20
        )

    def test_clear_drops_components(self, cache: ServiceCache) -> None:
        store = cache.vector_store
        old_dimensions = cache.dimension_cache

        cache.clear()

        assert cache.vector_store is not store
        assert cache.dimension_cache is not old_dimensions
        with pytest.raises(ConfigurationError):
            _ = cache.index_service


class TestDependencyFunctions:
    """Test suite for FastAPI dependency functions."""

    def test_dependencies_read_from_cache(self, cache: ServiceCache) -> None:
        assert get_vector_store_dependency(cache=cache) is cache.vector_store
        assert get_index_service(cache=cache) is cache.index_service
        assert get_search_service(cache=cache) is cache.search_service
