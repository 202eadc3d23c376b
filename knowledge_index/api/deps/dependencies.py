"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: knowledge_index.configs, knowledge_index.application, knowledge_index.boundary
System role: DI container for service injection
"""

from typing import Callable

from fastapi import Depends

from knowledge_index.application.services import (
    AnswerGenerator,
    IndexService,
    SearchService,
    create_gemini_answer_generator,
)
from knowledge_index.boundary.embeddings import EmbeddingProvider, ModelCatalog
from knowledge_index.boundary.vdb import VectorStore
from knowledge_index.configs import Settings, get_settings
from knowledge_index.core.indexing import (
    ChunkingTask,
    DimensionCache,
    EmbeddingModelResolver,
    EmbeddingTask,
    IndexSynchronizer,
)
from knowledge_index.core.retrieval import Retriever


class ServiceCache:
    """
    Container for cached service instances.

    Components are built lazily on first access, so a missing API key or
    database URL surfaces as ConfigurationError on the first request that
    needs it. Any component can be supplied up front instead.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        vector_store: VectorStore | None = None,
        embedding_provider: EmbeddingProvider | None = None,
        model_catalog: ModelCatalog | None = None,
        answer_generator_factory: Callable[[], AnswerGenerator] | None = None,
    ) -> None:
        self._settings = settings
        self._vector_store = vector_store
        self._embedding_provider = embedding_provider
        self._model_catalog = model_catalog
        self._answer_generator_factory = answer_generator_factory
        self._dimension_cache = DimensionCache()
        self._resolver = None
        self._index_service = None
        self._search_service = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def vector_store(self) -> VectorStore:
        """Get cached vector store."""
        if self._vector_store is None:
            from knowledge_index.boundary.vdb.vector_store_factory import get_vector_store
            self._vector_store = get_vector_store(self.settings)
        return self._vector_store

    @property
    def embedding_provider(self) -> EmbeddingProvider:
        """Get cached embedding provider."""
        if self._embedding_provider is None:
            from knowledge_index.boundary.embeddings.gemini_provider import (
                GeminiEmbeddingProvider,
            )
            embedding = self.settings.embedding
            self._embedding_provider = GeminiEmbeddingProvider(
                google_api_key=embedding.google_api_key,
                output_dimensionality=embedding.output_dimensionality,
                batch_size=embedding.batch_size,
            )
        return self._embedding_provider

    @property
    def model_catalog(self) -> ModelCatalog:
        """Get cached model catalog."""
        if self._model_catalog is None:
            from knowledge_index.boundary.embeddings.gemini_provider import GeminiModelCatalog
            self._model_catalog = GeminiModelCatalog(self.settings.embedding.google_api_key)
        return self._model_catalog

    @property
    def dimension_cache(self) -> DimensionCache:
        return self._dimension_cache

    @property
    def resolver(self) -> EmbeddingModelResolver:
        """Get cached embedding model resolver (shares one DimensionCache)."""
        if self._resolver is None:
            self._resolver = EmbeddingModelResolver(
                catalog=self.model_catalog,
                provider=self.embedding_provider,
                cache=self._dimension_cache,
                default_model=self.settings.embedding.model,
            )
        return self._resolver

    def embedder_factory(self, model_name: str) -> EmbeddingTask:
        return EmbeddingTask(self.embedding_provider, model_name)

    @property
    def index_service(self) -> IndexService:
        """Get cached index service."""
        if self._index_service is None:
            indexing = self.settings.indexing
            synchronizer = IndexSynchronizer(
                store=self.vector_store,
                resolver=self.resolver,
                chunker=ChunkingTask(
                    chunk_size=indexing.chunk_size,
                    chunk_overlap=indexing.chunk_overlap,
                    separators=indexing.separators,
                ),
                embedder_factory=self.embedder_factory,
                preferred_model=self.settings.embedding.model,
                hash_algorithm=indexing.hash_algorithm,
            )
            self._index_service = IndexService(self.vector_store, synchronizer)
        return self._index_service

    @property
    def search_service(self) -> SearchService:
        """Get cached search service."""
        if self._search_service is None:
            retriever = Retriever(
                store=self.vector_store,
                resolver=self.resolver,
                embedder_factory=self.embedder_factory,
                preferred_model=self.settings.embedding.model,
            )
            factory = self._answer_generator_factory or (
                lambda: create_gemini_answer_generator(self.settings.generation)
            )
            self._search_service = SearchService(
                retriever,
                factory,
                default_top_k=self.settings.retrieval.top_k,
                default_max_context_chunks=self.settings.retrieval.max_context_chunks,
            )
        return self._search_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._vector_store = None
        self._embedding_provider = None
        self._model_catalog = None
        self._dimension_cache = DimensionCache()
        self._resolver = None
        self._index_service = None
        self._search_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_vector_store_dependency(
    cache: ServiceCache = Depends(get_service_cache),
) -> VectorStore:
    """Get the cached vector store; building it may raise ConfigurationError."""
    return cache.vector_store


def get_index_service(cache: ServiceCache = Depends(get_service_cache)) -> IndexService:
    """
    Get index service instance.

    Returns:
        IndexService: Index service bound to the cached vector store and resolver
    """
    return cache.index_service


def get_search_service(cache: ServiceCache = Depends(get_service_cache)) -> SearchService:
    """
    Get search service instance.

    Returns:
        SearchService: Search service bound to the cached retriever
    """
    return cache.search_service
