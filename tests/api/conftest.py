"""API test fixtures: the real app wired to in-memory components."""

import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models import FakeListChatModel

from knowledge_index.api.deps import ServiceCache, get_service_cache
from knowledge_index.api.main import create_app
from knowledge_index.application.services import AnswerGenerator
from knowledge_index.configs import Settings
from knowledge_index.configs.embedding import EmbeddingSettings
from knowledge_index.configs.retrieval import GenerationSettings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        embedding=EmbeddingSettings(model="fake-embed-8", google_api_key=None),
        generation=GenerationSettings(google_api_key=None),
    )


@pytest.fixture
def service_cache(settings, memory_store, fake_provider, model_catalog) -> ServiceCache:
    return ServiceCache(
        settings=settings,
        vector_store=memory_store,
        embedding_provider=fake_provider,
        model_catalog=model_catalog,
        answer_generator_factory=lambda: AnswerGenerator(
            FakeListChatModel(responses=["generated answer"])
        ),
    )


@pytest.fixture
def make_client():
    """Build a TestClient whose service cache is the given one."""

    def _make(cache: ServiceCache) -> TestClient:
        app = create_app()
        app.dependency_overrides[get_service_cache] = lambda: cache
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, service_cache) -> TestClient:
    return make_client(service_cache)


@pytest.fixture
def index_files(client):
    """POST files to /index and return the response."""

    def _index(files: dict[str, str], incremental: bool = True):
        return client.post(
            "/api/v1/index",
            json={
                "files": [{"name": n, "content": c} for n, c in files.items()],
                "incremental": incremental,
            },
        )

    return _index
