"""Fixtures for application service tests."""

import pytest
from langchain_core.language_models import FakeListChatModel

from knowledge_index.application.services import (
    AnswerGenerator,
    IndexService,
    SearchService,
)


@pytest.fixture
def index_service(memory_store, synchronizer) -> IndexService:
    return IndexService(memory_store, synchronizer)


@pytest.fixture
def generator_calls() -> list[int]:
    """Counts how often the answer generator factory ran."""
    return []


@pytest.fixture
def search_service(retriever, generator_calls) -> SearchService:
    def factory() -> AnswerGenerator:
        generator_calls.append(1)
        return AnswerGenerator(FakeListChatModel(responses=["the answer"]))

    return SearchService(retriever, factory)
