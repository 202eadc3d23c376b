"""
Protocols for embedding providers and model catalogs.

Allows swapping the Gemini-backed implementations for in-memory ones.

Dependencies: typing
System role: Contract between model resolution/embedding and the provider
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Turns text into vectors with a named model."""

    def embed_documents(self, model: str, texts: list[str]) -> list[list[float]]:
        """Return one vector per text; a vector may be empty on provider-side failure."""
        ...

    def embed_query(self, model: str, text: str) -> list[float]:
        ...


@runtime_checkable
class ModelCatalog(Protocol):
    """Lists the provider's embedding-capable models."""

    def list_embedding_models(self) -> list[str]:
        ...


class StaticModelCatalog:
    """Fixed, in-memory model list."""

    def __init__(self, models: list[str] | None = None) -> None:
        self._models = list(models or [])

    def list_embedding_models(self) -> list[str]:
        return list(self._models)
