"""
Embedding provider boundary layer.

Exports the provider/catalog protocols and the in-memory catalog.
Gemini implementations are imported lazily by the dependency container.
"""

from knowledge_index.boundary.embeddings.base import (
    EmbeddingProvider,
    ModelCatalog,
    StaticModelCatalog,
)

__all__ = ["EmbeddingProvider", "ModelCatalog", "StaticModelCatalog"]
