"""
Embedding generation task.

Calls the resolved embedding model for a batch of chunk texts. Empty vectors
are passed through for the caller to filter; only single-query embedding
treats an empty result as fatal.

Dependencies: knowledge_index.boundary.embeddings
System role: Embedding stage of the indexing pipeline and query embedding
"""

import logging

from knowledge_index.boundary.embeddings import EmbeddingProvider
from knowledge_index.core.exceptions import EmptyEmbeddingResult

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Generate embeddings with one resolved model."""

    def __init__(self, provider: EmbeddingProvider, model_name: str) -> None:
        """
        Initialize embedding task.

        Args:
            provider: Embedding provider
            model_name: Model chosen by the resolver for this request

        Raises:
            ValueError: When model_name is empty
        """
        if not model_name:
            raise ValueError("model_name cannot be empty")
        self._provider = provider
        self.model_name = model_name

    def embed(self, texts: list[str]) -> list[list[float]]:
        """
        Generate embeddings for texts.

        Args:
            texts: Chunk texts

        Returns:
            list[list[float]]: One vector per text, in input order. Missing or
            empty provider results come back as empty lists.
        """
        if not texts:
            return []

        vectors = self._provider.embed_documents(self.model_name, texts)
        if len(vectors) != len(texts):
            logger.warning(
                f"{__name__}:embed - Provider returned {len(vectors)} vectors for {len(texts)} texts",
                extra={"model": self.model_name},
            )

        return [
            list(vectors[i]) if i < len(vectors) and vectors[i] is not None else []
            for i in range(len(texts))
        ]

    def embed_query(self, text: str) -> list[float]:
        """
        Generate embedding for a query.

        Raises:
            EmptyEmbeddingResult: When the provider returns no vector
        """
        vector = self._provider.embed_query(self.model_name, text)
        if vector is None or len(vector) == 0:
            raise EmptyEmbeddingResult(self.model_name)
        return list(vector)
