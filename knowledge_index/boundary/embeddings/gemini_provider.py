"""
Gemini embedding provider and model catalog.

Embeddings go through langchain's GoogleGenerativeAIEmbeddings (one client per
model name); the model catalog is read with the google-genai client.

Dependencies: langchain_google_genai, google.genai
System role: Embedding provider adapter
"""

import logging
import threading
from typing import Any

from google import genai
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from knowledge_index.core.exceptions import ConfigurationError, EmbeddingError

logger = logging.getLogger(__name__)

EMBED_ACTIONS = {"embedContent", "batchEmbedContents"}


class GeminiEmbeddingProvider:
    """
    Gemini embeddings keyed by model name.

    When output_dimensionality is set it is passed on every call, so a given
    model name always yields one fixed width.
    """

    def __init__(
        self,
        google_api_key: str | None,
        output_dimensionality: int | None = None,
        batch_size: int = 100,
    ) -> None:
        """
        Initialize the provider.

        Args:
            google_api_key: Google API key
            output_dimensionality: Optional fixed output width
            batch_size: Texts per provider request

        Raises:
            ConfigurationError: When the API key is missing
        """
        if not google_api_key:
            raise ConfigurationError("Missing GOOGLE_API_KEY.", setting="GOOGLE_API_KEY")
        self._api_key = google_api_key
        self._output_dimensionality = output_dimensionality
        self._batch_size = batch_size
        self._clients: dict[str, GoogleGenerativeAIEmbeddings] = {}
        self._lock = threading.Lock()

    def _client(self, model: str) -> GoogleGenerativeAIEmbeddings:
        with self._lock:
            client = self._clients.get(model)
            if client is None:
                logger.info(f"{__name__}:_client - Creating embeddings client for {model}")
                client = GoogleGenerativeAIEmbeddings(model=model, google_api_key=self._api_key)
                self._clients[model] = client
            return client

    def _dimension_kwargs(self) -> dict[str, Any]:
        if self._output_dimensionality:
            return {"output_dimensionality": self._output_dimensionality}
        return {}

    def embed_documents(self, model: str, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        try:
            vectors = self._client(model).embed_documents(
                texts,
                batch_size=self._batch_size,
                **self._dimension_kwargs(),
            )
        except Exception as e:
            raise EmbeddingError(
                f"Failed to generate embeddings: {e}",
                details={"model": model, "text_count": len(texts)},
            ) from e
        return [list(v) if v is not None else [] for v in vectors]

    def embed_query(self, model: str, text: str) -> list[float]:
        try:
            vector = self._client(model).embed_query(text, **self._dimension_kwargs())
        except Exception as e:
            raise EmbeddingError(
                f"Failed to embed query: {e}", details={"model": model}
            ) from e
        return list(vector or [])


class GeminiModelCatalog:
    """Live list of Gemini models that support embedContent."""

    def __init__(self, google_api_key: str | None) -> None:
        if not google_api_key:
            raise ConfigurationError("Missing GOOGLE_API_KEY.", setting="GOOGLE_API_KEY")
        self._client = genai.Client(api_key=google_api_key)

    def list_embedding_models(self) -> list[str]:
        try:
            models = list(self._client.models.list())
        except Exception as e:
            raise EmbeddingError(f"Failed to list embedding models: {e}") from e

        names = [
            m.name
            for m in models
            if m.name and EMBED_ACTIONS.intersection(m.supported_actions or [])
        ]
        logger.info(
            f"{__name__}:list_embedding_models - {len(names)} embedding models available"
        )
        return names
