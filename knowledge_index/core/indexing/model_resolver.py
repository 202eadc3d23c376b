"""Embedding model resolution against the index table's fixed vector width.

The table's dimension D is fixed by the first row ever written. Before a
request embeds anything, the resolver picks a model whose output width equals
D, probing candidate models once and memoizing their widths.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable

from knowledge_index.boundary.embeddings import EmbeddingProvider, ModelCatalog
from knowledge_index.core.exceptions import EmbeddingDimensionMismatch

logger = logging.getLogger(__name__)

PROBE_TEXT = "dimension probe"


@dataclass(frozen=True)
class ResolvedModel:
    """Model chosen for one request.

    Attributes:
        name: Provider model name.
        dimension: Probed output width, or None when the table is empty and
            no probe was needed.
    """

    name: str
    dimension: int | None = None


class DimensionCache:
    """Thread-safe, append-only map of model name -> output dimension.

    Entries are never invalidated: a provider model name is assumed to keep
    its output width for the lifetime of the process.
    """

    def __init__(self) -> None:
        self._dimensions: dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, model: str) -> int | None:
        with self._lock:
            return self._dimensions.get(model)

    def get_or_compute(self, model: str, compute: Callable[[], int]) -> int:
        """Return the cached dimension, computing and storing it on a miss.

        compute runs outside the lock so a slow probe does not block readers
        of other models. Concurrent misses for the same model may both probe;
        the first stored value wins.

        Args:
            model: Model name.
            compute: Zero-argument callable returning the dimension.

        Returns:
            The model's output dimension.
        """
        cached = self.get(model)
        if cached is not None:
            return cached

        dimension = compute()
        with self._lock:
            return self._dimensions.setdefault(model, dimension)

    def __len__(self) -> int:
        with self._lock:
            return len(self._dimensions)


def _normalize_model_name(name: str) -> str:
    return name[len("models/"):] if name.startswith("models/") else name


class EmbeddingModelResolver:
    """Discovers an embedding model compatible with the table's dimension."""

    def __init__(
        self,
        catalog: ModelCatalog,
        provider: EmbeddingProvider,
        cache: DimensionCache | None = None,
        default_model: str = "models/gemini-embedding-001",
    ) -> None:
        self._catalog = catalog
        self._provider = provider
        self._cache = cache if cache is not None else DimensionCache()
        self._default_model = default_model

    @property
    def cache(self) -> DimensionCache:
        return self._cache

    def resolve(
        self,
        target_dimension: int | None,
        preferred_model: str | None = None,
    ) -> ResolvedModel:
        """Pick the embedding model for a request.

        Args:
            target_dimension: D read from the table, or None for an empty table.
            preferred_model: Model to try first (falls back to the default model).

        Returns:
            ResolvedModel for the first candidate whose width equals D.

        Raises:
            EmbeddingDimensionMismatch: If no candidate produces D-wide vectors.
            EmbeddingError: If the catalog cannot be listed.
        """
        preferred = preferred_model or self._default_model

        if target_dimension is None:
            logger.info(
                f"{__name__}:resolve - Empty index, using {preferred} without validation"
            )
            return ResolvedModel(name=preferred, dimension=self._cache.get(preferred))

        candidates = self._candidates(preferred, self._catalog.list_embedding_models())
        probed: dict[str, int | None] = {}

        for model in candidates:
            dimension = self._probe(model)
            probed[model] = dimension
            if dimension == target_dimension:
                if model != preferred:
                    logger.warning(
                        f"{__name__}:resolve - {preferred} is incompatible with "
                        f"dimension {target_dimension}, using {model}",
                    )
                return ResolvedModel(name=model, dimension=dimension)

        logger.error(
            f"{__name__}:resolve - No model matches dimension {target_dimension}",
            extra={"probed": probed},
        )
        raise EmbeddingDimensionMismatch(
            expected_dimension=target_dimension,
            details={"probed_dimensions": probed},
        )

    @staticmethod
    def _candidates(preferred: str, catalog: list[str]) -> list[str]:
        ordered: list[str] = []
        seen: set[str] = set()
        for name in [preferred, *catalog]:
            key = _normalize_model_name(name)
            if name and key not in seen:
                seen.add(key)
                ordered.append(name)
        return ordered

    def _probe(self, model: str) -> int | None:
        """Return the model's output width, or None if it cannot be probed."""

        def compute() -> int:
            vector = self._provider.embed_query(model, PROBE_TEXT)
            if vector is None or len(vector) == 0:
                raise ValueError("empty probe vector")
            return len(vector)

        try:
            return self._cache.get_or_compute(model, compute)
        except Exception as exc:
            logger.warning(
                f"{__name__}:_probe - Skipping {model}: {type(exc).__name__}: {exc}"
            )
            return None
