"""
Search service for knowledge base queries.

Orchestrates retrieval and, unless only analysis is requested, answer
generation over the capped context window.

Dependencies: knowledge_index.core.retrieval, knowledge_index.application.services
System role: Search service orchestration layer
"""

import logging
from dataclasses import dataclass
from typing import Callable

from knowledge_index.application.services.answer_generator import AnswerGenerator
from knowledge_index.core.exceptions import InvalidRequestError
from knowledge_index.core.retrieval import RetrievalResult, Retriever

logger = logging.getLogger(__name__)


@dataclass
class SearchOutcome:
    """Retrieval result plus the generated answer, if any."""

    retrieval: RetrievalResult
    text: str | None = None


class SearchService:
    """Search service for retrieval-grounded answers."""

    def __init__(
        self,
        retriever: Retriever,
        answer_generator_factory: Callable[[], AnswerGenerator],
        default_top_k: int = 5,
        default_max_context_chunks: int = 200,
    ) -> None:
        """
        Initialize search service.

        Args:
            retriever: Retriever over the chunk table
            answer_generator_factory: Builds the answer generator on first use,
                so analysis-only queries never need generation credentials
            default_top_k: top_k used when a request omits it
            default_max_context_chunks: Context cap used when a request omits it
        """
        self.retriever = retriever
        self._answer_generator_factory = answer_generator_factory
        self.default_top_k = default_top_k
        self.default_max_context_chunks = default_max_context_chunks
        self._answer_generator: AnswerGenerator | None = None

    def _generator(self) -> AnswerGenerator:
        if self._answer_generator is None:
            self._answer_generator = self._answer_generator_factory()
        return self._answer_generator

    def search(
        self,
        query: str,
        top_k: int | None = None,
        tenant_prefix: str | None = None,
        use_all_documents: bool = False,
        max_context_chunks: int | None = None,
        analyze_only: bool = False,
    ) -> SearchOutcome:
        """
        Retrieve context and optionally answer the query.

        Raises:
            InvalidRequestError: Missing query, or top_k/max_context_chunks below 1
            EmbeddingDimensionMismatch: No query model matches the table
            EmptyEmbeddingResult: Query embedding came back empty
        """
        if not query or not query.strip():
            raise InvalidRequestError("Missing query.", field="query")

        try:
            retrieval = self.retriever.retrieve(
                query,
                top_k=self.default_top_k if top_k is None else top_k,
                tenant_prefix=tenant_prefix or None,
                use_full_scan=use_all_documents,
                max_context_chunks=(
                    self.default_max_context_chunks
                    if max_context_chunks is None
                    else max_context_chunks
                ),
            )
        except ValueError as e:
            raise InvalidRequestError(str(e)) from e

        outcome = SearchOutcome(retrieval=retrieval)
        if analyze_only:
            logger.info(f"{__name__}:search - Analyze only, skipping generation")
            return outcome

        outcome.text = self._generator().generate(query, retrieval.chunks)
        return outcome
