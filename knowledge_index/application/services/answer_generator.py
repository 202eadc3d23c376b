"""
Answer generation over retrieved chunks.

Grounds a chat model in the retrieved passages with a single prompt.
One prompt template, no conversation history.

Dependencies: langchain_core, langchain_google_genai
System role: Generation step of the search flow
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate

from knowledge_index.boundary.vdb import VectorSearchResult
from knowledge_index.configs.retrieval import GenerationSettings
from knowledge_index.core.exceptions import ConfigurationError, RetrievalError

logger = logging.getLogger(__name__)

ANSWER_PROMPT = ChatPromptTemplate.from_messages([
    ("human", """Based on the following documents, answer the query:

Documents:
{context}

Query: {query}

You have access ONLY to the provided Documents text. If the documents are missing or insufficient, say so."""),
])


def build_context(chunks: list[VectorSearchResult]) -> str:
    """Render chunks as 'Source: <path>' blocks separated by rules."""
    return "\n\n---\n\n".join(f"Source: {c.source}\n{c.content}" for c in chunks)


class AnswerGenerator:
    """Answer a query from retrieved chunks with a chat model."""

    def __init__(self, model: BaseChatModel) -> None:
        self._chain = ANSWER_PROMPT | model | StrOutputParser()

    def generate(self, query: str, chunks: list[VectorSearchResult]) -> str:
        """
        Generate an answer.

        Args:
            query: User question
            chunks: Context chunks, already capped

        Returns:
            str: Model answer text

        Raises:
            RetrievalError: When the model call fails
        """
        logger.info(f"{__name__}:generate - Generating answer from {len(chunks)} chunks")
        try:
            return self._chain.invoke({"context": build_context(chunks), "query": query})
        except Exception as e:
            logger.error(f"{__name__}:generate - FAILED: {type(e).__name__}: {e}")
            raise RetrievalError(f"Answer generation failed: {e}") from e


def create_gemini_answer_generator(settings: GenerationSettings) -> AnswerGenerator:
    """
    Build an AnswerGenerator backed by ChatGoogleGenerativeAI.

    Raises:
        ConfigurationError: When GOOGLE_API_KEY is missing
    """
    if not settings.google_api_key:
        raise ConfigurationError("Missing GOOGLE_API_KEY.", setting="GOOGLE_API_KEY")

    from langchain_google_genai import ChatGoogleGenerativeAI

    model = ChatGoogleGenerativeAI(
        model=settings.model,
        temperature=settings.temperature,
        google_api_key=settings.google_api_key,
    )
    return AnswerGenerator(model)
