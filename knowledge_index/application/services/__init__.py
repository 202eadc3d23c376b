"""
Application services.

Exports: IndexService, SearchService, AnswerGenerator
"""

from knowledge_index.application.services.answer_generator import (
    AnswerGenerator,
    create_gemini_answer_generator,
)
from knowledge_index.application.services.index_service import IndexService, IndexStatus
from knowledge_index.application.services.search_service import SearchOutcome, SearchService

__all__ = [
    "AnswerGenerator",
    "IndexService",
    "IndexStatus",
    "SearchOutcome",
    "SearchService",
    "create_gemini_answer_generator",
]
