"""
API request/response schemas.

Exports: index, search, knowledge base and health models
"""

from knowledge_index.models.common import CamelModel, HealthResponse
from knowledge_index.models.index import (
    DeleteByPrefixRequest,
    DeleteByPrefixResponse,
    FileInput,
    IndexRequest,
    IndexResponse,
    IndexStatusResponse,
    RebuildResponse,
    SkippedFileResponse,
)
from knowledge_index.models.knowledge_base import KnowledgeBaseStatusResponse
from knowledge_index.models.search import SearchRequest, SearchResponse, SourceResponse

__all__ = [
    "CamelModel",
    "DeleteByPrefixRequest",
    "DeleteByPrefixResponse",
    "FileInput",
    "HealthResponse",
    "IndexRequest",
    "IndexResponse",
    "IndexStatusResponse",
    "KnowledgeBaseStatusResponse",
    "RebuildResponse",
    "SearchRequest",
    "SearchResponse",
    "SkippedFileResponse",
    "SourceResponse",
]
