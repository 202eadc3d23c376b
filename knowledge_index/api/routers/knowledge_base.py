"""
Knowledge base API endpoints.

Routes:
- GET /knowledge-base/status?prefix= - Index statistics
- POST /knowledge-base/init - Status with a human-readable summary

Dependencies: knowledge_index.application.services, knowledge_index.models
System role: Knowledge base status HTTP API
"""

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool

from knowledge_index.api.deps.dependencies import get_index_service
from knowledge_index.application.services import IndexService
from knowledge_index.boundary.vdb import IndexStats
from knowledge_index.models.knowledge_base import KnowledgeBaseStatusResponse

from .error_handling import handle_index_errors

router = APIRouter(prefix="/knowledge-base", tags=["knowledge-base"])


def map_stats_to_response(stats: IndexStats) -> KnowledgeBaseStatusResponse:
    if not stats.table_exists:
        return KnowledgeBaseStatusResponse(
            initialized=False,
            message="No knowledge base found. Index files first.",
        )
    return KnowledgeBaseStatusResponse(
        initialized=True,
        message=(
            f"Knowledge base initialized: {stats.total_files} files, "
            f"{stats.total_chunks} chunks"
        ),
        total_files=stats.total_files,
        total_chunks=stats.total_chunks,
        embedding_dimension=stats.embedding_dimension,
        last_indexed_at=stats.last_indexed_at,
        sample_sources=stats.sample_sources,
        ready_for_search=stats.total_chunks > 0,
    )


@router.get("/status", response_model=KnowledgeBaseStatusResponse)
@handle_index_errors
async def knowledge_base_status(
    prefix: str | None = Query(default=None, description="Source prefix filter"),
    index_service: IndexService = Depends(get_index_service),
) -> KnowledgeBaseStatusResponse:
    """Chunk/file counts, dimension, last indexed time and sample sources."""
    stats = await run_in_threadpool(index_service.knowledge_base_status, prefix)
    return map_stats_to_response(stats)


@router.post("/init", response_model=KnowledgeBaseStatusResponse)
@handle_index_errors
async def knowledge_base_init(
    index_service: IndexService = Depends(get_index_service),
) -> KnowledgeBaseStatusResponse:
    """Validate the knowledge base can be queried and summarize it."""
    stats = await run_in_threadpool(index_service.knowledge_base_status, None)
    return map_stats_to_response(stats)
