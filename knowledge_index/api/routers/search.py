"""
Search API endpoints.

Routes: POST /search

Dependencies: knowledge_index.application.services, knowledge_index.models
System role: Retrieval and answer generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from knowledge_index.api.deps.dependencies import get_search_service
from knowledge_index.application.services import SearchOutcome, SearchService
from knowledge_index.models.search import SearchRequest, SearchResponse, SourceResponse

from .error_handling import handle_index_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


def map_outcome_to_response(outcome: SearchOutcome) -> SearchResponse:
    retrieval = outcome.retrieval
    return SearchResponse(
        text=outcome.text,
        chunks_used=len(retrieval.chunks),
        total_retrieved=retrieval.total_retrieved,
        sources=[
            SourceResponse(path=s.path, line_count=s.line_count, file_size=s.file_size)
            for s in retrieval.sources
        ],
        truncated=retrieval.truncated,
        total_lines=retrieval.total_lines,
        total_bytes=retrieval.total_bytes,
        embedding_model=retrieval.embedding_model,
    )


@router.post("", response_model=SearchResponse)
@handle_index_errors
async def search(
    request: SearchRequest,
    search_service: SearchService = Depends(get_search_service),
) -> SearchResponse:
    """
    Retrieve context for a query and answer it.

    Raises:
        HTTPException(400): Missing query or invalid limits
        HTTPException(409): No embedding model matches the table's dimension
        HTTPException(502): Query embedding came back empty
    """
    logger.info(
        "Search request",
        extra={
            "top_k": request.top_k,
            "full_scan": request.use_all_documents,
            "tenant_prefix": request.tenant_prefix,
            "analyze_only": request.analyze_only,
        },
    )
    outcome = await run_in_threadpool(
        search_service.search,
        request.query,
        top_k=request.top_k,
        tenant_prefix=request.tenant_prefix,
        use_all_documents=request.use_all_documents,
        max_context_chunks=request.max_context_chunks,
        analyze_only=request.analyze_only,
    )
    return map_outcome_to_response(outcome)
