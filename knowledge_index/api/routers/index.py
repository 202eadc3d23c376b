"""
Index API endpoints.

Routes:
- POST /index - Index a batch of documents (incremental by default)
- POST /index/delete-by-prefix - Delete every chunk under a source prefix
- POST /index/rebuild?mode=drop|truncate - Drop or empty the index table
- GET /index/status?contextId= - Table/row existence, globally and per context

Dependencies: knowledge_index.application.services, knowledge_index.models
System role: Indexing HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool

from knowledge_index.api.deps.dependencies import get_index_service
from knowledge_index.application.services import IndexService
from knowledge_index.core.indexing import IndexReport, SourceDocument
from knowledge_index.models.index import (
    DeleteByPrefixRequest,
    DeleteByPrefixResponse,
    IndexRequest,
    IndexResponse,
    IndexStatusResponse,
    RebuildResponse,
    SkippedFileResponse,
)

from .error_handling import handle_index_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/index", tags=["index"])


def map_report_to_response(report: IndexReport) -> IndexResponse:
    if report.files_count:
        message = f"Indexed {report.files_count} files ({report.chunks_count} chunks)."
    else:
        message = "Index is up to date."
    return IndexResponse(
        message=message,
        files_count=report.files_count,
        chunks_count=report.chunks_count,
        skipped_files=[
            SkippedFileResponse(name=s.name, reason=s.reason) for s in report.skipped_files
        ],
        skipped_empty_chunks=report.skipped_empty_chunks,
        skipped_bad_embeddings=report.skipped_bad_embeddings,
        embedding_dimension=report.embedding_dimension,
        embedding_model=report.embedding_model,
        deleted_chunks=report.deleted_chunks,
        mode=report.mode,
    )


@router.post("", response_model=IndexResponse)
@handle_index_errors
async def index_files(
    request: IndexRequest,
    index_service: IndexService = Depends(get_index_service),
) -> IndexResponse:
    """
    Index a batch of documents.

    Raises:
        HTTPException(400): Empty batch
        HTTPException(409): No embedding model matches the table's dimension
        HTTPException(422): Nothing could be indexed
    """
    documents = [SourceDocument(name=f.name, content=f.content) for f in request.files]
    report = await run_in_threadpool(
        index_service.index, documents, incremental=request.incremental
    )
    return map_report_to_response(report)


@router.post("/delete-by-prefix", response_model=DeleteByPrefixResponse)
@handle_index_errors
async def delete_by_prefix(
    request: DeleteByPrefixRequest,
    index_service: IndexService = Depends(get_index_service),
) -> DeleteByPrefixResponse:
    """Delete every chunk whose source starts with the prefix."""
    deleted = await run_in_threadpool(index_service.delete_by_prefix, request.prefix)
    return DeleteByPrefixResponse(
        message=f"Deleted {deleted} chunks with prefix {request.prefix}",
        deleted_count=deleted,
    )


@router.post("/rebuild", response_model=RebuildResponse)
@handle_index_errors
async def rebuild_index(
    mode: str = Query(default="drop", description="'drop' or 'truncate'"),
    index_service: IndexService = Depends(get_index_service),
) -> RebuildResponse:
    """Drop (forgets the vector dimension) or truncate (keeps it) the index table."""
    applied = await run_in_threadpool(index_service.rebuild, mode)
    action = "dropped" if applied == "drop" else "truncated"
    return RebuildResponse(
        message=f"Index table {action}. Please reindex your files.",
        mode=applied,
    )


@router.get("/status", response_model=IndexStatusResponse)
@handle_index_errors
async def index_status(
    context_id: str | None = Query(default=None, alias="contextId"),
    index_service: IndexService = Depends(get_index_service),
) -> IndexStatusResponse:
    """Report whether the table exists and has rows, globally and for contextId."""
    result = await run_in_threadpool(index_service.index_status, context_id)
    return IndexStatusResponse(
        table_exists=result.table_exists,
        has_any_index=result.has_any_index,
        has_context_index=result.has_context_index,
    )
