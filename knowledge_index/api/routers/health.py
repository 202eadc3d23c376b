"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: knowledge_index.boundary
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from knowledge_index.api.deps.dependencies import get_vector_store_dependency
from knowledge_index.boundary.vdb import VectorStore
from knowledge_index.models.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/vector-store", response_model=HealthResponse)
async def health_check_vector_store(
    store: VectorStore = Depends(get_vector_store_dependency),
) -> HealthResponse:
    """Vector store health check; reports whether the index table exists."""
    try:
        exists = await run_in_threadpool(store.table_exists)
    except Exception as e:
        logger.warning(f"{__name__}:health_check_vector_store - {type(e).__name__}: {e}")
        return HealthResponse(status="unhealthy", message=f"Vector store unavailable: {e}")

    if exists:
        return HealthResponse(status="healthy", message="Vector store accessible, index table exists")
    return HealthResponse(status="healthy", message="Vector store accessible, index table not created yet")
