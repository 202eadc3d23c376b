"""API routers."""

from .health import router as health_router
from .index import router as index_router
from .knowledge_base import router as knowledge_base_router
from .search import router as search_router

__all__ = [
    "health_router",
    "index_router",
    "knowledge_base_router",
    "search_router",
]
