"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_index_service,
    get_search_service,
    get_service_cache,
    get_vector_store_dependency,
)

__all__ = [
    "ServiceCache",
    "get_index_service",
    "get_search_service",
    "get_service_cache",
    "get_vector_store_dependency",
]
