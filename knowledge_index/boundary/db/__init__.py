"""
Database boundary layer.

Exports: get_engine
"""

from knowledge_index.boundary.db.connection import get_engine

__all__ = ["get_engine"]
