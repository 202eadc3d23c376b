"""
Retrieval over the chunk table.

Exports: Retriever, RetrievalResult, SourceInfo, collect_sources
"""

from .retrieval_result import RetrievalResult, SourceInfo
from .retriever import Retriever, collect_sources

__all__ = ["RetrievalResult", "Retriever", "SourceInfo", "collect_sources"]
