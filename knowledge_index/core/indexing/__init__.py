"""
Incremental indexing pipeline.

Self-contained module for hashing, chunking, model resolution, embedding and
keeping the chunk table in sync with a document set.

Dependencies: langchain_text_splitters, pydantic, knowledge_index.boundary
System role: Indexing entrypoint
"""

from .content_hasher import compute_content_hash
from .index_synchronizer import IndexSynchronizer
from .model_resolver import DimensionCache, EmbeddingModelResolver, ResolvedModel
from .models import IndexReport, SkippedFile, SourceDocument
from .tasks import ChunkingResult, ChunkingTask, EmbeddingTask

__all__ = [
    "ChunkingResult",
    "ChunkingTask",
    "DimensionCache",
    "EmbeddingModelResolver",
    "EmbeddingTask",
    "IndexReport",
    "IndexSynchronizer",
    "ResolvedModel",
    "SkippedFile",
    "SourceDocument",
    "compute_content_hash",
]
