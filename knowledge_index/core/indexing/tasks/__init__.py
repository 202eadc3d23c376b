"""
Indexing pipeline tasks.

Exports: ChunkingTask, ChunkingResult, EmbeddingTask
"""

from .chunking_task import ChunkingResult, ChunkingTask
from .embedding_task import EmbeddingTask

__all__ = ["ChunkingResult", "ChunkingTask", "EmbeddingTask"]
