"""
Knowledge base status schema.

Dependencies: pydantic
System role: Knowledge base status API contract
"""

from pydantic import Field

from knowledge_index.models.common import CamelModel


class KnowledgeBaseStatusResponse(CamelModel):
    """Index statistics, optionally scoped to a source prefix."""

    initialized: bool = Field(description="Whether the index table exists")
    message: str | None = None
    total_files: int = 0
    total_chunks: int = 0
    embedding_dimension: int | None = None
    last_indexed_at: str | None = None
    sample_sources: list[str] = Field(default_factory=list)
    ready_for_search: bool = False
