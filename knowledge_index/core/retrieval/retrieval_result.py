"""
Retrieval result models.

Dependencies: pydantic, knowledge_index.boundary.vdb
System role: Return type for Retriever.retrieve()
"""

from pydantic import BaseModel, Field

from knowledge_index.boundary.vdb import VectorSearchResult


class SourceInfo(BaseModel):
    """Document-level facts for one distinct retrieved source."""

    path: str = Field(description="Source identifier")
    line_count: int | None = Field(default=None, description="Lines in the document")
    file_size: int | None = Field(default=None, description="Document size in bytes")


class RetrievalResult(BaseModel):
    """Chunks handed to answer generation plus source bookkeeping."""

    chunks: list[VectorSearchResult] = Field(default_factory=list)
    sources: list[SourceInfo] = Field(default_factory=list)
    truncated: bool = Field(default=False, description="More chunks were retrieved than kept")
    total_retrieved: int = Field(default=0, description="Chunks retrieved before the cap")
    embedding_model: str | None = Field(default=None, description="Query model, if any")

    @property
    def total_lines(self) -> int:
        return sum(s.line_count or 0 for s in self.sources)

    @property
    def total_bytes(self) -> int:
        return sum(s.file_size or 0 for s in self.sources)
