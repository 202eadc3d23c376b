"""
Vector database schemas.

Pydantic models for rows of the index table, search results and table stats.
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, ConfigDict, Field


class ChunkMetadata(BaseModel):
    """
    Metadata stored with each chunk row.

    source, file_hash, line_count and file_size describe the parent document,
    so every chunk of one source carries identical values for them.
    """

    model_config = ConfigDict(extra="allow")

    source: str = Field(description="Tenant-prefixed document identifier")
    file_hash: str = Field(default="", description="Content fingerprint of the parent document")
    indexed_at: str = Field(default="", description="ISO-8601 UTC timestamp of the write")
    line_count: int | None = Field(default=None, description="Lines in the parent document")
    file_size: int | None = Field(default=None, description="Parent document size in bytes")


class ChunkRecord(BaseModel):
    """A chunk ready to be written to the index table."""

    content: str = Field(description="Chunk text content")
    embedding: list[float] = Field(description="Embedding vector (length D)")
    metadata: ChunkMetadata = Field(description="Chunk metadata")


class VectorSearchResult(BaseModel):
    """Single row returned from a similarity search or full scan."""

    content: str = Field(description="Chunk text content")
    metadata: ChunkMetadata = Field(description="Chunk metadata")
    similarity_score: float | None = Field(
        default=None,
        description="Cosine similarity (None for full-scan rows)",
    )

    @property
    def source(self) -> str:
        return self.metadata.source


class IndexStats(BaseModel):
    """Aggregate statistics for the index table, optionally scoped to a prefix."""

    table_exists: bool = Field(description="Whether the index table exists")
    total_chunks: int = Field(default=0, description="Number of chunk rows")
    total_files: int = Field(default=0, description="Number of distinct sources")
    embedding_dimension: int | None = Field(default=None, description="Vector width D")
    last_indexed_at: str | None = Field(default=None, description="Latest indexed_at value")
    sample_sources: list[str] = Field(default_factory=list, description="Up to 10 sources")
