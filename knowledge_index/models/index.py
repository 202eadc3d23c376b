"""
Indexing domain models and schemas.

Request/response schemas for indexing and index maintenance.

Dependencies: pydantic
System role: Indexing API contracts
"""

from typing import Literal

from pydantic import Field

from knowledge_index.models.common import CamelModel


class FileInput(CamelModel):
    """One document to index."""

    name: str = Field(min_length=1, description="Source identifier, optionally tenant-prefixed")
    content: str = Field(default="", description="Extracted plain text")


class IndexRequest(CamelModel):
    """Request schema for indexing a batch of documents."""

    files: list[FileInput] = Field(default_factory=list, description="Documents to index")
    incremental: bool = Field(default=True, description="Skip unchanged documents")


class SkippedFileResponse(CamelModel):
    name: str
    reason: str


class IndexResponse(CamelModel):
    """Response schema for an indexing request."""

    success: bool = True
    message: str
    files_count: int
    chunks_count: int
    skipped_files: list[SkippedFileResponse] = Field(default_factory=list)
    skipped_empty_chunks: int = 0
    skipped_bad_embeddings: int = 0
    embedding_dimension: int | None = None
    embedding_model: str | None = None
    deleted_chunks: int = 0
    mode: Literal["incremental", "full"] = "incremental"


class DeleteByPrefixRequest(CamelModel):
    """Request schema for deleting every chunk under a source prefix."""

    prefix: str = Field(description="Source prefix, e.g. 'tenant-a:'")


class DeleteByPrefixResponse(CamelModel):
    success: bool = True
    message: str
    deleted_count: int


class RebuildResponse(CamelModel):
    """Response schema for dropping or truncating the index table."""

    success: bool = True
    message: str
    mode: Literal["drop", "truncate"]


class IndexStatusResponse(CamelModel):
    """Whether the index table exists and has rows, globally and for a context."""

    table_exists: bool
    has_any_index: bool
    has_context_index: bool
