"""
Indexing outcome models.

Dependencies: pydantic
System role: Return type for IndexSynchronizer.sync()
"""

from typing import Literal

from pydantic import BaseModel, Field

SKIP_EMPTY_CONTENT = "empty_content"
SKIP_UNCHANGED = "unchanged"
SKIP_ALL_CHUNKS_EMPTY = "all_chunks_empty"
SKIP_DUPLICATE_IN_BATCH = "duplicate_in_batch"
SKIP_PROCESSING_ERROR = "processing_error"


class SkippedFile(BaseModel):
    """A document that produced no rows, with the reason."""

    name: str = Field(description="Document name")
    reason: str = Field(description="Skip reason")


class IndexReport(BaseModel):
    """Counts and bookkeeping for one sync request."""

    files_count: int = Field(default=0, description="Documents with at least one row written")
    chunks_count: int = Field(default=0, description="Rows written")
    skipped_files: list[SkippedFile] = Field(default_factory=list)
    skipped_empty_chunks: int = Field(default=0, description="Whitespace-only chunks dropped")
    skipped_bad_embeddings: int = Field(
        default=0, description="Chunks dropped for a missing or empty vector"
    )
    embedding_dimension: int | None = Field(default=None, description="Vector width D")
    embedding_model: str | None = Field(default=None, description="Model used for this request")
    deleted_chunks: int = Field(default=0, description="Stale rows removed")
    mode: Literal["incremental", "full"] = Field(default="incremental")

    def skip(self, name: str, reason: str) -> None:
        self.skipped_files.append(SkippedFile(name=name, reason=reason))
