"""
Search domain models and schemas.

Request/response schemas for retrieval and answer generation.

Dependencies: pydantic
System role: Search API contracts
"""

from pydantic import Field

from knowledge_index.models.common import CamelModel


class SearchRequest(CamelModel):
    """Request schema for a knowledge base query."""

    query: str = Field(default="", description="Natural-language question")
    top_k: int | None = Field(
        default=None, ge=1, description="Nearest chunks to retrieve (server default 5)"
    )
    use_all_documents: bool = Field(
        default=False,
        description="Scan every chunk under the tenant prefix instead of ranking",
    )
    tenant_prefix: str | None = Field(default=None, description="Source prefix filter")
    max_context_chunks: int | None = Field(
        default=None, ge=1, description="Context window cap (server default 200)"
    )
    analyze_only: bool = Field(
        default=False,
        description="Return retrieval statistics without generating an answer",
    )


class SourceResponse(CamelModel):
    path: str
    line_count: int | None = None
    file_size: int | None = None


class SearchResponse(CamelModel):
    """Response schema for a knowledge base query."""

    text: str | None = Field(default=None, description="Generated answer")
    chunks_used: int = Field(description="Chunks handed to answer generation")
    total_retrieved: int = Field(description="Chunks retrieved before the cap")
    sources: list[SourceResponse] = Field(default_factory=list)
    truncated: bool = False
    total_lines: int = 0
    total_bytes: int = 0
    embedding_model: str | None = None
