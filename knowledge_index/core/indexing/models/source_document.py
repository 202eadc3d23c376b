"""
Source document model.

A caller-supplied document: its name becomes the chunk source.

Dependencies: pydantic
System role: Input type for IndexSynchronizer.sync()
"""

from pydantic import BaseModel, Field


class SourceDocument(BaseModel):
    """Document text to index under a tenant-prefixed name."""

    name: str = Field(description="Source identifier, e.g. 'tenant-a:docs/readme.md'")
    content: str = Field(default="", description="Extracted plain text")

    @property
    def line_count(self) -> int:
        return len(self.content.splitlines())

    @property
    def file_size(self) -> int:
        return len(self.content.encode("utf-8"))
