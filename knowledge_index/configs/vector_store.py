"""
Vector store configuration settings.

Selects the vector store backend and names the index table.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for indexing and retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (pgvector for deployments, memory for tests)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="pgvector",
        description="Vector store type: 'pgvector' for PostgreSQL, 'memory' for in-process",
    )
    table_name: str = Field(default="file_index", description="Index table name")
    max_scan_rows: int = Field(
        default=10_000,
        description="Hard row cap for full-scan reads",
        ge=1,
    )
