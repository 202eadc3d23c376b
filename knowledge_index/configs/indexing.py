"""
Indexing pipeline configuration settings.

Chunking parameters and content hashing algorithm.

Dependencies: pydantic, pydantic_settings
System role: Chunking and change-detection configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IndexingSettings(BaseSettings):
    """Settings for the indexing pipeline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INDEXING_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(
        default=1000,
        description="Maximum chunk size in characters",
    )
    chunk_overlap: int = Field(
        default=200,
        description="Overlap between consecutive chunks",
    )
    separators: list[str] = Field(
        default=["\n\n", "\n", " ", ",", ""],
        description="Split separators in priority order; '' is the character-level fallback",
    )
    hash_algorithm: str = Field(
        default="sha256",
        description="Content fingerprint algorithm",
    )
