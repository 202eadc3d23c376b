"""
Embedding provider configuration settings.

Credentials and model preferences for the Gemini embedding provider.

Dependencies: pydantic, pydantic_settings
System role: Embedding model configuration for indexing and query embedding
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    google_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "EMBEDDING_GOOGLE_API_KEY", "GOOGLE_API_KEY", "GEMINI_API_KEY"
        ),
        description="Google API key for Gemini embeddings and model catalog",
    )
    model: str = Field(
        default="models/gemini-embedding-001",
        description="Preferred embedding model; tried first during resolution",
    )
    output_dimensionality: int | None = Field(
        default=None,
        description="Pin the provider's output dimensionality (None = model default)",
    )
    batch_size: int = Field(default=100, description="Texts per provider request", ge=1)
