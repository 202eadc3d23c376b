"""
Retrieval and answer generation configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Search defaults and generation model configuration
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Defaults applied to search requests that omit them."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RETRIEVAL_",
        case_sensitive=False,
        extra="ignore",
    )

    top_k: int = Field(default=5, description="Nearest chunks to retrieve", ge=1)
    max_context_chunks: int = Field(
        default=200,
        description="Maximum chunks handed to answer generation",
        ge=1,
    )


class GenerationSettings(BaseSettings):
    """Language model used to answer questions over retrieved context."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GENERATION_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    google_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "GENERATION_GOOGLE_API_KEY", "GOOGLE_API_KEY", "GEMINI_API_KEY"
        ),
        description="Google API key for the Gemini chat model",
    )
    model: str = Field(default="gemini-2.5-flash", description="Gemini chat model ID")
    temperature: float = Field(default=0.0, description="Sampling temperature")
