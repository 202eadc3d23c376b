"""
Database configuration settings.

Manages PostgreSQL connection parameters for the pgvector-backed index table.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for the vector store
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from knowledge_index.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        description="Full connection string; overrides the individual fields when set",
    )
    host: str | None = Field(default=None, description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="knowledge_index", description="PostgreSQL database name")

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    sslmode: str = Field(default="prefer", description="SSL mode for the connection")

    @property
    def is_configured(self) -> bool:
        """Whether enough settings are present to build a connection URL."""
        return bool(self.url or self.host)

    @property
    def database_url(self) -> str:
        """
        Construct PostgreSQL connection URL.

        Returns:
            str: SQLAlchemy-compatible database URL (psycopg2 driver)
        """
        if self.url:
            if self.url.startswith("postgres://"):
                return "postgresql+psycopg2://" + self.url[len("postgres://"):]
            if self.url.startswith("postgresql://"):
                return "postgresql+psycopg2://" + self.url[len("postgresql://"):]
            return self.url
        return (
            f"postgresql+psycopg2://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}?sslmode={self.sslmode}"
        )
