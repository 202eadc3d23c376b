"""
Database connection management.

Provides the SQLAlchemy engine used by the pgvector store.

Dependencies: sqlalchemy, knowledge_index.configs
System role: Database connection lifecycle management
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from knowledge_index.configs.database import DatabaseSettings
from knowledge_index.core.exceptions import ConfigurationError


def get_engine(db_config: DatabaseSettings) -> Engine:
    """
    Create SQLAlchemy engine with connection pooling and health checks.

    Configures QueuePool for efficient connection reuse. pool_pre_ping=True
    verifies connections before use to detect stale/broken connections early.

    Args:
        db_config: Database settings

    Returns:
        Engine: Configured SQLAlchemy engine with active pooling

    Raises:
        ConfigurationError: If neither POSTGRES_URL nor POSTGRES_HOST is set

    Usage:
        engine = get_engine(get_settings().database)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    """
    if not db_config.is_configured:
        raise ConfigurationError(
            "Missing database connection settings (POSTGRES_URL or POSTGRES_HOST).",
            setting="POSTGRES_URL",
        )

    return create_engine(
        db_config.database_url,
        echo=db_config.echo_sql,
        poolclass=QueuePool,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,  # Verify connections before using
    )
