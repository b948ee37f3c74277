"""
SQLAlchemy database engine management.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
import logging

from ..config import config

logger = logging.getLogger(__name__)

# Global instance
_engine = None


def create_database_engine(database_url: str, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine with dialect-appropriate pool settings."""
    if database_url.startswith('sqlite'):
        # SQLite-specific settings
        return create_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
            connect_args={"check_same_thread": False}
        )

    # MySQL/PostgreSQL settings
    return create_engine(
        database_url,
        echo=echo,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=300
    )


def get_engine(echo: bool = False) -> Engine:
    """Get or create the process-wide SQLAlchemy engine."""
    global _engine
    if _engine is None:
        database_url = config.database.database_url
        _engine = create_database_engine(database_url, echo=echo)
        logger.debug(f"Created SQLAlchemy engine for {_engine.url.render_as_string(hide_password=True)}")

    return _engine


def cleanup_database_connections():
    """Clean up database connections and dispose of the engine."""
    global _engine

    if _engine is not None:
        logger.info("Disposing database engine and closing all connections")
        _engine.dispose()
        _engine = None
        logger.info("Database connections cleaned up successfully")
