"""Database engine utilities."""
from .engine import get_engine, create_database_engine, cleanup_database_connections

__all__ = ['get_engine', 'create_database_engine', 'cleanup_database_connections']
