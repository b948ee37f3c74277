"""
SQLAlchemy schema inspector that reads the live database catalog.

Nothing is cached: each call builds a fresh Inspector, so a table created
mid-session shows up on the next request.
"""
import logging
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..errors import SchemaFetchError
from ..models import ColumnInfo, SchemaDescription

logger = logging.getLogger(__name__)

# (table_name, column_name, data_type, full_column_type)
CatalogRow = Tuple[str, str, str, str]


def group_catalog_rows(rows: Iterable[CatalogRow]) -> SchemaDescription:
    """Group one-row-per-column catalog rows into table -> ordered columns."""
    tables: SchemaDescription = {}
    for table_name, column_name, data_type, full_type in rows:
        tables.setdefault(table_name, []).append(
            ColumnInfo(name=column_name, data_type=data_type, full_type=full_type)
        )
    return tables


def _split_type(column_type) -> Tuple[str, str]:
    """Return (data_type, full_type) for a reflected SQLAlchemy type."""
    full_type = str(column_type).lower()
    base = full_type.split("(", 1)[0].split()
    return (base[0] if base else full_type), full_type


class SchemaInspector:
    """Reads table and column metadata through SQLAlchemy reflection."""

    def __init__(self, engine: Optional[Engine] = None):
        self._engine = engine

    @property
    def engine(self) -> Engine:
        """Injected engine, or the shared one from AppContext."""
        if self._engine is None:
            from ...api.app_context import AppContext
            return AppContext.get_instance().get_db_engine()
        return self._engine

    def fetch_catalog_rows(self) -> List[CatalogRow]:
        """Catalog rows for tables and views, ordered by name, then column ordinal position."""
        inspector = inspect(self.engine)
        relation_names = set(inspector.get_table_names()) | set(inspector.get_view_names())
        rows: List[CatalogRow] = []
        for table_name in sorted(relation_names):
            for column in inspector.get_columns(table_name):
                data_type, full_type = _split_type(column["type"])
                rows.append((table_name, column["name"], data_type, full_type))
        return rows

    def fetch_schema(self) -> SchemaDescription:
        """
        Fetch the current schema.

        Raises:
            SchemaFetchError: If the catalog cannot be read
        """
        try:
            rows = self.fetch_catalog_rows()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching table and column names: {e}")
            raise SchemaFetchError(f"Failed to fetch schema: {e}") from e

        schema = group_catalog_rows(rows)
        logger.debug(f"Fetched schema with {len(schema)} tables")
        return schema


def fetch_schema(engine: Optional[Engine] = None) -> SchemaDescription:
    """Fetch the live schema using the given engine or the shared one."""
    return SchemaInspector(engine).fetch_schema()
