"""
SQLAlchemy database toolkit for running generated SQL.
"""
import time
import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..errors import ExecutionError
from ..models import ResultSet
from ..utils.data_utils import normalize_result

logger = logging.getLogger(__name__)


class DatabaseToolkit:
    """Executes raw SQL text and returns normalized rows."""

    def __init__(self, engine: Optional[Engine] = None):
        self._engine = engine

    @property
    def engine(self) -> Engine:
        """Injected engine, or the shared one from AppContext."""
        if self._engine is None:
            from ...api.app_context import AppContext
            return AppContext.get_instance().get_db_engine()
        return self._engine

    def execute_query(self, sql_query: str) -> ResultSet:
        """
        Execute a SQL statement exactly as written.

        The statement goes to the driver unchanged (no bind-parameter parsing
        and no parameter set, so format-style drivers leave '%' alone),
        rows come back as mappings in projection order and are passed through
        normalize_result.

        Raises:
            ExecutionError: On any database error, carrying the driver's message
        """
        start_time = time.time()
        try:
            with self.engine.connect() as conn:
                # No parameter set, so '%' and ':' in literals reach the driver as-is
                result = conn.execution_options(no_parameters=True).exec_driver_sql(sql_query)
                if result.returns_rows:
                    rows = [dict(row._mapping) for row in result.fetchall()]
                else:
                    rows = []
        except SQLAlchemyError as e:
            error_msg = str(getattr(e, "orig", None) or e)
            logger.error(f"Database Query Execution failed: {error_msg}")
            logger.debug(f"SQL: {sql_query[:500]}...")
            raise ExecutionError(error_msg) from e

        execution_time_ms = (time.time() - start_time) * 1000
        logger.info(f"Query executed: {len(rows)} rows in {execution_time_ms:.0f}ms")
        return normalize_result(rows)


def execute(sql_query: str, engine: Optional[Engine] = None) -> ResultSet:
    """Execute SQL with the given engine or the shared one."""
    return DatabaseToolkit(engine).execute_query(sql_query)
