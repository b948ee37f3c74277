"""
Executor node for the query pipeline.
Executes the SQL against the database using SQLAlchemy.
"""
from typing import Dict, Any, Optional
import logging
import time

from ...tools.database_toolkit import DatabaseToolkit
from ..state import QueryPipelineState, create_success_step

logger = logging.getLogger(__name__)


def executor(state: QueryPipelineState,
             db_toolkit: Optional[DatabaseToolkit] = None) -> Dict[str, Any]:
    """
    Execute the (possibly rewritten) SQL.

    ExecutionError propagates and ends the request; nothing is retried.
    """
    toolkit = db_toolkit or DatabaseToolkit()

    generated_sql = state["generated_sql"]
    logger.info(f"Executing SQL query: {generated_sql[:100]}...")

    start_time = time.time()
    query_results = toolkit.execute_query(generated_sql)
    execution_time_ms = (time.time() - start_time) * 1000

    return {
        "query_results": query_results,
        "execution_time_ms": execution_time_ms,
        "reasoning_log": [create_success_step(
            "Execution",
            f"Successfully executed the query, retrieving {len(query_results)} rows in {execution_time_ms:.0f}ms."
        )]
    }
