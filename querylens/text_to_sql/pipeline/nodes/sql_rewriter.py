"""
Rewriter node: exposes ORDER BY aggregates so the result can be charted.
"""
from typing import Dict, Any
import logging

from ..state import QueryPipelineState, create_success_step
from ...utils.query_rewriter import SqlRewriter, augment_for_charting

logger = logging.getLogger(__name__)


def sql_rewriter(state: QueryPipelineState,
                 rewrite: SqlRewriter = augment_for_charting) -> Dict[str, Any]:
    """Apply the chart-augmentation rewrite once to the generated SQL."""
    original_sql = state["generated_sql"]
    rewritten_sql = rewrite(original_sql)

    if rewritten_sql != original_sql:
        logger.info(f"Modified SQL query for charting: {rewritten_sql}")
        details = "Added the ORDER BY aggregate to the SELECT list for charting."
    else:
        details = "No chart augmentation needed."

    return {
        "generated_sql": rewritten_sql,
        "reasoning_log": [create_success_step("Chart Augmentation", details)]
    }
