"""
Chart builder node: decides whether to chart and builds the series.

Best-effort only: every failure ends as chart=None with a warning step.
"""
from typing import Dict, Any
import json
import logging

from ..state import QueryPipelineState, create_success_step, create_warning_step
from ...utils.chart_decision import decide_chart
from ...utils.chart_generator import ChartSkip, build_chart

logger = logging.getLogger(__name__)


async def chart_builder(state: QueryPipelineState) -> Dict[str, Any]:
    """Decide on a chart and, if wanted, transform the result into a series."""
    decision = await decide_chart(state["question"])

    if not decision.generate:
        return {
            "chart": None,
            "chart_source": decision.source,
            "reasoning_log": [create_success_step(
                "Chart",
                f"No chart requested (decided by {decision.source})."
            )]
        }

    outcome = build_chart(state["query_results"])
    if isinstance(outcome, ChartSkip):
        return {
            "chart": None,
            "chart_source": decision.source,
            "reasoning_log": [create_warning_step("Chart", f"Chart skipped: {outcome.reason}")]
        }

    logger.debug(f"Generated chart data: {json.dumps(outcome, indent=2, default=str)}")
    return {
        "chart": outcome,
        "chart_source": decision.source,
        "reasoning_log": [create_success_step(
            "Chart",
            f"Built {outcome['type']} chart with {len(outcome['labels'])} labels."
        )]
    }
