"""
Decides whether a question's result should be charted.

Order of checks:
1. An explicit chart keyword in the question means yes, without a model call.
2. Otherwise the model answers a YES/NO prompt.
3. If that call fails the answer is no; the chart is best-effort only.
"""
import logging
from dataclasses import dataclass

from ...common.constants import CHART_KEYWORDS, CHART_DECISION_YES
from ..errors import ChartDecisionError
from ..prompts import build_chart_decision_prompt
from .llm_utils import get_llm, response_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartDecision:
    """Whether to chart, and which check decided it."""
    generate: bool
    source: str  # "keyword", "model" or "fallback"


def contains_chart_keyword(question: str) -> bool:
    """Case-insensitive substring match against the chart keywords."""
    lowered = question.lower()
    return any(keyword in lowered for keyword in CHART_KEYWORDS)


async def ask_model_for_chart(question: str, llm=None) -> bool:
    """Ask the model the YES/NO chart question. Raises ChartDecisionError on failure."""
    llm = llm or get_llm()
    try:
        response = await llm.ainvoke(build_chart_decision_prompt(question))
        answer = response_text(response)
    except Exception as e:
        raise ChartDecisionError(f"Chart check failed: {e}") from e
    return answer.strip().upper() == CHART_DECISION_YES


async def decide_chart(question: str, llm=None) -> ChartDecision:
    """Decide whether to chart; never raises."""
    if contains_chart_keyword(question):
        logger.info("Chart keyword found, forcing chart generation.")
        return ChartDecision(generate=True, source="keyword")

    try:
        generate = await ask_model_for_chart(question, llm=llm)
    except ChartDecisionError as e:
        logger.error(f"Error determining if chart is needed: {e}")
        return ChartDecision(generate=False, source="fallback")

    logger.info(f"Should generate chart (model): {generate}")
    return ChartDecision(generate=generate, source="model")
