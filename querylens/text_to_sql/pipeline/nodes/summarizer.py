"""
Summarizer node: turns the result set into a prose answer.
"""
from typing import Dict, Any, List
import logging

from ..state import QueryPipelineState, create_success_step
from ...errors import SummarizationError
from ...prompts import build_summary_prompt
from ...utils.llm_utils import get_llm, response_text

logger = logging.getLogger(__name__)


async def summarize(question: str, sql: str, result: List[Dict[str, Any]], llm=None) -> str:
    """
    Ask the model for a plain-prose answer to the question.

    The answer is trimmed and returned as-is.

    Raises:
        SummarizationError: On any model failure
    """
    llm = llm or get_llm()
    try:
        response = await llm.ainvoke(build_summary_prompt(question, sql, result))
        return response_text(response).strip()
    except Exception as e:
        logger.error(f"Error generating summary: {e}")
        raise SummarizationError(f"Failed to summarize results: {e}") from e


async def summarizer(state: QueryPipelineState) -> Dict[str, Any]:
    """Produce the mandatory summary; failures end the request."""
    summary = await summarize(
        state["question"],
        state["generated_sql"],
        state["query_results"]
    )
    return {
        "summary": summary,
        "reasoning_log": [create_success_step("Summary", "Generated natural language summary.")]
    }
