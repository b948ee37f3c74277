"""
SQL generator node for the query pipeline.
Translates the question into a SQL statement with one LLM call.
"""
from typing import Dict, Any
import logging
import time

from ..state import QueryPipelineState, create_success_step
from ...errors import GenerationError
from ...prompts import build_translation_prompt
from ...utils.llm_utils import get_llm, response_text
from ...utils.sql_utils import extract_sql_from_response

logger = logging.getLogger(__name__)


async def generate_sql(question: str, schema_text: str, llm=None) -> str:
    """
    Generate a SQL statement for a question.

    Args:
        question: Natural language question
        schema_text: Schema rendered by format_schema_text
        llm: Chat model (defaults to the shared one)

    Returns:
        SQL with code fences stripped and whitespace trimmed

    Raises:
        GenerationError: On any model failure or an empty answer
    """
    llm = llm or get_llm()
    prompt = build_translation_prompt(question, schema_text)

    try:
        response = await llm.ainvoke(prompt)
        sql_query = extract_sql_from_response(response_text(response))
    except Exception as e:
        logger.error(f"Error generating SQL query: {e}")
        raise GenerationError("Failed to generate SQL query.") from e

    if not sql_query:
        logger.error("Model returned an empty SQL query")
        raise GenerationError("Failed to generate SQL query.")

    return sql_query


async def sql_generator(state: QueryPipelineState) -> Dict[str, Any]:
    """Generate SQL from the question and schema text."""
    question = state["question"]
    logger.info(f"Generating SQL for query: {question[:100]}...")

    start_time = time.time()
    generated_sql = await generate_sql(question, state["schema_text"])
    sql_generation_time_ms = (time.time() - start_time) * 1000

    logger.info(f"Generated SQL query: {generated_sql}")
    return {
        "generated_sql": generated_sql,
        "reasoning_log": [create_success_step(
            "SQL Generation",
            f"Generated SQL in {sql_generation_time_ms:.0f}ms."
        )]
    }
