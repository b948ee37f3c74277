"""End-to-end tests for the query pipeline graph with a scripted model."""
import asyncio

import pytest

from querylens.text_to_sql.errors import ExecutionError, GenerationError, SummarizationError
from querylens.text_to_sql.pipeline.graph import query_pipeline_graph, run_query_pipeline
from tests.conftest import CHART_PROMPT, SUMMARY_PROMPT, TRANSLATION_PROMPT

RANKING_SQL = (
    "```sql\n"
    "SELECT customerName FROM payments GROUP BY customerName ORDER BY SUM(amount) DESC\n"
    "```"
)


def test_chart_keyword_question_end_to_end(app_context, fake_llm):
    fake_llm.reply(TRANSLATION_PROMPT, RANKING_SQL)
    fake_llm.reply(SUMMARY_PROMPT, "  Alice paid the most (500), followed by Bob (300).  ")

    payload = asyncio.run(run_query_pipeline("Plot total payments by customer"))

    assert payload["query"] == (
        "SELECT customerName, SUM(amount) AS sum_value FROM payments "
        "GROUP BY customerName ORDER BY SUM(amount) DESC"
    )
    assert payload["result"] == [
        {"customerName": "Alice", "sum_value": 500},
        {"customerName": "Bob", "sum_value": 300},
    ]
    assert payload["summary"] == "Alice paid the most (500), followed by Bob (300)."
    assert payload["chart"]["labels"] == ["Alice", "Bob"]
    assert payload["chart"]["datasets"][0]["data"] == [500, 300]
    assert payload["chart"]["datasets"][0]["label"] == "sum_value"
    assert fake_llm.prompts_for(CHART_PROMPT) == []


def test_translation_prompt_carries_live_schema(app_context, fake_llm):
    fake_llm.reply(TRANSLATION_PROMPT, "SELECT COUNT(*) AS n FROM customers")
    fake_llm.reply(SUMMARY_PROMPT, "There are 2 customers.")
    fake_llm.reply(CHART_PROMPT, "NO")

    payload = asyncio.run(run_query_pipeline("How many customers are there?"))

    prompt = fake_llm.prompts_for(TRANSLATION_PROMPT)[0]
    assert "- customers: customerNumber (integer), customerName (varchar), country (varchar)" in prompt
    assert "- payments: checkNumber (varchar), customerName (varchar), amount (integer)" in prompt
    assert payload["result"] == [{"n": 2}]
    assert payload["chart"] is None


def test_summary_prompt_sees_rewritten_sql_and_rows(app_context, fake_llm):
    fake_llm.reply(TRANSLATION_PROMPT, RANKING_SQL)
    fake_llm.reply(SUMMARY_PROMPT, "Alice, Bob")
    fake_llm.reply(CHART_PROMPT, "YES")

    asyncio.run(run_query_pipeline("Which customers paid the most?"))

    summary_prompt = fake_llm.prompts_for(SUMMARY_PROMPT)[0]
    assert "SUM(amount) AS sum_value" in summary_prompt
    assert '"sum_value": 500' in summary_prompt


def test_model_decides_chart(app_context, fake_llm):
    fake_llm.reply(TRANSLATION_PROMPT, RANKING_SQL)
    fake_llm.reply(SUMMARY_PROMPT, "Alice, Bob")
    fake_llm.reply(CHART_PROMPT, "YES")

    state = asyncio.run(query_pipeline_graph.ainvoke({"question": "Which customers paid the most?"}))

    assert state["schema_text"].startswith("- customers: customerNumber (integer)")
    assert "schema" not in state
    assert state["chart_source"] == "model"
    assert state["chart"]["labels"] == ["Alice", "Bob"]
    assert [step["step_name"] for step in state["reasoning_log"]][:4] == [
        "Schema Introspection", "SQL Generation", "Chart Augmentation", "Execution"
    ]
    assert {step["step_name"] for step in state["reasoning_log"][4:]} == {"Summary", "Chart"}


def test_chart_check_failure_still_answers(app_context, fake_llm):
    fake_llm.reply(TRANSLATION_PROMPT, RANKING_SQL)
    fake_llm.reply(SUMMARY_PROMPT, "Alice, Bob")
    fake_llm.reply(CHART_PROMPT, RuntimeError("model unavailable"))

    payload = asyncio.run(run_query_pipeline("Which customers paid the most?"))

    assert payload["summary"] == "Alice, Bob"
    assert payload["chart"] is None


def test_unchartable_result_has_no_chart(app_context, fake_llm):
    fake_llm.reply(TRANSLATION_PROMPT, "SELECT customerName FROM customers ORDER BY customerName")
    fake_llm.reply(SUMMARY_PROMPT, "Alice, Bob")

    payload = asyncio.run(run_query_pipeline("Plot customer names"))

    assert payload["result"] == [{"customerName": "Alice"}, {"customerName": "Bob"}]
    assert payload["chart"] is None


def test_generation_failure_is_fatal(app_context, fake_llm):
    fake_llm.reply(TRANSLATION_PROMPT, RuntimeError("quota exceeded"))

    with pytest.raises(GenerationError):
        asyncio.run(run_query_pipeline("How many customers are there?"))

    assert fake_llm.prompts_for(SUMMARY_PROMPT) == []


def test_empty_generation_is_fatal(app_context, fake_llm):
    fake_llm.reply(TRANSLATION_PROMPT, "```sql\n```")

    with pytest.raises(GenerationError):
        asyncio.run(run_query_pipeline("How many customers are there?"))


def test_execution_failure_is_fatal(app_context, fake_llm):
    fake_llm.reply(TRANSLATION_PROMPT, "SELECT * FROM invoices")

    with pytest.raises(ExecutionError):
        asyncio.run(run_query_pipeline("Show all invoices"))

    assert fake_llm.prompts_for(SUMMARY_PROMPT) == []
    assert fake_llm.prompts_for(CHART_PROMPT) == []


def test_summary_failure_is_fatal(app_context, fake_llm):
    fake_llm.reply(TRANSLATION_PROMPT, "SELECT COUNT(*) AS n FROM customers")
    fake_llm.reply(SUMMARY_PROMPT, RuntimeError("model unavailable"))
    fake_llm.reply(CHART_PROMPT, "NO")

    with pytest.raises(SummarizationError):
        asyncio.run(run_query_pipeline("How many customers are there?"))
