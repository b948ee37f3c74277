"""
Query pipeline graph implementation.
Uses LangGraph to orchestrate the pipeline:

    schema_loader -> sql_generator -> sql_rewriter -> executor -+-> summarizer ----+-> END
                                                                +-> chart_builder -+

Summary and chart branches run concurrently once the result set exists.
Fatal stage errors propagate out of ainvoke; the chart branch never raises.
"""
from typing import Any, Dict
from langgraph.graph import StateGraph, START, END
import logging

from .state import QueryPipelineState
from .nodes.schema_loader import schema_loader
from .nodes.sql_generator import sql_generator
from .nodes.sql_rewriter import sql_rewriter
from .nodes.executor import executor
from .nodes.summarizer import summarizer
from .nodes.chart_builder import chart_builder

logger = logging.getLogger(__name__)


def create_query_pipeline_graph():
    """Create and compile the query pipeline graph."""
    workflow = StateGraph(QueryPipelineState)

    workflow.add_node("schema_loader", schema_loader)
    workflow.add_node("sql_generator", sql_generator)
    workflow.add_node("sql_rewriter", sql_rewriter)
    workflow.add_node("executor", executor)
    workflow.add_node("summarizer", summarizer)
    workflow.add_node("chart_builder", chart_builder)

    # Sequential stages
    workflow.add_edge(START, "schema_loader")
    workflow.add_edge("schema_loader", "sql_generator")
    workflow.add_edge("sql_generator", "sql_rewriter")
    workflow.add_edge("sql_rewriter", "executor")

    # Fan out: summary and chart are independent
    workflow.add_edge("executor", "summarizer")
    workflow.add_edge("executor", "chart_builder")

    workflow.add_edge("summarizer", END)
    workflow.add_edge("chart_builder", END)

    return workflow.compile()


# Create the compiled graph
query_pipeline_graph = create_query_pipeline_graph()


async def run_query_pipeline(question: str) -> Dict[str, Any]:
    """
    Run one question through the pipeline and assemble the response payload.

    Returns:
        {"query": sql, "result": rows, "summary": text, "chart": series or None}

    Raises:
        QueryPipelineError: From any fatal stage
    """
    logger.info(f"Received user query: {question}")
    state = await query_pipeline_graph.ainvoke({"question": question})

    return {
        "query": state["generated_sql"],
        "result": state["query_results"],
        "summary": state["summary"],
        "chart": state.get("chart"),
    }
