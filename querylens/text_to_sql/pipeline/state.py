"""
State definition for the query pipeline.
"""
from typing import TypedDict, List, Dict, Any, Optional
from typing_extensions import Annotated
import operator


class ReasoningStep(TypedDict):
    """A step in the pipeline's reasoning process."""
    step_name: str
    details: str
    status: str  # "✅", "⚠️", "❌"


class QueryPipelineState(TypedDict, total=False):
    """State for one question flowing through the pipeline."""

    # Input
    question: str

    # Schema
    schema_text: str

    # Generation & rewrite
    generated_sql: str

    # Execution
    query_results: List[Dict[str, Any]]
    execution_time_ms: Optional[float]

    # Presentation
    summary: str
    chart: Optional[Dict[str, Any]]
    chart_source: Optional[str]

    # Reasoning Log (written concurrently by the summary and chart branches)
    reasoning_log: Annotated[List[ReasoningStep], operator.add]


def create_reasoning_step(step_name: str, details: str, status: str = "✅") -> ReasoningStep:
    """Create a standardized reasoning log entry."""
    return ReasoningStep(step_name=step_name, details=details, status=status)


def create_success_step(step_name: str, details: str) -> ReasoningStep:
    """Create a successful reasoning step (✅)."""
    return create_reasoning_step(step_name, details, "✅")


def create_warning_step(step_name: str, details: str) -> ReasoningStep:
    """Create a warning reasoning step (⚠️)."""
    return create_reasoning_step(step_name, details, "⚠️")
