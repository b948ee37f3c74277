"""
Prompt templates for the query pipeline.
"""
from ._shared import format_schema_text
from .sql_generation import build_translation_prompt
from .result_interpretation import build_summary_prompt
from .chart_decision import build_chart_decision_prompt

__all__ = [
    'format_schema_text',
    'build_translation_prompt',
    'build_summary_prompt',
    'build_chart_decision_prompt'
]
