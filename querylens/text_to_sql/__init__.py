"""
Text-to-SQL Pipeline Package
Natural language question -> SQL -> result, prose summary and optional chart.
"""

from .pipeline.graph import query_pipeline_graph as graph, run_query_pipeline
from ..common.config import config

__all__ = [
    "graph",
    "run_query_pipeline",
    "config"
]
