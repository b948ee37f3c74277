"""
Schema loader node for the query pipeline.
Reads the live catalog and renders it for the translation prompt.
"""
from typing import Dict, Any, Optional
import logging

from ..state import QueryPipelineState, create_success_step
from ...prompts import format_schema_text
from ...tools.schema_inspector import SchemaInspector

logger = logging.getLogger(__name__)


def schema_loader(state: QueryPipelineState,
                  inspector: Optional[SchemaInspector] = None) -> Dict[str, Any]:
    """Fetch the current schema; SchemaFetchError propagates and ends the request."""
    inspector = inspector or SchemaInspector()
    schema = inspector.fetch_schema()

    return {
        "schema_text": format_schema_text(schema),
        "reasoning_log": [create_success_step(
            "Schema Introspection",
            f"Loaded {len(schema)} tables from the database catalog."
        )]
    }
