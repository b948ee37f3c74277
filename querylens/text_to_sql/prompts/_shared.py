"""
Shared prompt components and utilities.
"""
from ..models import SchemaDescription


def format_schema_text(schema: SchemaDescription) -> str:
    """Render a schema as one '- table: col (type), ...' line per table."""
    lines = []
    for table_name, columns in schema.items():
        cols = ", ".join(f"{column.name} ({column.data_type})" for column in columns)
        lines.append(f"- {table_name}: {cols}")
    return "\n".join(lines)


# Upstream guard for the chart rewriter: ranked/aggregated answers should
# already project the value they rank by.
ENTITY_VALUE_RULE = (
    "When the query asks for a comparison, ranking, or values associated with entities "
    "(e.g., sales by customer, products by category), ensure the SELECT clause includes "
    "both the entity's identifying column(s) and the calculated value(s)."
)

SUMMARY_STYLE_RULES = """Please write a concise and natural answer listing the relevant data clearly without repeating JSON keys.
- If the result contains customer names, list them separated by commas.
- If the result contains multiple rows, you can summarize as "There are X entries: ..." or list items.
- Do not include any code blocks or raw JSON in your response.
- Make it friendly and easy to read."""

CHART_EXAMPLES = [
    "Show me the total sales by customer",
    "What are the sales trends over time?",
    "Show the distribution of products by category",
    "Compare the sales performance of different employees",
    "What are the top 10 selling products?",
]
