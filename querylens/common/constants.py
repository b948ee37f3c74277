"""
Common constants used across the application.
"""

# Chart decision
CHART_KEYWORDS = ('chart', 'plot', 'graph', 'visualize')
CHART_DECISION_YES = "YES"

# Chart series
CHART_TYPE_BAR = "bar"
CHART_BACKGROUND_COLOR = "rgba(75, 192, 192, 0.6)"
CHART_BORDER_COLOR = "rgba(75, 192, 192, 1)"
CHART_BORDER_WIDTH = 1
DEFAULT_DATASET_LABEL = "Value"

# Aggregate functions recognised by the chart rewriter (lowercase)
AGGREGATE_FUNCTIONS = ('sum', 'count', 'avg', 'min', 'max')
AGGREGATE_ALIAS_SUFFIX = "_value"

# Largest integer a double (and therefore a JavaScript Number) holds exactly
MAX_SAFE_INTEGER = 2 ** 53 - 1

# API messages
ERROR_QUERY_REQUIRED = "Query is required"
ERROR_SCHEMA_FETCH = "Failed to fetch table and column names"
ERROR_QUERY_FALLBACK = "Failed to process query"
BACKEND_BANNER = "Backend is running!"
