"""
Utility modules for the query pipeline.
"""
from .sql_utils import extract_sql_from_response
from .query_rewriter import augment_for_charting
from .data_utils import normalize_result

__all__ = [
    'extract_sql_from_response',
    'augment_for_charting',
    'normalize_result'
]
