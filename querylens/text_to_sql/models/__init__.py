"""
Data model for schema descriptions and query results.
"""
from .base import (
    ColumnInfo,
    SchemaDescription,
    ResultSet,
    DecimalString,
    ValueKind,
    classify_value
)

__all__ = [
    'ColumnInfo',
    'SchemaDescription',
    'ResultSet',
    'DecimalString',
    'ValueKind',
    'classify_value'
]
