"""
Request-scoped data model shared by the pipeline stages.
"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List


@dataclass(frozen=True)
class ColumnInfo:
    """One column of a table as reported by the database catalog."""
    name: str
    data_type: str
    full_type: str

    def to_dict(self) -> Dict[str, str]:
        """Serialize with the catalog field names used by the HTTP API."""
        return {
            "column_name": self.name,
            "data_type": self.data_type,
            "column_type": self.full_type,
        }


# table name -> columns in ordinal order
SchemaDescription = Dict[str, List[ColumnInfo]]

# one mapping per row, all rows share the projection's keys
ResultSet = List[Dict[str, Any]]


class DecimalString(str):
    """Decimal-string rendering of an integer too wide for a double."""
    __slots__ = ()


class ValueKind(str, Enum):
    """Closed set of shapes a result value can take."""
    STRING = "string"
    NUMBER = "number"
    DECIMAL_STRING = "decimal_string"
    NULL = "null"
    # dates, bytes, booleans and anything else a driver may hand back
    OTHER = "other"


def classify_value(value: Any) -> ValueKind:
    """Map a result value onto its ValueKind."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, DecimalString):
        return ValueKind.DECIMAL_STRING
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, bool):
        return ValueKind.OTHER
    if isinstance(value, (int, float, Decimal)):
        return ValueKind.NUMBER
    return ValueKind.OTHER
