"""
Result normalization for JSON-safe responses.
"""
from typing import Any, Mapping

from ...common.constants import MAX_SAFE_INTEGER
from ..models import DecimalString


def normalize_result(value: Any) -> Any:
    """
    Return a copy of ``value`` with every wide integer rendered as a DecimalString.

    Walks lists, tuples and mappings to any depth. Integers whose magnitude
    exceeds MAX_SAFE_INTEGER lose precision once a client parses them as
    doubles, so they are converted to their decimal-string form. Everything
    else is returned untouched, and the input is never mutated.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if abs(value) > MAX_SAFE_INTEGER:
            return DecimalString(value)
        return value
    if isinstance(value, Mapping):
        return {key: normalize_result(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_result(item) for item in value]
    return value
