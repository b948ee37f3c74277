"""
Chart series generation for query results.

Turns a result set into the bar-chart structure the frontend renders:

    {"type": "bar", "labels": [...], "datasets": [{"label": ..., "data": [...], ...}]}
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Dict, Any, Optional, Tuple, Union
import logging

from ...common.constants import (
    CHART_TYPE_BAR,
    CHART_BACKGROUND_COLOR,
    CHART_BORDER_COLOR,
    CHART_BORDER_WIDTH,
    DEFAULT_DATASET_LABEL
)
from ..errors import ChartTransformError
from ..models import DecimalString, ValueKind, classify_value

logger = logging.getLogger(__name__)

LABEL_KINDS = frozenset([ValueKind.STRING])
VALUE_KINDS = frozenset([ValueKind.NUMBER, ValueKind.DECIMAL_STRING])


@dataclass(frozen=True)
class ChartSkip:
    """No chart for this result, and why."""
    reason: str


ChartOutcome = Union[Dict[str, Any], ChartSkip]


def classify_columns(first_row: Dict[str, Any]) -> Tuple[Optional[str], Optional[str]]:
    """
    Pick the label and value columns from the first row.

    Keys are scanned in order: the first textual value becomes the label
    column, the first numeric value the value column. When either is missing
    the first key is used as label and the second as value. A column never
    plays both roles.
    """
    columns = list(first_row.keys())
    label_column = None
    value_column = None

    for column in columns:
        kind = classify_value(first_row[column])
        if kind in LABEL_KINDS and label_column is None:
            label_column = column
        elif kind in VALUE_KINDS and value_column is None:
            value_column = column
        if label_column is not None and value_column is not None:
            return label_column, value_column

    # Fallback to the first two columns
    if label_column is None and columns:
        label_column = columns[0]
    if value_column is None and len(columns) > 1:
        value_column = columns[1]
    if label_column is not None and label_column == value_column:
        label_column = columns[0]
        value_column = columns[1] if len(columns) > 1 else None

    return label_column, value_column


def _chart_number(value: Any) -> Any:
    """Numeric-looking values as floats; anything else unchanged."""
    if isinstance(value, (DecimalString, Decimal)):
        return float(value)
    return value


def to_chart_series(result: Any) -> Optional[Dict[str, Any]]:
    """
    Build a bar chart series from a result set.

    Returns None when the result is empty, is not a list of row mappings, or
    has no usable label/value pair. Raises ChartTransformError when the rows
    cannot be read as a series (e.g. a row missing the chosen column).
    """
    if not isinstance(result, list) or not result:
        return None
    if not all(isinstance(row, dict) for row in result):
        return None

    label_column, value_column = classify_columns(result[0])
    if label_column is None or value_column is None:
        logger.error("Could not determine label and value columns for charting.")
        return None

    try:
        labels = [row[label_column] for row in result]
        data = [_chart_number(row[value_column]) for row in result]
    except (KeyError, TypeError, ValueError) as e:
        raise ChartTransformError(f"Could not build chart series: {e}") from e

    return {
        "type": CHART_TYPE_BAR,
        "labels": labels,
        "datasets": [
            {
                "label": value_column or DEFAULT_DATASET_LABEL,
                "data": data,
                "backgroundColor": CHART_BACKGROUND_COLOR,
                "borderColor": CHART_BORDER_COLOR,
                "borderWidth": CHART_BORDER_WIDTH,
            }
        ],
    }


def build_chart(result: Any) -> ChartOutcome:
    """Run to_chart_series, turning every failure into a ChartSkip."""
    try:
        series = to_chart_series(result)
    except ChartTransformError as e:
        logger.error(f"Error in chart transformation: {e}")
        return ChartSkip(reason=e.message)

    if series is None:
        return ChartSkip(reason="Result has no label/value columns to chart")
    return series
