"""Tests for column classification and bar chart series construction."""
import datetime
from decimal import Decimal

import pytest

from querylens.common.constants import (
    CHART_BACKGROUND_COLOR,
    CHART_BORDER_COLOR,
    CHART_BORDER_WIDTH
)
from querylens.text_to_sql.errors import ChartTransformError
from querylens.text_to_sql.models import DecimalString
from querylens.text_to_sql.utils.chart_generator import (
    ChartSkip,
    build_chart,
    classify_columns,
    to_chart_series
)


def test_builds_bar_series_from_label_and_value_columns():
    result = [
        {"customerName": "Alice", "sum_value": 500},
        {"customerName": "Bob", "sum_value": 300},
    ]

    series = to_chart_series(result)

    assert series == {
        "type": "bar",
        "labels": ["Alice", "Bob"],
        "datasets": [{
            "label": "sum_value",
            "data": [500, 300],
            "backgroundColor": CHART_BACKGROUND_COLOR,
            "borderColor": CHART_BORDER_COLOR,
            "borderWidth": CHART_BORDER_WIDTH,
        }],
    }


def test_classification_skips_non_matching_columns():
    row = {"customerNumber": 103, "customerName": "Alice", "country": "France", "total": 9.5}

    assert classify_columns(row) == ("customerName", "customerNumber")


def test_fallback_to_first_two_columns():
    row = {"orderDate": datetime.date(2004, 1, 1), "shipped": datetime.date(2004, 1, 5)}

    assert classify_columns(row) == ("orderDate", "shipped")


def test_column_never_fills_both_roles():
    assert classify_columns({"total": 10, "other": None}) == ("total", "other")
    assert classify_columns({"name": "Alice"}) == ("name", None)
    assert classify_columns({}) == (None, None)


def test_single_column_result_has_no_series():
    assert to_chart_series([{"customerName": "Alice"}]) is None


def test_empty_and_malformed_results_have_no_series():
    assert to_chart_series([]) is None
    assert to_chart_series({"customerName": "Alice"}) is None
    assert to_chart_series([("Alice", 1)]) is None


def test_wide_integers_and_decimals_are_plotted_as_numbers():
    result = [
        {"product": "A", "revenue": DecimalString(2 ** 60)},
        {"product": "B", "revenue": Decimal("12.50")},
    ]

    series = to_chart_series(result)

    assert series["datasets"][0]["data"] == [float(2 ** 60), 12.5]


def test_row_missing_chosen_column_raises_transform_error():
    result = [{"name": "A", "value": 1}, {"name": "B"}]

    with pytest.raises(ChartTransformError) as exc_info:
        to_chart_series(result)

    assert exc_info.value.fatal is False


def test_build_chart_returns_skip_instead_of_raising():
    assert isinstance(build_chart([{"name": "A", "value": 1}, {"name": "B"}]), ChartSkip)
    assert isinstance(build_chart([]), ChartSkip)
    assert build_chart([{"name": "A", "value": 1}])["labels"] == ["A"]
