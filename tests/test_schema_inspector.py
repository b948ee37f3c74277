"""Tests for live schema introspection."""
import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from querylens.text_to_sql.errors import SchemaFetchError
from querylens.text_to_sql.models import ColumnInfo
from querylens.text_to_sql.tools.schema_inspector import (
    SchemaInspector,
    fetch_schema,
    group_catalog_rows
)


def test_group_catalog_rows_keeps_column_order():
    rows = [
        ("customers", "customerNumber", "int", "int"),
        ("customers", "customerName", "varchar", "varchar(50)"),
        ("orders", "orderNumber", "int", "int"),
    ]

    assert group_catalog_rows(rows) == {
        "customers": [
            ColumnInfo("customerNumber", "int", "int"),
            ColumnInfo("customerName", "varchar", "varchar(50)"),
        ],
        "orders": [ColumnInfo("orderNumber", "int", "int")],
    }


def test_group_catalog_rows_empty():
    assert group_catalog_rows([]) == {}


def test_fetch_schema_reads_tables_and_columns(engine):
    schema = fetch_schema(engine)

    assert list(schema) == ["customers", "payments"]
    assert [column.name for column in schema["customers"]] == [
        "customerNumber", "customerName", "country"
    ]
    name_column = schema["customers"][1]
    assert name_column.data_type == "varchar"
    assert name_column.full_type == "varchar(50)"
    assert name_column.to_dict() == {
        "column_name": "customerName",
        "data_type": "varchar",
        "column_type": "varchar(50)",
    }


def test_schema_is_read_fresh_each_call(engine):
    assert "offices" not in fetch_schema(engine)

    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE offices (officeCode VARCHAR(10), city VARCHAR(50))"))

    assert [column.name for column in fetch_schema(engine)["offices"]] == ["officeCode", "city"]


def test_views_are_listed_with_tables(engine):
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE VIEW big_payments AS SELECT customerName, amount FROM payments WHERE amount > 250"
        ))

    schema = fetch_schema(engine)

    assert list(schema) == ["big_payments", "customers", "payments"]
    assert [column.name for column in schema["big_payments"]] == ["customerName", "amount"]


def test_catalog_failure_raises_schema_fetch_error(engine, monkeypatch):
    def broken(self):
        raise OperationalError("SELECT ...", {}, Exception("connection refused"))

    monkeypatch.setattr(SchemaInspector, "fetch_catalog_rows", broken)

    with pytest.raises(SchemaFetchError):
        SchemaInspector(engine).fetch_schema()
