"""Tests for exact-name contract lookups (abbreviations, columns, tables)."""

from __future__ import annotations

import pytest

from semantic_query.contract.lookup import expand_abbreviation, explain_column, explore_table
from semantic_query.contract.schema import SchemaContract
from semantic_query.errors import ErrorCode, NotFound


def test_expand_abbreviation(contract: SchemaContract) -> None:
    assert expand_abbreviation(contract, "cust") == "customer"


def test_expand_abbreviation_is_exact(contract: SchemaContract) -> None:
    with pytest.raises(NotFound) as exc_info:
        expand_abbreviation(contract, "CUST")
    assert exc_info.value.code == ErrorCode.NOT_FOUND
    assert str(exc_info.value) == "Abbreviation not found: CUST"


def test_explain_column_includes_business_rules(contract: SchemaContract) -> None:
    explanation = explain_column(contract, "so_hdr", "ord_stat")
    assert explanation.business_name == "Order Status"
    assert explanation.business_rules == ["Status codes: 1: 'open', 2: 'shipped'", "5: 'cancelled'"]


def test_explain_column_without_rules(contract: SchemaContract) -> None:
    assert explain_column(contract, "cust_mst", "c_name").business_rules == []


def test_explain_column_unknown_table_or_column(contract: SchemaContract) -> None:
    with pytest.raises(NotFound, match="Table not found: nope"):
        explain_column(contract, "nope", "c_name")
    with pytest.raises(NotFound, match="Column not found: nope in table cust_mst"):
        explain_column(contract, "cust_mst", "nope")


def test_explore_table_lists_columns_in_order(contract: SchemaContract) -> None:
    structure = explore_table(contract, "cust_mst")
    assert structure.table_name == "cust_mst"
    assert structure.business_name == "Customer"
    assert [(c.name, c.type) for c in structure.columns] == [
        ("c_id", "INTEGER"),
        ("c_name", "VARCHAR(100)"),
    ]


def test_explore_table_uses_physical_names_only(contract: SchemaContract) -> None:
    with pytest.raises(NotFound):
        explore_table(contract, "Customer")
