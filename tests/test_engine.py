"""End-to-end translation tests: description -> parameterized SQL."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from semantic_query.contract.loader import load_contract
from semantic_query.contract.schema import SchemaContract
from semantic_query.engine import translate
from semantic_query.errors import InvalidInput, UnsupportedOperation
from semantic_query.intent.rules_parser import parse_intent
from semantic_query.resolve.policy import MostSpecificPolicy

SUPPORTED_DESCRIPTIONS = [
    "Show me the Customer Name for the customer with ID 4.",
    "show me the name for the customer with id 12345",
    "Which sales orders are cancelled?",
    "Which sales orders are shipped?",
    "Which sales orders are 3?",
    "What is the name of the customer with ID 9?",
    "List all customers in the 'Customer'.",
]


def test_scenario_column_for_customer_with_id(contract: SchemaContract) -> None:
    result = translate(contract, "Show me the Customer Name for the customer with ID 4.")
    assert result.sql_query == "SELECT c_name FROM cust_mst WHERE c_id = ?;"
    assert result.params == ("4",)


def test_scenario_sales_orders_with_status(contract: SchemaContract) -> None:
    result = translate(contract, "Which sales orders are cancelled?")
    assert result.sql_query == "SELECT ord_id FROM so_hdr WHERE ord_stat = ?;"
    assert result.params == (5,)


def test_scenario_join_shaped_question_is_unsupported(contract: SchemaContract) -> None:
    with pytest.raises(UnsupportedOperation):
        translate(contract, "What was the quantity of each product sold in order number 1001?")


def test_scenario_unknown_column_is_invalid_input(contract: SchemaContract) -> None:
    with pytest.raises(InvalidInput) as exc_info:
        translate(contract, "Show me the Foo for the customer with ID 4.")
    assert exc_info.value.term == "Foo"
    assert "Foo" in str(exc_info.value)


def test_scenario_gibberish_is_unsupported(contract: SchemaContract) -> None:
    with pytest.raises(UnsupportedOperation) as exc_info:
        translate(contract, "gibberish with no structure")
    assert exc_info.value.rule is None


@pytest.mark.parametrize(
    "description",
    [
        "Show me the Customer Name for the invoice with ID 4.",
        "Which shipments are late?",
        "What is the name of the warehouse with ID 3?",
        "List all rows in the 'Ledger'.",
    ],
)
def test_unknown_entity_is_invalid_input(contract: SchemaContract, description: str) -> None:
    with pytest.raises(InvalidInput) as exc_info:
        translate(contract, description)
    assert exc_info.value.scope is None


@pytest.mark.parametrize(
    "description",
    [
        "What was the quantity of each product sold in order number 1001?",
        "Find the name of the customer who placed order number 1004.",
    ],
)
def test_join_shaped_questions_never_resolve(contract: SchemaContract, description: str) -> None:
    with pytest.raises(UnsupportedOperation):
        translate(contract, description)
    with pytest.raises(UnsupportedOperation):
        translate(contract, description, policy=MostSpecificPolicy())


@pytest.mark.parametrize("description", SUPPORTED_DESCRIPTIONS)
def test_translation_is_deterministic(contract: SchemaContract, description: str) -> None:
    first = translate(contract, description)
    second = translate(contract, description)
    assert first.sql_query == second.sql_query
    assert first.params == second.params


@pytest.mark.parametrize("description", SUPPORTED_DESCRIPTIONS)
def test_placeholder_count_matches_params(contract: SchemaContract, description: str) -> None:
    result = translate(contract, description)
    assert result.sql_query.count("?") == len(result.params)
    assert result.sql_query.endswith(";")


@pytest.mark.parametrize("description", SUPPORTED_DESCRIPTIONS)
def test_filter_literals_never_leak_into_sql(contract: SchemaContract, description: str) -> None:
    result = translate(contract, description)
    tokens = set(re.findall(r"[A-Za-z0-9_]+", result.sql_query))
    for spec in parse_intent(description).filters:
        assert spec.value not in tokens


def test_wildcard_selection_lists_every_column(contract: SchemaContract) -> None:
    result = translate(contract, "List all customers in the 'Customer'.")
    assert result.sql_query == "SELECT c_id, c_name FROM cust_mst;"
    assert result.params == ()


def test_contract_is_not_mutated_by_translation(contract: SchemaContract) -> None:
    before = contract.model_dump()
    translate(contract, "Which sales orders are cancelled?")
    assert contract.model_dump() == before


@pytest.mark.parametrize(
    ("question", "expected_sql", "expected_params"),
    [
        (
            "Show me the customer name for the customer with id 123",
            "SELECT c_name FROM cust_mst WHERE c_id = ?;",
            ("123",),
        ),
        (
            "Which sales orders are cancelled?",
            "SELECT ord_id FROM so_hdr WHERE ord_stat = ?;",
            (5,),
        ),
        (
            "List all products in the 'Product Catalog'.",
            "SELECT p_id, p_name, p_price FROM prod_cat;",
            (),
        ),
        (
            "What is the name of the product with ID 102?",
            "SELECT p_name FROM prod_cat WHERE p_id = ?;",
            ("102",),
        ),
        (
            "Which sales orders are SHIPPED?",
            "SELECT ord_id FROM so_hdr WHERE ord_stat = ?;",
            (2,),
        ),
    ],
)
def test_questions_against_contract_file(
        contract_path: Path,
        question: str,
        expected_sql: str,
        expected_params: tuple,
) -> None:
    result = translate(load_contract(contract_path), question)
    assert result.sql_query == expected_sql
    assert result.params == expected_params
