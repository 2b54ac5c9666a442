"""Pytest configuration.

The package uses a `src/` layout. This conftest ensures tests can import `semantic_query` when
running `pytest` without installing the package, and provides the shared contract fixtures.
"""

from __future__ import annotations

import copy
import sys
from pathlib import Path

import pytest

# Ensure `import semantic_query` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from semantic_query.contract.schema import SchemaContract  # noqa: E402

FIXTURES = Path(__file__).resolve().parent / "fixtures"

SAMPLE_CONTRACT: dict = {
    "tables": {
        "cust_mst": {
            "businessName": "Customer",
            "description": "Master record for every customer.",
            "columns": {
                "c_id": {
                    "businessName": "Customer ID",
                    "description": "Unique identifier for a customer.",
                    "dataType": "INTEGER",
                },
                "c_name": {
                    "businessName": "Customer Name",
                    "description": "Full name of the customer.",
                    "dataType": "VARCHAR(100)",
                },
            },
        },
        "so_hdr": {
            "businessName": "Sales Orders",
            "description": "Sales order headers.",
            "columns": {
                "ord_id": {
                    "businessName": "Order ID",
                    "description": "Unique identifier for a sales order.",
                    "dataType": "INTEGER",
                },
                "ord_stat": {
                    "businessName": "Order Status",
                    "description": "Lifecycle status of the order.",
                    "dataType": "INTEGER",
                    "businessRules": [
                        "Status codes: 1: 'open', 2: 'shipped'",
                        "5: 'cancelled'",
                    ],
                },
            },
        },
    },
    "abbreviations": {"cust": "customer", "mst": "master", "so": "sales order"},
}


@pytest.fixture()
def contract_obj() -> dict:
    return copy.deepcopy(SAMPLE_CONTRACT)


@pytest.fixture()
def contract() -> SchemaContract:
    return SchemaContract.model_validate(SAMPLE_CONTRACT)


@pytest.fixture()
def contract_path() -> Path:
    return FIXTURES / "datacontract.yml"
