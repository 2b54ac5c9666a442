"""Read-only contract lookups by physical name.

Unlike the translation engine these helpers do no fuzzy matching: they answer questions about an
exact physical table/column name or abbreviation code.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from semantic_query.contract.schema import SchemaContract, TableDef
from semantic_query.errors import NotFound


class ColumnExplanation(BaseModel):
    """Business meaning of a single physical column."""

    model_config = ConfigDict(frozen=True)

    business_name: str
    description: str
    business_rules: list[str]


class ColumnSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    description: str


class TableStructure(BaseModel):
    """A table's business metadata plus its columns in declaration order."""

    model_config = ConfigDict(frozen=True)

    table_name: str
    business_name: str
    description: str
    columns: list[ColumnSummary]


def expand_abbreviation(contract: SchemaContract, abbreviation: str) -> str:
    """Return the glossary expansion for an abbreviation code (exact, case-sensitive key)."""

    expansion = contract.abbreviations.get(abbreviation)
    if not expansion:
        raise NotFound(f"Abbreviation not found: {abbreviation}")
    return expansion


def require_table(contract: SchemaContract, table_name: str) -> TableDef:
    """Return the table with this exact physical name, or raise `NotFound`."""

    table = contract.tables.get(table_name)
    if table is None:
        raise NotFound(f"Table not found: {table_name}")
    return table


def explain_column(contract: SchemaContract, table_name: str, column_name: str) -> ColumnExplanation:
    table = require_table(contract, table_name)
    column = table.columns.get(column_name)
    if column is None:
        raise NotFound(f"Column not found: {column_name} in table {table_name}")

    return ColumnExplanation(
        business_name=column.business_name,
        description=column.description,
        business_rules=list(column.business_rules),
    )


def explore_table(contract: SchemaContract, table_name: str) -> TableStructure:
    table = require_table(contract, table_name)
    return TableStructure(
        table_name=table_name,
        business_name=table.business_name,
        description=table.description,
        columns=[
            ColumnSummary(name=name, type=column.data_type, description=column.description)
            for name, column in table.columns.items()
        ],
    )
