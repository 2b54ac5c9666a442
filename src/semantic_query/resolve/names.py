"""Business-name to physical-identifier resolution.

Every identifier that ends up in generated SQL comes out of this module, and only ever as a key
of the contract's `tables` / `columns` mappings. User text is used for matching, never emitted.
"""

from __future__ import annotations

from dataclasses import dataclass

from semantic_query.contract.schema import ColumnDef, SchemaContract, TableDef
from semantic_query.errors import InvalidInput
from semantic_query.resolve.policy import DEFAULT_POLICY, Candidate, ResolutionPolicy

# Physical schemas encode these logical fields inconsistently, so they are matched by the shape of
# the physical column name before any business-name matching.
_ID_SUFFIXES = ("_id",)
_STATUS_SUFFIXES = ("_stat", "_status")


@dataclass(frozen=True)
class TableRef:
    physical_name: str
    table: TableDef


@dataclass(frozen=True)
class ColumnRef:
    physical_name: str
    column: ColumnDef


def _contains(business_name: str, term: str) -> bool:
    return term.casefold() in business_name.casefold()


def find_table(
        contract: SchemaContract,
        business_name: str,
        *,
        policy: ResolutionPolicy = DEFAULT_POLICY,
) -> TableRef | None:
    """Resolve a table by case-insensitive substring of its business name; `None` if absent."""

    candidates = [
        Candidate(physical_name=name, business_name=table.business_name, definition=table)
        for name, table in contract.tables.items()
        if _contains(table.business_name, business_name)
    ]
    chosen = policy.choose(business_name, candidates)
    if chosen is None:
        return None
    return TableRef(physical_name=chosen.physical_name, table=chosen.definition)


def _find_logical_column(table: TableDef, logical: str) -> ColumnRef | None:
    for name, column in table.columns.items():
        if logical == "id" and (name == "id" or name.endswith(_ID_SUFFIXES)):
            return ColumnRef(physical_name=name, column=column)
        if logical == "status" and name.endswith(_STATUS_SUFFIXES):
            return ColumnRef(physical_name=name, column=column)
    return None


def find_column(
        table: TableDef,
        business_name: str,
        *,
        policy: ResolutionPolicy = DEFAULT_POLICY,
) -> ColumnRef | None:
    """Resolve a column of `table`; `None` if absent.

    The logical fields `id` and `status` are matched by physical-name suffix first (first column
    in declaration order). If no column has the expected shape, or for any other name, the term is
    matched as a case-insensitive substring of each column's business name.
    """

    logical = business_name.strip().lower()
    if logical in {"id", "status"}:
        ref = _find_logical_column(table, logical)
        if ref is not None:
            return ref

    candidates = [
        Candidate(physical_name=name, business_name=column.business_name, definition=column)
        for name, column in table.columns.items()
        if _contains(column.business_name, business_name)
    ]
    chosen = policy.choose(business_name, candidates)
    if chosen is None:
        return None
    return ColumnRef(physical_name=chosen.physical_name, column=chosen.definition)


def resolve_table(
        contract: SchemaContract,
        business_name: str,
        *,
        policy: ResolutionPolicy = DEFAULT_POLICY,
) -> TableRef:
    """Like `find_table`, but raise `InvalidInput` naming the term when unresolved."""

    ref = find_table(contract, business_name, policy=policy)
    if ref is None:
        raise InvalidInput(business_name)
    return ref


def resolve_column(
        table: TableRef,
        business_name: str,
        *,
        policy: ResolutionPolicy = DEFAULT_POLICY,
) -> ColumnRef:
    """Like `find_column`, but raise `InvalidInput` naming the term and the table searched."""

    ref = find_column(table.table, business_name, policy=policy)
    if ref is None:
        raise InvalidInput(business_name, scope=table.physical_name)
    return ref
