"""Deterministic SQL assembler.

The assembler turns a resolved table plus business-level fields and filters into a single
parameterized `SELECT`. Identifiers come exclusively from contract resolution and operators from
an allowlist; every caller-supplied literal becomes a `?` parameter.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from semantic_query.errors import UnsupportedOperation
from semantic_query.intent.schema import WILDCARD, FilterSpec
from semantic_query.resolve.names import TableRef, resolve_column
from semantic_query.resolve.policy import DEFAULT_POLICY, ResolutionPolicy
from semantic_query.resolve.values import map_value

PLACEHOLDER = "?"

_ALLOWED_OPERATORS: dict[str, str] = {
    "=": "=",
    "!=": "<>",
    "<>": "<>",
    ">": ">",
    ">=": ">=",
    "<": "<",
    "<=": "<=",
}

Param = str | int


@dataclass(frozen=True)
class ResolvedQuery:
    """A parameterized SQL statement ready to hand to a query executor."""

    sql_query: str
    params: tuple[Param, ...]

    def to_payload(self) -> dict[str, object]:
        return {"sql_query": self.sql_query, "params": list(self.params)}


def _where_and(clauses: list[str]) -> str:
    if not clauses:
        return ""
    return " WHERE " + " AND ".join(clauses)


def _select_list(
        table: TableRef,
        columns: Sequence[str],
        policy: ResolutionPolicy,
) -> str:
    selected: list[str] = []
    for name in columns:
        if name == WILDCARD:
            selected.append(", ".join(table.table.columns))
            continue
        selected.append(resolve_column(table, name, policy=policy).physical_name)
    return ", ".join(selected)


def assemble(
        table: TableRef,
        columns: Sequence[str],
        filters: Sequence[FilterSpec] = (),
        *,
        policy: ResolutionPolicy = DEFAULT_POLICY,
) -> ResolvedQuery:
    """Build `SELECT <columns> FROM <table> [WHERE ...];` with positional parameters.

    Raises:
        InvalidInput: If a requested field or filter column does not resolve in `table`.
        UnsupportedOperation: If a filter uses an operator outside the allowlist.
    """

    select_sql = _select_list(table, columns, policy)

    clauses: list[str] = []
    params: list[Param] = []
    for spec in filters:
        column = resolve_column(table, spec.column, policy=policy)
        operator = _ALLOWED_OPERATORS.get(spec.operator)
        if operator is None:
            raise UnsupportedOperation(operator=spec.operator)
        clauses.append(f"{column.physical_name} {operator} {PLACEHOLDER}")
        params.append(map_value(column.column, spec.value))

    sql = f"SELECT {select_sql} FROM {table.physical_name}{_where_and(clauses)};"
    return ResolvedQuery(sql_query=sql, params=tuple(params))
