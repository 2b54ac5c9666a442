"""Semantic query translation: description -> parameterized SQL.

The pipeline is a single linear pass with no shared state:
    parse (sentence rules) -> resolve table -> resolve fields/filters + map values -> assemble.
Any failure aborts the call; no partial query is ever returned.
"""

from __future__ import annotations

from semantic_query.contract.schema import SchemaContract
from semantic_query.intent.rules_parser import parse_intent
from semantic_query.resolve.names import resolve_table
from semantic_query.resolve.policy import DEFAULT_POLICY, ResolutionPolicy
from semantic_query.sql.builder import ResolvedQuery, assemble


def translate(
        contract: SchemaContract,
        description: str,
        *,
        policy: ResolutionPolicy = DEFAULT_POLICY,
) -> ResolvedQuery:
    """Translate a natural-language description against a contract snapshot.

    Raises:
        UnsupportedOperation: If the description matches no supported sentence shape.
        InvalidInput: If the target entity, a field, or a filter column does not resolve.
    """

    intent = parse_intent(description)
    table = resolve_table(contract, intent.target, policy=policy)
    return assemble(table, intent.columns, intent.filters, policy=policy)
