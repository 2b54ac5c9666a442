"""Rules-based sentence parser.

This parser is intentionally strict and deterministic:
    - it only recognizes a closed, ordered set of sentence shapes,
    - the first rule whose pattern matches the whole description decides the outcome,
    - some rules claim a known shape only to reject it (join-shaped questions), so callers get a
      stable `UnsupportedOperation` rather than a generic "no match".

Adding a sentence shape is a data change: append a `SentenceRule` to `RULES`.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from pydantic import ValidationError

from semantic_query.errors import UnsupportedOperation
from semantic_query.intent.normalize import normalize_description
from semantic_query.intent.schema import WILDCARD, FilterSpec, ParsedIntent

# Logical fields resolved specially by the name resolver.
ID_FIELD = "id"
STATUS_FIELD = "status"
NAME_FIELD = "name"

_END = r"\s*[.?!]?"


@dataclass(frozen=True)
class Matched:
    """The rule produced an intent."""

    intent: ParsedIntent


@dataclass(frozen=True)
class Unsupported:
    """The rule claimed the description but the shape is not implemented."""

    rule: str


ParseOutcome = Matched | Unsupported
Extractor = Callable[[re.Match[str]], ParseOutcome]


@dataclass(frozen=True)
class SentenceRule:
    """A sentence shape: a full-description pattern plus the outcome it produces."""

    name: str
    pattern: re.Pattern[str]
    extract: Extractor


def _rule(name: str, pattern: str, extract: Extractor) -> SentenceRule:
    compiled = re.compile(pattern + _END, re.IGNORECASE)
    return SentenceRule(name=name, pattern=compiled, extract=extract)


def _column_for_entity_with_id(match: re.Match[str]) -> ParseOutcome:
    return Matched(
        ParsedIntent(
            target=match.group("entity"),
            columns=(match.group("column"),),
            filters=(FilterSpec(column=ID_FIELD, operator="=", value=match.group("id")),),
        )
    )


def _entities_with_status(match: re.Match[str]) -> ParseOutcome:
    return Matched(
        ParsedIntent(
            target=match.group("entity"),
            columns=(ID_FIELD,),
            filters=(FilterSpec(column=STATUS_FIELD, operator="=", value=match.group("value")),),
        )
    )


def _list_all_in_collection(match: re.Match[str]) -> ParseOutcome:
    # The quoted qualifier names the table; the leading noun is only a restatement of it.
    return Matched(ParsedIntent(target=match.group("qualifier"), columns=(WILDCARD,)))


def _name_of_entity_with_id(match: re.Match[str]) -> ParseOutcome:
    return Matched(
        ParsedIntent(
            target=match.group("entity"),
            columns=(NAME_FIELD,),
            filters=(FilterSpec(column=ID_FIELD, operator="=", value=match.group("id")),),
        )
    )


def _requires_join(name: str) -> Extractor:
    def extract(_match: re.Match[str]) -> ParseOutcome:
        return Unsupported(rule=name)

    return extract


RULES: tuple[SentenceRule, ...] = (
    # "Show me the Customer Name for the customer with ID 4."
    _rule(
        "column_for_entity_with_id",
        r"show me the (?P<column>.+?) for the (?P<entity>.+?) with id (?P<id>\d+)",
        _column_for_entity_with_id,
    ),
    # "Which sales orders are cancelled?"
    _rule(
        "entities_with_status",
        r"which (?P<entity>.+?) are (?P<value>.+?)",
        _entities_with_status,
    ),
    # "List all products in the 'Product Catalog'."
    _rule(
        "list_all_in_collection",
        r"list all (?P<entity>.+?) in the (?P<quote>['\"])(?P<qualifier>.+?)(?P=quote)",
        _list_all_in_collection,
    ),
    # "What is the name of the product with ID 102?"
    _rule(
        "name_of_entity_with_id",
        r"what is the name of the (?P<entity>.+?) with id (?P<id>\d+)",
        _name_of_entity_with_id,
    ),
    # "What was the quantity of each product sold in order number 1001?"
    _rule(
        "quantity_per_product_in_order",
        r"what was the quantity of each product sold in order number (?P<order>\d+)",
        _requires_join("quantity_per_product_in_order"),
    ),
    # "Find the name of the customer who placed order number 1004."
    _rule(
        "customer_who_placed_order",
        r"find the name of the customer who placed order number (?P<order>\d+)",
        _requires_join("customer_who_placed_order"),
    ),
)


def match_rules(description: str, rules: Sequence[SentenceRule] = RULES) -> ParseOutcome | None:
    """Return the outcome of the first rule matching the whole description, or `None`."""

    text = normalize_description(description)
    for rule in rules:
        match = rule.pattern.fullmatch(text)
        if match is not None:
            return rule.extract(match)
    return None


def parse_intent(description: str, rules: Sequence[SentenceRule] = RULES) -> ParsedIntent:
    """Parse a description into a validated intent.

    Raises:
        UnsupportedOperation: If no rule matches, or the matching rule is unimplemented.
    """

    try:
        outcome = match_rules(description, rules)
    except ValidationError as exc:
        # An extractor produced an intent that fails validation (e.g. a blank capture).
        raise UnsupportedOperation() from exc

    if outcome is None:
        raise UnsupportedOperation()
    if isinstance(outcome, Unsupported):
        raise UnsupportedOperation(rule=outcome.rule)
    return outcome.intent
