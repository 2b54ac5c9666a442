"""Coded-value mapping through a column's business rules.

Business rules are free text. A rule encodes a value map with entries shaped like `5: 'cancelled'`,
anywhere in the string and possibly several per rule. Labels are taken up to the first closing
quote; there is no escaping, so a label cannot contain `'`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from semantic_query.contract.schema import ColumnDef

_VALUE_CODE_RE = re.compile(r"(\d+):\s*'(.*?)'")


@dataclass(frozen=True)
class ValueCode:
    code: int
    label: str


def parse_value_codes(rule_text: str) -> list[ValueCode]:
    """Extract every `<code>: '<label>'` entry from a rule, in order of appearance."""

    return [
        ValueCode(code=int(match.group(1)), label=match.group(2))
        for match in _VALUE_CODE_RE.finditer(rule_text)
    ]


def map_value(column: ColumnDef, raw_value: str) -> str | int:
    """Rewrite a filter literal to its stored code, if a business rule labels it.

    Mapping is best-effort: an unlabeled value is assumed to already be in physical form and is
    returned unchanged. The first matching entry across rules (in rule order) wins.
    """

    wanted = raw_value.casefold()
    for rule in column.business_rules:
        for entry in parse_value_codes(rule):
            if entry.label.casefold() == wanted:
                return entry.code
    return raw_value
