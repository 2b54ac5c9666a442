"""Parsed intent models (Pydantic).

The intent is the contract between the sentence-rule parser and the query assembler. It carries
business-level names only; nothing here is a physical identifier yet.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

WILDCARD = "*"


class FilterSpec(BaseModel):
    """A single predicate `<business column> <operator> <literal>`; filters combine with AND."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    column: str = Field(min_length=1)
    operator: str = Field(default="=", min_length=1)
    value: str = Field(min_length=1)


class ParsedIntent(BaseModel):
    """Target entity, requested output fields, and filter predicates."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    target: str = Field(min_length=1)
    columns: tuple[str, ...] = Field(min_length=1)
    filters: tuple[FilterSpec, ...] = ()

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Reject blank field names; `*` stands for every physical column."""

        cleaned = tuple(c.strip() for c in value)
        if any(not c for c in cleaned):
            raise ValueError("column names must be non-empty")
        return cleaned
