"""Schema contract models (Pydantic).

The contract describes the legacy schema in business terms: physical table and column names map
to human-readable labels, descriptions and free-text business rules. The YAML file uses camelCase
keys, which are kept as aliases so the models round-trip the file format.

Mapping order is significant: resolution iterates tables and columns in declaration order.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ColumnDef(BaseModel):
    """A single physical column and its business vocabulary."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    business_name: str = Field(alias="businessName", min_length=1)
    description: str = Field(min_length=1)
    data_type: str = Field(alias="dataType", min_length=1)
    business_rules: tuple[str, ...] = Field(default=(), alias="businessRules")

    @field_validator("business_rules", mode="before")
    @classmethod
    def null_rules_to_empty(cls, value: object) -> object:
        """Treat an explicit `businessRules: null` like an absent key."""

        return () if value is None else value


class TableDef(BaseModel):
    """A single physical table and its columns, keyed by physical column name."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    business_name: str = Field(alias="businessName", min_length=1)
    description: str = Field(min_length=1)
    columns: dict[str, ColumnDef] = Field(min_length=1)


class SchemaContract(BaseModel):
    """Root of the contract: tables keyed by physical name, plus the abbreviation glossary."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    tables: dict[str, TableDef]
    abbreviations: dict[str, str] = Field(default_factory=dict)

    @field_validator("abbreviations", mode="before")
    @classmethod
    def null_abbreviations_to_empty(cls, value: object) -> object:
        return {} if value is None else value
