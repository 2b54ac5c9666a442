"""Tool handlers: the boundary between callers (agents, CLI) and the engine.

Hard contract: every call returns exactly one response dict, either
`{"isError": False, "content": str, "structuredContent": {...}}` or
`{"isError": True, "content": str, "structuredContent": {"error": str, "code": str}}`.
Expected errors are logged without stack traces; anything else is logged with one and reported as
`INTERNAL_ERROR` without leaking details.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from time import monotonic
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from semantic_query.app import App
from semantic_query.contract.lookup import expand_abbreviation, explain_column, explore_table
from semantic_query.engine import translate
from semantic_query.errors import ErrorCode, QueryEngineError

logger = logging.getLogger(__name__)


class BuildQueryInput(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    description: str = Field(min_length=1)


class BuildQueryOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sql_query: str
    params: list[str | int]


class ExpandAbbreviationsInput(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    abbreviation: str = Field(min_length=1)


class ExplainColumnMeaningInput(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, populate_by_name=True)

    table_name: str = Field(alias="tableName", min_length=1)
    column_name: str = Field(alias="columnName", min_length=1)


class ExploreTableStructureInput(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, populate_by_name=True)

    table_name: str = Field(alias="tableName", min_length=1)


def _ok(content: str, structured: dict[str, Any]) -> dict[str, Any]:
    return {"isError": False, "content": content, "structuredContent": structured}


def _error(code: ErrorCode, message: str) -> dict[str, Any]:
    return {
        "isError": True,
        "content": f"Error: {message}",
        "structuredContent": {"error": message, "code": str(code)},
    }


def build_query_from_description(app: App, payload: dict[str, Any]) -> dict[str, Any]:
    args = BuildQueryInput.model_validate(payload)
    result = translate(app.store.get(), args.description, policy=app.policy)
    output = BuildQueryOutput.model_validate(result.to_payload())

    logger.info("generated sql=%r params=%r", output.sql_query, output.params)
    return _ok(f"Generated SQL: {output.sql_query}", output.model_dump())


def expand_abbreviations(app: App, payload: dict[str, Any]) -> dict[str, Any]:
    args = ExpandAbbreviationsInput.model_validate(payload)
    expansion = expand_abbreviation(app.store.get(), args.abbreviation)
    return _ok(f"{args.abbreviation}: {expansion}", {"expansion": expansion})


def explain_column_meaning(app: App, payload: dict[str, Any]) -> dict[str, Any]:
    args = ExplainColumnMeaningInput.model_validate(payload)
    explanation = explain_column(app.store.get(), args.table_name, args.column_name)
    structured = explanation.model_dump()
    return _ok(f"{explanation.business_name}: {explanation.description}", structured)


def explore_table_structure(app: App, payload: dict[str, Any]) -> dict[str, Any]:
    args = ExploreTableStructureInput.model_validate(payload)
    structure = explore_table(app.store.get(), args.table_name)
    return _ok(f"{structure.table_name}: {structure.business_name}", structure.model_dump())


ToolHandler = Callable[[App, dict[str, Any]], dict[str, Any]]

TOOLS: dict[str, ToolHandler] = {
    "build_query_from_description": build_query_from_description,
    "expand_abbreviations": expand_abbreviations,
    "explain_column_meaning": explain_column_meaning,
    "explore_table_structure": explore_table_structure,
}


def call_tool(app: App, name: str, payload: dict[str, Any]) -> dict[str, Any]:
    """Dispatch a tool call by name and convert every outcome into a response dict."""

    started = monotonic()

    handler = TOOLS.get(name)
    if handler is None:
        logger.info("unknown tool name=%s", name)
        return _error(ErrorCode.UNSUPPORTED_OPERATION, f"Unknown tool: {name}")

    # noinspection PyBroadException
    try:
        response = handler(app, payload)
    except ValidationError as exc:
        latency_ms = int((monotonic() - started) * 1000)
        logger.info(
            "invalid arguments tool=%s errors=%d latency_ms=%d",
            name,
            exc.error_count(),
            latency_ms,
        )
        return _error(ErrorCode.INVALID_INPUT, f"Invalid arguments for {name}")
    except QueryEngineError as exc:
        latency_ms = int((monotonic() - started) * 1000)
        logger.info(
            "rejected tool=%s code=%s reason=%s latency_ms=%d",
            name,
            exc.code,
            exc,
            latency_ms,
        )
        return _error(exc.code, exc.message)
    except Exception:
        # Tool boundary: internal failures never escape as exceptions.
        logger.exception("tool failed name=%s", name)
        return _error(ErrorCode.INTERNAL_ERROR, "Internal error")

    latency_ms = int((monotonic() - started) * 1000)
    logger.info("handled tool=%s latency_ms=%d", name, latency_ms)
    return response
