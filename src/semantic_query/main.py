"""Command-line entrypoint.

The lookup and build subcommands call the matching tool handler and print its full JSON response
(`isError`, `content`, `structuredContent`); the exit status is 1 when the response is an error.

Examples:
    semantic-query build "Which sales orders are cancelled?"
    semantic-query explore cust_mst
    semantic-query validate packages/datacontract.yml
    semantic-query docs so_hdr --output docs/generated
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any

from semantic_query.app import create_app
from semantic_query.config.logging import configure_logging
from semantic_query.config.settings import Settings, load_settings
from semantic_query.contract.docgen import document_table, write_table_docs
from semantic_query.contract.loader import validate_contract
from semantic_query.errors import ContractError, QueryEngineError
from semantic_query.tools import call_tool


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="semantic-query",
        description="Translate requests into parameterized SQL over a schema contract.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build a SQL query from a description")
    build.add_argument("description")

    expand = sub.add_parser("expand", help="Expand an abbreviation")
    expand.add_argument("abbreviation")

    explain = sub.add_parser("explain", help="Explain a physical column")
    explain.add_argument("table")
    explain.add_argument("column")

    explore = sub.add_parser("explore", help="Show a physical table's structure")
    explore.add_argument("table")

    validate = sub.add_parser("validate", help="Validate a contract file")
    validate.add_argument("path", nargs="?", default=None)

    docs = sub.add_parser("docs", help="Generate Markdown documentation for a physical table")
    docs.add_argument("table")
    docs.add_argument("--output", "-o", default=None, help="Write <table>.md into this directory")

    return parser


def _tool_call(args: argparse.Namespace) -> tuple[str, dict[str, Any]]:
    if args.command == "build":
        return "build_query_from_description", {"description": args.description}
    if args.command == "expand":
        return "expand_abbreviations", {"abbreviation": args.abbreviation}
    if args.command == "explain":
        return "explain_column_meaning", {"tableName": args.table, "columnName": args.column}
    return "explore_table_structure", {"tableName": args.table}


def _validate(path: str) -> int:
    try:
        contract = validate_contract(path)
    except ContractError as exc:
        print(f"Data contract validation failed: {exc}", file=sys.stderr)
        for problem in exc.problems:
            print(f"  - {problem}", file=sys.stderr)
        return 1

    print(f"Data contract is valid: {len(contract.tables)} tables")
    return 0


def _docs(args: argparse.Namespace, settings: Settings) -> int:
    app = create_app(settings)
    try:
        contract = app.store.get()
        if args.output is None:
            print(document_table(contract, args.table), end="")
            return 0
        output_path = write_table_docs(contract, args.table, args.output)
    except QueryEngineError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f'Documentation for table "{args.table}" generated at: {output_path}')
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)

    if args.command == "validate":
        return _validate(args.path or settings.contract_path)
    if args.command == "docs":
        return _docs(args, settings)

    app = create_app(settings)
    name, payload = _tool_call(args)
    response = call_tool(app, name, payload)

    print(json.dumps(response, ensure_ascii=False, indent=2))
    return 1 if response["isError"] else 0


if __name__ == "__main__":
    sys.exit(main())
