"""Markdown documentation for contract tables.

One page per physical table: its business name as the title, its description, and a column table
in declaration order. Pure functions over the contract; writing the page is up to the caller.
"""

from __future__ import annotations

from pathlib import Path

from semantic_query.contract.lookup import require_table
from semantic_query.contract.schema import SchemaContract, TableDef

_HEADER = "| Business Name | Description | Data Type | Business Rules |"
_DIVIDER = "|---|---|---|---|"


def _cell(text: str) -> str:
    # A raw pipe or newline would split the row.
    return " ".join(text.split()).replace("|", "\\|")


def generate_markdown(table: TableDef) -> str:
    lines = [
        f"# {table.business_name}",
        "",
        table.description,
        "",
        "## Columns",
        "",
        _HEADER,
        _DIVIDER,
    ]
    for column in table.columns.values():
        cells = (
            column.business_name,
            column.description,
            column.data_type,
            ", ".join(column.business_rules),
        )
        lines.append("| " + " | ".join(_cell(cell) for cell in cells) + " |")
    return "\n".join(lines) + "\n"


def document_table(contract: SchemaContract, table_name: str) -> str:
    """Render the page for one physical table.

    Raises:
        NotFound: If `table_name` is not a physical table in the contract.
    """

    return generate_markdown(require_table(contract, table_name))


def write_table_docs(contract: SchemaContract, table_name: str, output_dir: str | Path) -> Path:
    """Write `<output_dir>/<table_name>.md`, creating the directory if needed."""

    markdown = document_table(contract, table_name)
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    output_path = directory / f"{table_name}.md"
    output_path.write_text(markdown, encoding="utf-8")
    return output_path
