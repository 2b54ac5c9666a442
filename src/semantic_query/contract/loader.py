"""Contract file loading and snapshot caching.

The contract is a YAML document (`tables`, `abbreviations`, optionally `tools`). Loading validates
it against the Pydantic models so the engine can assume every table and column carries its
required business metadata.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable, Mapping
from pathlib import Path
from time import monotonic
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from semantic_query.contract.schema import SchemaContract
from semantic_query.errors import ContractError

logger = logging.getLogger(__name__)


def require_contract_path() -> str:
    """Read `CONTRACT_PATH` from the environment or raise a clear error."""

    contract_path = os.getenv("CONTRACT_PATH")
    if not contract_path:
        raise ContractError("CONTRACT_PATH is required (set it in .env or environment)")
    return contract_path


def _describe_error(error: Mapping[str, Any]) -> str:
    loc = tuple(str(part) for part in error["loc"])
    if error["type"] == "missing" and loc[:1] == ("tables",):
        if len(loc) == 3:
            return f'Table "{loc[1]}" is missing required key: "{loc[2]}"'
        if len(loc) == 5 and loc[2] == "columns":
            return f'Column "{loc[3]}" in table "{loc[1]}" is missing required key: "{loc[4]}"'

    location = ".".join(loc) or "<root>"
    return f"{location}: {error['msg']}"


def _require_tables_key(obj: object, source: str) -> None:
    if not isinstance(obj, dict) or "tables" not in obj:
        raise ContractError(f"{source}: missing required top-level key 'tables'")


def contract_from_obj(obj: object, *, source: str = "<memory>") -> SchemaContract:
    """Validate a decoded YAML/JSON object into a `SchemaContract`."""

    _require_tables_key(obj, source)
    try:
        return SchemaContract.model_validate(obj)
    except ValidationError as exc:
        raise ContractError(f"{source}: {_describe_error(exc.errors()[0])}") from exc


def _read_contract_file(contract_file: Path) -> object:
    try:
        text = contract_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContractError(f"Data contract file not found at: {contract_file}") from exc

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ContractError(f"{contract_file}: invalid YAML ({exc})") from exc


def load_contract(path: str | Path | None = None) -> SchemaContract:
    """Read and validate a contract file.

    If `path` is omitted, the function loads `.env` and reads `CONTRACT_PATH`.

    Raises:
        ContractError: If the file is missing, is not valid YAML, or fails validation.
    """

    if path is None:
        load_dotenv(".env")
        path = require_contract_path()

    contract_file = Path(path)
    contract = contract_from_obj(_read_contract_file(contract_file), source=str(contract_file))
    logger.info("contract loaded path=%s tables=%d", contract_file, len(contract.tables))
    return contract


def validate_contract(path: str | Path) -> SchemaContract:
    """Check a contract file and report every problem, not just the first.

    Each table needs `businessName`, `description` and `columns`; each column needs
    `businessName`, `description` and `dataType`.

    Raises:
        ContractError: With `problems` listing each offending table or column.
    """

    contract_file = Path(path)
    obj = _read_contract_file(contract_file)
    _require_tables_key(obj, str(contract_file))

    try:
        contract = SchemaContract.model_validate(obj)
    except ValidationError as exc:
        problems = [_describe_error(error) for error in exc.errors()]
        logger.info("contract invalid path=%s problems=%d", contract_file, len(problems))
        raise ContractError(
            f"{contract_file}: {len(problems)} problem(s)",
            problems=problems,
        ) from exc

    columns = sum(len(table.columns) for table in contract.tables.values())
    logger.info(
        "contract valid path=%s tables=%d columns=%d",
        contract_file,
        len(contract.tables),
        columns,
    )
    return contract


class ContractStore:
    """Serve a cached contract snapshot, re-reading the file once the TTL expires.

    A snapshot is never mutated; refreshing swaps in a new object. If a refresh fails the previous
    snapshot keeps being served, so a bad edit to the file does not take the service down.
    """

    def __init__(
            self,
            path: str | Path,
            *,
            ttl_s: float = 3600.0,
            clock: Callable[[], float] = monotonic,
    ) -> None:
        if ttl_s <= 0:
            raise ValueError("ttl_s must be positive")
        self._path = Path(path)
        self._ttl_s = ttl_s
        self._clock = clock
        self._lock = threading.Lock()
        self._snapshot: SchemaContract | None = None
        self._loaded_at = 0.0

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> SchemaContract:
        """Return the current snapshot, loading or refreshing it when needed."""

        with self._lock:
            now = self._clock()
            if self._snapshot is not None and now - self._loaded_at < self._ttl_s:
                return self._snapshot

            try:
                contract = load_contract(self._path)
            except ContractError:
                if self._snapshot is None:
                    raise
                logger.warning("contract refresh failed; serving previous snapshot", exc_info=True)
                # Back off for a full TTL instead of retrying on every call.
                self._loaded_at = now
                return self._snapshot

            self._snapshot = contract
            self._loaded_at = now
            return contract

    def invalidate(self) -> None:
        """Force the next `get()` to re-read the file."""

        with self._lock:
            self._loaded_at = float("-inf")
