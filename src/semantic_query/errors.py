"""Error kinds surfaced by the translation engine and the contract tools.

Every error is a normal outcome of an ambiguous or unsupported request; none of them is fatal to
the process. The tool boundary converts them into structured error responses.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

UNSUPPORTED_HINT = (
    "That request is not supported by the query builder yet. "
    "Try rephrasing or pick from the supported set."
)


class ErrorCode(StrEnum):
    """Stable, caller-facing error codes."""

    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    CONTRACT_INVALID = "CONTRACT_INVALID"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class QueryEngineError(ValueError):
    """Base class for all expected engine errors."""

    code: ErrorCode = ErrorCode.INVALID_INPUT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsupportedOperation(QueryEngineError):
    """Raised when a description matches no sentence shape, or a shape marked unimplemented.

    `rule` names the terminal rule that claimed the description; it is `None` when no rule
    matched at all. `operator` is set when a filter operator fell outside the allowlist. Every
    case surfaces the same code and rephrase hint.
    """

    code = ErrorCode.UNSUPPORTED_OPERATION

    def __init__(self, rule: str | None = None, *, operator: str | None = None) -> None:
        super().__init__(UNSUPPORTED_HINT)
        self.rule = rule
        self.operator = operator


class InvalidInput(QueryEngineError):
    """Raised when a business name cannot be resolved against the contract."""

    code = ErrorCode.INVALID_INPUT

    def __init__(self, term: str, scope: str | None = None) -> None:
        if scope is None:
            message = f"Could not find a table matching '{term}'."
        else:
            message = f"Could not find a column matching '{term}' in table '{scope}'."
        super().__init__(message)
        self.term = term
        self.scope = scope


class NotFound(QueryEngineError):
    """Raised by the lookup tools for unknown physical names or abbreviations."""

    code = ErrorCode.NOT_FOUND


class ContractError(QueryEngineError):
    """Raised when the schema contract cannot be read or fails validation.

    `problems` lists every offending table or column when the whole file was checked.
    """

    code = ErrorCode.CONTRACT_INVALID

    def __init__(self, message: str, *, problems: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.problems = tuple(problems)
