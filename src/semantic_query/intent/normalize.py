"""Text normalization for deterministic sentence matching."""

from __future__ import annotations

import re

_MULTISPACE_RE = re.compile(r"\s+")

_QUOTE_TRANSLATION = str.maketrans(
    {
        "‘": "'",
        "’": "'",
        "“": '"',
        "”": '"',
    }
)


def normalize_description(text: str) -> str:
    """Normalize a request description before rule matching.

    Normalization is intentionally conservative:
        - Strip and collapse whitespace.
        - Replace typographic quotes with ASCII quotes.

    Case is preserved so extracted business names and values are reported as the caller wrote
    them; rule patterns match case-insensitively.
    """

    value = (text or "").strip().translate(_QUOTE_TRANSLATION)
    return _MULTISPACE_RE.sub(" ", value)
