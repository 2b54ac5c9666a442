"""Logging configuration for the query service."""

from __future__ import annotations

import logging
import os
import sys

PACKAGE_LOGGER = "semantic_query"


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Logs go to stderr so the CLI's JSON output on stdout stays machine-readable. The level is also
    pinned on the package logger: when a host application has already configured the root logger,
    `basicConfig` is a no-op, but `LOG_LEVEL` still governs this package's records.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)
