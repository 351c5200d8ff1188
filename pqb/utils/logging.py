"""Logging setup for pqb.

Builders log under the ``pqb`` namespace. Statement events carry the
statement kind, target table and bound argument count as record
attributes, which :class:`StructuredFormatter` renders as JSON fields.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import msgspec

if TYPE_CHECKING:
    from collections.abc import Iterable
    from logging import LogRecord

__all__ = (
    "STATEMENT_CONTEXT_FIELDS",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "statement_context",
)

ROOT_LOGGER_NAME = "pqb"
STATEMENT_CONTEXT_FIELDS = ("statement", "table", "arg_count")


def statement_context(statement: str, table: str | None, arg_count: int) -> dict[str, Any]:
    """Build the ``extra`` mapping attached to statement log records.

    Args:
        statement: Statement kind, e.g. ``SELECT`` or ``UPDATE``.
        table: Formatted target table.
        arg_count: Number of bound arguments.

    Returns:
        Mapping suitable for the ``extra`` argument of a logging call.
    """
    return {"statement": statement, "table": table, "arg_count": arg_count}


class StructuredFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in STATEMENT_CONTEXT_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return msgspec.json.encode(entry, enc_hook=str).decode("utf-8")


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``pqb`` namespace.

    Args:
        name: Logger name, prefixed with ``pqb.`` unless already qualified.

    Returns:
        The logger.
    """
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: str = "INFO",
    format_style: str = "structured",
    handlers: Iterable[logging.Handler] | None = None,
) -> logging.Logger:
    """Attach handlers to the ``pqb`` logger.

    Existing handlers are replaced and propagation to the root logger is
    turned off.

    Args:
        level: Level name, case-insensitive.
        format_style: ``"structured"`` for JSON lines, anything else for plain text.
        handlers: Handlers to install. Defaults to a single stdout stream handler.

    Returns:
        The configured ``pqb`` logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    formatter: logging.Formatter
    if format_style == "structured":
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    for handler in handlers or (logging.StreamHandler(sys.stdout),):
        if handler.formatter is None:
            handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
    return logger
