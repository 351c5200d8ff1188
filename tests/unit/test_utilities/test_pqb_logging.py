"""Unit tests for pqb.utils.logging."""

import logging

import msgspec
import pytest

from pqb import StatementBuilder
from pqb.utils.logging import StructuredFormatter, configure_logging, get_logger, statement_context


def _record(message: str = "hello %s", args: tuple = ("world",), **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="pqb.test", level=logging.DEBUG, pathname=__file__, lineno=10, msg=message, args=args, exc_info=None
    )
    record.__dict__.update(extra)
    return record


def test_get_logger_namespaces() -> None:
    """Test loggers are created under the pqb namespace."""
    assert get_logger().name == "pqb"
    assert get_logger("builder").name == "pqb.builder"
    assert get_logger("pqb.records").name == "pqb.records"
    assert get_logger("pqb").name == "pqb"


def test_structured_formatter_includes_statement_context() -> None:
    """Test statement kind, table and argument count become JSON fields."""
    record = _record(**statement_context("SELECT", '"users"', 2))

    entry = msgspec.json.decode(StructuredFormatter().format(record))

    assert entry["message"] == "hello world"
    assert entry["level"] == "DEBUG"
    assert entry["logger"] == "pqb.test"
    assert entry["statement"] == "SELECT"
    assert entry["table"] == '"users"'
    assert entry["arg_count"] == 2


def test_structured_formatter_without_context() -> None:
    """Test records without statement context only carry the base fields."""
    entry = msgspec.json.decode(StructuredFormatter().format(_record("plain", ())))

    assert entry["message"] == "plain"
    assert "statement" not in entry
    assert "arg_count" not in entry


@pytest.mark.parametrize(
    ("build", "statement", "table", "arg_count"),
    [
        (lambda b: b.from_("app.users").where("id", "=", "1").build(), "SELECT", '"app"."users"', 1),
        (lambda b: b.delete_from("sessions").build(), "DELETE", '"sessions"', 0),
        (lambda b: b.build_insert("users", {"a": 1}), "INSERT", '"users"', 0),
        (lambda b: b.where_in("id", [1, 2]).build_update("users", {"a": 1}), "UPDATE", '"users"', 2),
    ],
)
def test_builders_log_statement_context(
    build: object, statement: str, table: str, arg_count: int, caplog: pytest.LogCaptureFixture
) -> None:
    """Test every terminal call logs the statement it built."""
    caplog.set_level(logging.DEBUG, logger="pqb")

    build(StatementBuilder())  # type: ignore[operator]

    record = next(r for r in caplog.records if r.getMessage() == f"Built {statement} statement")
    assert record.statement == statement  # type: ignore[attr-defined]
    assert record.table == table  # type: ignore[attr-defined]
    assert record.arg_count == arg_count  # type: ignore[attr-defined]


def test_configure_logging(restore_pqb_logger: logging.Logger) -> None:
    """Test configure_logging() replaces the pqb handlers."""
    handler = logging.NullHandler()

    logger = configure_logging(level="debug", format_style="simple", handlers=[handler])

    assert logger is restore_pqb_logger
    assert logger.level == logging.DEBUG
    assert logger.handlers == [handler]
    assert not isinstance(handler.formatter, StructuredFormatter)
    assert logger.propagate is False


def test_configure_logging_defaults_to_structured_stdout(restore_pqb_logger: logging.Logger) -> None:
    """Test the default handler writes JSON lines."""
    logger = configure_logging()

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)
    assert isinstance(logger.handlers[0].formatter, StructuredFormatter)
