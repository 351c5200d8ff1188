"""Text helpers shared by the statement builder and record mapping."""

import re
from functools import lru_cache

# Handles a capitalised word following anything, e.g. "MyString" -> "My_String", "HTTPServer" -> "HTTP_Server"
_SNAKE_CASE_RE_FIRST_CAP = re.compile(r"(.)([A-Z][a-z]+)")
# Handles transitions like "int8Col" -> "int8_Col" or "camelCase" -> "camel_Case"
_SNAKE_CASE_RE_LOWER_UPPER_TRANSITION = re.compile(r"([a-z0-9])([A-Z])")

_NEWLINE_RE = re.compile(r"\r?\n")
_WHITESPACE_RE = re.compile(r"\s+")

QUOTE_CHARACTERS = ("'", '"', "`")

__all__ = (
    "QUOTE_CHARACTERS",
    "collapse_whitespace",
    "join_newlines",
    "sanitise_string",
    "snake_case",
    "strip_quotes",
)


@lru_cache(maxsize=100)
def snake_case(string: str) -> str:
    """Convert a field identifier to snake_case.

    Two passes: a capitalised word gets an underscore before it, then any
    lowercase letter or digit followed by an uppercase letter is split.
    Acronym runs are only split where the second pass allows it, so
    ``"HTTPServer"`` becomes ``"http_server"`` but ``"IDs"`` stays ``"i_ds"``.

    Args:
        string: The identifier to convert.

    Returns:
        The snake_case version of the string.
    """
    snake = _SNAKE_CASE_RE_FIRST_CAP.sub(r"\1_\2", string)
    snake = _SNAKE_CASE_RE_LOWER_UPPER_TRANSITION.sub(r"\1_\2", snake)
    return snake.lower()


def sanitise_string(value: str) -> str:
    """Escape embedded single quotes by doubling them.

    A value wrapped in single quotes keeps its wrapping; only the quotes
    inside it are doubled.

    Args:
        value: The literal text to escape.

    Returns:
        The escaped text.
    """
    if not value:
        return value
    wrapped = len(value) > 1 and value[0] == "'" and value[-1] == "'"
    if wrapped:
        value = value[1:-1]
    value = value.replace("'", "''")
    if wrapped:
        return f"'{value}'"
    return value


def strip_quotes(value: str) -> str:
    """Remove one leading and one trailing quote character, if present."""
    if value and value[-1] in QUOTE_CHARACTERS:
        value = value[:-1]
    if value and value[0] in QUOTE_CHARACTERS:
        value = value[1:]
    return value


def join_newlines(value: str) -> str:
    return _NEWLINE_RE.sub(" ", value)


def collapse_whitespace(value: str) -> str:
    return _WHITESPACE_RE.sub(" ", value).strip()
