"""SQL dialect identifier quoting.

Provides dialect resolution and the schema/table/column formatting applied
to every identifier entering the builder through its structured API.
"""

from enum import Enum
from typing import Optional, Union

__all__ = (
    "Dialect",
    "DialectType",
    "format_join_on",
    "format_schema",
)


class Dialect(str, Enum):
    """Supported identifier quoting conventions."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    DEFAULT = "default"

    def __str__(self) -> str:
        return self.value

    @property
    def quote_char(self) -> str:
        """Character used to wrap identifiers for this dialect."""
        if self is Dialect.MYSQL:
            return "`"
        return '"'

    @classmethod
    def resolve(cls, dialect: "DialectType") -> "Dialect":
        """Resolve a dialect name case-insensitively.

        Unknown or unset names resolve to :attr:`Dialect.DEFAULT`.

        Args:
            dialect: A :class:`Dialect`, a dialect name, or None.

        Returns:
            The matching dialect.
        """
        if isinstance(dialect, Dialect):
            return dialect
        if not dialect:
            return cls.DEFAULT
        try:
            return cls(dialect.strip().lower())
        except ValueError:
            return cls.DEFAULT


DialectType = Optional[Union[Dialect, str]]


def format_schema(value: str, dialect: "DialectType" = None) -> str:
    """Quote each part of a dotted identifier.

    Example:
        >>> format_schema("myschema.mytable")
        '"myschema"."mytable"'
        >>> format_schema("t.*", dialect="mysql")
        '`t`.*'

    Args:
        value: Identifier such as ``column``, ``table.column`` or ``schema.table``.
        dialect: Dialect selecting the quote character.

    Returns:
        The quoted identifier. Parts already wrapped in the dialect's quote
        character are left as they are; ``*`` parts are never quoted.
    """
    quote = Dialect.resolve(dialect).quote_char
    parts = []
    for segment in value.split("."):
        part = segment.strip()
        if not part:
            continue
        if part == "*":
            parts.append(part)
        elif len(part) > 1 and part[0] == quote and part[-1] == quote:
            parts.append(part)
        else:
            parts.append(f"{quote}{part}{quote}")
    return ".".join(parts)


def format_join_on(expression: str, dialect: "DialectType" = None) -> str:
    """Quote both sides of a single-equality join condition.

    Args:
        expression: Condition such as ``users.id = orders.user_id``.
        dialect: Dialect selecting the quote character.

    Returns:
        The formatted condition joined with `` = ``.
    """
    return " = ".join(format_schema(side, dialect) for side in expression.split("="))
