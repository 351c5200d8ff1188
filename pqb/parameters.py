"""Positional placeholder styles."""

from enum import Enum

__all__ = ("ParameterStyle",)


class ParameterStyle(str, Enum):
    """Parameter style enumeration with string values."""

    NUMERIC = "numeric"
    QMARK = "qmark"
    POSITIONAL_PYFORMAT = "pyformat_positional"

    def __str__(self) -> str:
        """String representation for better error messages."""
        return self.value

    def placeholder(self, position: int) -> str:
        """Render the marker for the 1-based argument ``position``.

        Returns:
            ``$n`` for numeric, ``?`` for qmark and ``%s`` for positional pyformat.
        """
        if self is ParameterStyle.QMARK:
            return "?"
        if self is ParameterStyle.POSITIONAL_PYFORMAT:
            return "%s"
        return f"${position}"
