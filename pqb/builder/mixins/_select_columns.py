from typing import TYPE_CHECKING, Any, cast

from pqb.utils.text import join_newlines

if TYPE_CHECKING:
    from pqb.protocols import BuilderProtocol

__all__ = ("SelectColumnsMixin",)


class SelectColumnsMixin:
    """Mixin providing the SELECT list."""

    def select(self, *columns: str) -> Any:
        """Add columns to the SELECT list.

        Each column is identifier-quoted; ``table.*`` keeps its star.

        Args:
            *columns: Column names, optionally qualified.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._columns.extend(builder._format_schema(column) for column in columns)
        return builder

    def select_raw(self, expression: str) -> Any:
        """Add an expression to the SELECT list without quoting it.

        For expressions the formatter cannot handle, such as ``CASE`` blocks
        or function calls. Newlines are replaced by spaces.

        Args:
            expression: SQL expression, used verbatim.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._columns.append(join_newlines(expression))
        return builder
