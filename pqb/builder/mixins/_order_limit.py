from typing import TYPE_CHECKING, Any, cast

from pqb.exceptions import SQLBuilderError

if TYPE_CHECKING:
    from pqb.protocols import BuilderProtocol

__all__ = ("LimitOffsetClauseMixin", "OrderByClauseMixin")


def _check_count(value: Any, clause: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{clause} requires an integer, got {type(value).__name__}."
        raise SQLBuilderError(msg)
    if value < 0:
        msg = f"{clause} cannot be negative: {value}."
        raise SQLBuilderError(msg)
    return value


class OrderByClauseMixin:
    """Mixin providing the ORDER BY clause."""

    def order_by(self, column: str, direction: str = "ASC") -> Any:
        """Set the ORDER BY clause, replacing any previous one.

        Args:
            column: Column to order by; identifier-quoted.
            direction: Sort direction, used verbatim (``ASC``, ``DESC``, ``DESC NULLS LAST``...).

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._order_by = f"ORDER BY {builder._format_schema(column)} {direction}"
        return builder


class LimitOffsetClauseMixin:
    """Mixin providing LIMIT and OFFSET clauses."""

    def limit(self, value: int) -> Any:
        """Set the LIMIT clause.

        Args:
            value: The maximum number of rows to return.

        Raises:
            SQLBuilderError: If the value is not a non-negative integer.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._limit = _check_count(value, "LIMIT")
        return builder

    def offset(self, value: int) -> Any:
        """Set the OFFSET clause.

        Args:
            value: The number of rows to skip before starting to return rows.

        Raises:
            SQLBuilderError: If the value is not a non-negative integer.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._offset = _check_count(value, "OFFSET")
        return builder
