from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from pqb.protocols import BuilderProtocol

__all__ = ("FromClauseMixin",)


class FromClauseMixin:
    """Mixin providing the source table for SELECT and DELETE statements."""

    def from_(self, table: str) -> Any:
        """Set the table to select from.

        Calling again replaces the table.

        Args:
            table: Table name, optionally schema qualified (``myschema.mytable``).

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._from_table = builder._format_schema(table) or None
        return builder

    def delete_from(self, table: str) -> Any:
        """Turn the statement into a DELETE from ``table``.

        Takes precedence over :meth:`from_` at build time; the SELECT list is
        not rendered.

        Args:
            table: Table name, optionally schema qualified.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        builder._delete_from_table = builder._format_schema(table) or None
        return builder
