from typing import TYPE_CHECKING, Any, cast

from pqb.dialects import format_join_on

if TYPE_CHECKING:
    from pqb.protocols import BuilderProtocol

__all__ = ("JoinClauseMixin",)


class JoinClauseMixin:
    """Mixin providing LEFT JOIN clauses."""

    def left_join(self, table: str, alias: str, on: str) -> Any:
        """Add ``LEFT JOIN table AS alias ON left = right``.

        Args:
            table: Table to join, optionally schema qualified.
            alias: Alias for the joined table.
            on: A single equality such as ``users.id = o.user_id``; both sides are quoted.

        Returns:
            The current builder instance for method chaining.
        """
        return self.left_join_extended(table, alias, on, "")

    def left_join_extended(self, table: str, alias: str, on: str, extra: str) -> Any:
        """Add a LEFT JOIN followed by a verbatim fragment.

        Use ``extra`` for additional join conditions, e.g. ``AND o.deleted IS NULL``.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        join = (
            f"LEFT JOIN {builder._format_schema(table)} AS {builder._format_schema(alias)} "
            f"ON {format_join_on(on, builder.dialect)}"
        )
        if extra:
            join = f"{join} {extra}"
        builder._joins.append(join)
        return builder
