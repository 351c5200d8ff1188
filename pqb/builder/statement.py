"""Fluent builder for parameterized SQL statements."""

from dataclasses import dataclass

from pqb.builder._base import QueryBuilder
from pqb.builder.mixins import (
    FromClauseMixin,
    JoinClauseMixin,
    LimitOffsetClauseMixin,
    OrderByClauseMixin,
    RecordStatementMixin,
    SelectColumnsMixin,
    WhereClauseMixin,
)

__all__ = ("StatementBuilder",)


@dataclass
class StatementBuilder(
    QueryBuilder,
    SelectColumnsMixin,
    FromClauseMixin,
    JoinClauseMixin,
    WhereClauseMixin,
    OrderByClauseMixin,
    LimitOffsetClauseMixin,
    RecordStatementMixin,
):
    """Builder for SELECT, DELETE, INSERT and UPDATE statements.

    Every clause method mutates the builder and returns it, so calls chain.
    Clauses may be added in any order; :meth:`build` always renders them as
    SELECT, FROM or DELETE FROM, LEFT JOIN, WHERE, ORDER BY, LIMIT, OFFSET.
    Where-family values are bound as positional arguments.

    Example:
        >>> sql, args = (
        ...     StatementBuilder()
        ...     .from_("myschema.mytable")
        ...     .where("name", "=", "kirk")
        ...     .where("age", ">", "20")
        ...     .build()
        ... )
        >>> sql
        'SELECT * FROM "myschema"."mytable" WHERE "name" = $1 AND "age" > $2'
        >>> args
        ['kirk', '20']

    A builder is meant for one statement at a time; call :meth:`reset` to
    reuse it. Instances are not safe to share between threads.
    """
