"""Statement builder state and assembly.

Clause methods record typed fragments on the builder; nothing is rendered
to text until a terminal call serialises the fragments in clause order.
Placeholders are numbered during that single pass, so the argument list
always lines up with the markers in the SQL string.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Union

from typing_extensions import Self

from pqb.dialects import Dialect, DialectType, format_schema
from pqb.parameters import ParameterStyle
from pqb.utils.logging import get_logger, statement_context
from pqb.utils.text import collapse_whitespace

__all__ = (
    "BuiltQuery",
    "Condition",
    "Parameter",
    "QueryBuilder",
)

logger = get_logger("builder")


@dataclass(frozen=True)
class Parameter:
    """A bound argument slot inside a condition."""

    value: str


SQLPart = Union[str, Parameter]


@dataclass(frozen=True)
class Condition:
    """One WHERE condition and the conjunction joining it to the previous one.

    ``parts`` are concatenated as-is, with each :class:`Parameter` replaced by
    a placeholder at build time.
    """

    parts: "tuple[SQLPart, ...]"
    conjunction: str = "AND"

    @classmethod
    def of(cls, *parts: SQLPart, conjunction: str = "AND") -> "Condition":
        return cls(parts=parts, conjunction=conjunction)

    @property
    def parameters(self) -> "Iterator[Parameter]":
        return (part for part in self.parts if isinstance(part, Parameter))


class BuiltQuery(NamedTuple):
    """SQL text and the positional arguments for its placeholders."""

    sql: str
    args: "list[str]"

    def __bool__(self) -> bool:
        return bool(self.sql)


@dataclass
class QueryBuilder:
    """Mutable clause state for one statement at a time.

    Attributes:
        dialect: Identifier quoting convention, a :class:`Dialect` or dialect name.
        distinct: Render ``SELECT DISTINCT``.
        parameter_style: Placeholder marker style for bound arguments.
    """

    dialect: DialectType = None
    distinct: bool = False
    parameter_style: ParameterStyle = ParameterStyle.NUMERIC
    _columns: "list[str]" = field(default_factory=list, init=False, repr=False)
    _from_table: Optional[str] = field(default=None, init=False, repr=False)
    _delete_from_table: Optional[str] = field(default=None, init=False, repr=False)
    _joins: "list[str]" = field(default_factory=list, init=False, repr=False)
    _conditions: "list[Condition]" = field(default_factory=list, init=False, repr=False)
    _order_by: Optional[str] = field(default=None, init=False, repr=False)
    _limit: Optional[int] = field(default=None, init=False, repr=False)
    _offset: Optional[int] = field(default=None, init=False, repr=False)

    @property
    def dialect_name(self) -> str:
        return Dialect.resolve(self.dialect).value

    @property
    def arguments(self) -> "list[str]":
        """Argument values accumulated so far, in placeholder order."""
        return [parameter.value for condition in self._conditions for parameter in condition.parameters]

    def _format_schema(self, value: str) -> str:
        return format_schema(value, self.dialect)

    def _add_condition(self, condition: Condition) -> Self:
        self._conditions.append(condition)
        return self

    def _render_conditions(self, args: "list[str]") -> str:
        """Render WHERE conditions, appending their arguments to ``args``."""
        rendered = []
        for index, condition in enumerate(self._conditions):
            if index:
                rendered.append(condition.conjunction)
            text = []
            for part in condition.parts:
                if isinstance(part, Parameter):
                    args.append(part.value)
                    text.append(self.parameter_style.placeholder(len(args)))
                else:
                    text.append(part)
            rendered.append("".join(text))
        return " ".join(rendered)

    def _where_sql(self, args: "list[str]") -> str:
        if not self._conditions:
            return ""
        return f"WHERE {self._render_conditions(args)}"

    def reset(self) -> Self:
        """Clear every clause and the argument list for reuse.

        ``dialect`` and ``parameter_style`` are kept; ``distinct`` is cleared.

        Returns:
            The current builder instance for method chaining.
        """
        self.distinct = False
        self._columns = []
        self._from_table = None
        self._delete_from_table = None
        self._joins = []
        self._conditions = []
        self._order_by = None
        self._limit = None
        self._offset = None
        return self

    def build(self) -> BuiltQuery:
        """Assemble the statement in fixed clause order.

        Returns:
            The SQL and its arguments. Both are empty when neither a FROM nor a
            DELETE FROM table has been set.
        """
        sections: list[str] = []
        if self._delete_from_table:
            kind, table = "DELETE", self._delete_from_table
            sections.append(f"DELETE FROM {table}")
        elif self._from_table:
            kind, table = "SELECT", self._from_table
            distinct = " DISTINCT" if self.distinct else ""
            select_list = ", ".join(self._columns) if self._columns else "*"
            sections.extend((f"SELECT{distinct} {select_list}", f"FROM {self._from_table}"))
        else:
            logger.debug("No source table set, returning empty statement")
            return BuiltQuery("", [])

        args: list[str] = []
        sections.extend(self._joins)
        sections.append(self._where_sql(args))
        if self._order_by is not None:
            sections.append(self._order_by)
        if self._limit is not None:
            sections.append(f"LIMIT {self._limit}")
        if self._offset is not None:
            sections.append(f"OFFSET {self._offset}")

        logger.debug("Built %s statement", kind, extra=statement_context(kind, table, len(args)))
        return BuiltQuery(collapse_whitespace(" ".join(sections)), args)

    def count(self) -> BuiltQuery:
        """Wrap the built statement in a row count query."""
        return self._wrap("SELECT COUNT(*) AS rowcount FROM ({}) AS rowdata")

    def exists(self) -> BuiltQuery:
        """Wrap the built statement in an EXISTS query."""
        return self._wrap("SELECT EXISTS ({})")

    def _wrap(self, template: str) -> BuiltQuery:
        query = self.build()
        if not query:
            return query
        return BuiltQuery(template.format(query.sql), query.args)

    def __str__(self) -> str:
        return self.build().sql

