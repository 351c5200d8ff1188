import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Union, cast, overload

from pqb.builder._base import Condition, Parameter
from pqb.exceptions import SQLBuilderError
from pqb.utils.logging import get_logger
from pqb.utils.text import sanitise_string, strip_quotes
from pqb.utils.type_guards import is_float_sequence, is_int_sequence, is_string_sequence

if TYPE_CHECKING:
    from typing_extensions import Self

    from pqb.builder._base import SQLPart
    from pqb.protocols import BuilderProtocol

__all__ = ("WhereClauseMixin",)

logger = get_logger("builder.where")

_BETWEEN_SEPARATOR_RE = re.compile(r"\s*\band\b\s*", re.IGNORECASE)


def _parameter_list(values: "Sequence[str]", separator: str = ", ") -> "list[SQLPart]":
    parts: list[SQLPart] = []
    for index, value in enumerate(values):
        if index:
            parts.append(separator)
        parts.append(Parameter(value))
    return parts


def _comparison_parts(column: str, operator: str, value: Any) -> "tuple[SQLPart, ...]":
    operator = operator.strip().upper()
    value = strip_quotes(str(value))
    if operator == "BETWEEN":
        operands = [operand.strip() for operand in _BETWEEN_SEPARATOR_RE.split(value)]
        if len(operands) != 2 or not all(operands):  # noqa: PLR2004
            msg = f"BETWEEN requires two operands separated by AND, got {value!r}."
            raise SQLBuilderError(msg)
        low, high = operands
        return (
            f"{column} BETWEEN ",
            Parameter(sanitise_string(low)),
            " AND ",
            Parameter(sanitise_string(high)),
        )
    return (f"{column} {operator} ", Parameter(sanitise_string(value)))


class WhereClauseMixin:
    """Mixin providing WHERE conditions for SELECT, DELETE and UPDATE statements.

    Conditions are joined with ``AND`` unless added with :meth:`or_where`.
    No parentheses are emitted, so ``A AND (B OR C)`` cannot be expressed
    other than through :meth:`where_raw`.
    """

    def where(self, column: str, operator: str, value: Any) -> "Self":
        """Add ``column operator $n``, joined with AND.

        The operator is upper-cased and one layer of quote characters is
        removed from the value. For ``BETWEEN`` the value is split on ``AND``
        into two arguments.

        Example:
            >>> builder.where("age", "between", "20 AND 30")

        Args:
            column: Column to compare; identifier-quoted.
            operator: Comparison operator, e.g. ``=``, ``!=``, ``>=``, ``LIKE``, ``BETWEEN``.
            value: Compared value, bound as a positional argument.

        Raises:
            SQLBuilderError: If a BETWEEN value does not contain exactly two operands.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        parts = _comparison_parts(builder._format_schema(column), operator, value)
        return cast("Self", builder._add_condition(Condition(parts)))

    def or_where(self, column: str, operator: str, value: Any) -> "Self":
        """Add a condition like :meth:`where`, joined with OR."""
        builder = cast("BuilderProtocol", self)
        parts = _comparison_parts(builder._format_schema(column), operator, value)
        return cast("Self", builder._add_condition(Condition(parts, conjunction="OR")))

    def where_raw(self, fragment: str) -> "Self":
        """Add a condition verbatim, joined with AND.

        The fragment is neither quoted nor sanitised and binds no arguments.
        """
        builder = cast("BuilderProtocol", self)
        return cast("Self", builder._add_condition(Condition.of(fragment)))

    @overload
    def where_in(self, column: str, values: "Sequence[int]") -> "Self": ...
    @overload
    def where_in(self, column: str, values: "Sequence[float]") -> "Self": ...
    @overload
    def where_in(self, column: str, values: "Sequence[str]") -> "Self": ...
    @overload
    def where_in(self, column: str, values: str) -> "Self": ...
    def where_in(self, column: str, values: "Union[Sequence[int], Sequence[float], Sequence[str], str]") -> "Self":
        """Add ``column IN ($1, $2, ...)`` with one argument per value.

        Accepts a sequence of ints, a sequence of floats (rendered with six
        decimals), a sequence of strings, or a comma separated string whose
        blank items are skipped. Any other container, including an empty one
        or one mixing element types, adds no condition.

        Args:
            column: Column to test; identifier-quoted.
            values: The candidate values.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        items: list[str]
        if is_int_sequence(values):
            items = [str(value) for value in values]
        elif is_float_sequence(values):
            items = [f"{value:f}" for value in values]
        elif is_string_sequence(values):
            items = [sanitise_string(value) for value in values]
        elif isinstance(values, str):
            items = [sanitise_string(strip_quotes(item.strip())) for item in values.split(",") if item.strip()]
        else:
            items = []
        if not items:
            logger.debug("Ignoring WHERE IN values with no usable items (%s)", type(values).__name__)
            return cast("Self", builder)
        condition = Condition.of(f"{builder._format_schema(column)} IN (", *_parameter_list(items), ")")
        return cast("Self", builder._add_condition(condition))

    def where_string_match_any(self, column: str, values: "Sequence[str]") -> "Self":
        """Match rows where ``column`` contains at least one of ``values``, case-insensitively.

        Renders ``column ILIKE ANY (array[$1, $2, ...])`` with ``%value%`` arguments.
        A bare string or an empty sequence adds no condition.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        if not is_string_sequence(values):
            logger.debug("Ignoring ILIKE ANY values of unsupported type %s", type(values).__name__)
            return cast("Self", builder)
        patterns = [f"%{sanitise_string(value.strip())}%" for value in values]
        condition = Condition.of(
            f"{builder._format_schema(column)} ILIKE ANY (array[", *_parameter_list(patterns), "])"
        )
        return cast("Self", builder._add_condition(condition))

    def where_string_match_all(self, column: str, values: "Sequence[str]") -> "Self":
        """Match ``column`` against all of ``values`` as one space separated pattern.

        Renders ``column ILIKE $1`` with a single ``%a% %b%`` argument, so the
        values must appear in order.
        A bare string or an empty sequence adds no condition.

        Returns:
            The current builder instance for method chaining.
        """
        builder = cast("BuilderProtocol", self)
        if not is_string_sequence(values):
            logger.debug("Ignoring ILIKE values of unsupported type %s", type(values).__name__)
            return cast("Self", builder)
        pattern = " ".join(f"%{sanitise_string(value.strip())}%" for value in values)
        condition = Condition.of(f"{builder._format_schema(column)} ILIKE ", Parameter(pattern))
        return cast("Self", builder._add_condition(condition))
