"""Runtime-checkable protocols used by the builder and record mapping."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, ClassVar, Optional, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from dataclasses import Field

    from pqb.builder._base import Condition
    from pqb.dialects import Dialect
    from pqb.parameters import ParameterStyle

__all__ = (
    "BuilderProtocol",
    "DataclassProtocol",
    "SupportsSQLFields",
)


@runtime_checkable
class DataclassProtocol(Protocol):
    """Protocol for instance checking dataclasses."""

    __dataclass_fields__: "ClassVar[dict[str, Field[Any]]]"


@runtime_checkable
class SupportsSQLFields(Protocol):
    """Protocol for records that declare their own column/value pairs.

    Column names are used verbatim; values are rendered by their runtime type.
    """

    def __sql_fields__(self) -> "Iterable[tuple[str, Any]]":
        """Return ``(column, value)`` pairs in column order."""
        ...


class BuilderProtocol(Protocol):
    """Clause state shared between the builder mixins."""

    dialect: "Union[Dialect, str, None]"
    distinct: bool
    parameter_style: "ParameterStyle"
    _columns: list[str]
    _from_table: Optional[str]
    _delete_from_table: Optional[str]
    _joins: list[str]
    _conditions: "list[Condition]"
    _order_by: Optional[str]
    _limit: Optional[int]
    _offset: Optional[int]

    def _format_schema(self, value: str) -> str: ...
    def _add_condition(self, condition: "Condition") -> Any: ...
    def _where_sql(self, args: "list[str]") -> str: ...
