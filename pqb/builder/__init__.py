"""Statement builder and its clause mixins."""

from pqb.builder._base import BuiltQuery, Condition, Parameter, QueryBuilder
from pqb.builder.statement import StatementBuilder

__all__ = (
    "BuiltQuery",
    "Condition",
    "Parameter",
    "QueryBuilder",
    "StatementBuilder",
)
