"""pqb: fluent, parameterized SQL statement building."""

from pqb import builder, dialects, exceptions, records, utils
from pqb.builder import BuiltQuery, StatementBuilder
from pqb.dialects import Dialect, format_join_on, format_schema
from pqb.exceptions import (
    EmptyRecordError,
    PQBError,
    RecordMappingError,
    SQLBuilderError,
    UnsupportedFieldTypeError,
)
from pqb.parameters import ParameterStyle
from pqb.records import column, map_record

__version__ = "0.1.0"

__all__ = (
    "BuiltQuery",
    "Dialect",
    "EmptyRecordError",
    "PQBError",
    "ParameterStyle",
    "RecordMappingError",
    "SQLBuilderError",
    "StatementBuilder",
    "UnsupportedFieldTypeError",
    "__version__",
    "builder",
    "column",
    "dialects",
    "exceptions",
    "format_join_on",
    "format_schema",
    "map_record",
    "records",
    "utils",
)
