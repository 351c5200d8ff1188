"""Record to column/value mapping for INSERT and UPDATE statements.

A record is a flat set of named, typed fields. Supported shapes are dataclass
instances, ``msgspec.Struct`` instances, objects implementing
``__sql_fields__`` and plain mappings. Column names come from an explicit
override when one is declared, otherwise from the snake_case form of the
field name. Values are rendered as inline SQL literals according to the
field's declared type.
"""

from dataclasses import field as dataclass_field
from dataclasses import fields as dataclass_fields
from datetime import datetime
from typing import Any, NamedTuple, Optional, get_type_hints

import msgspec

from pqb.dialects import Dialect, DialectType
from pqb.exceptions import RecordMappingError, UnsupportedFieldTypeError
from pqb.utils.text import sanitise_string, snake_case
from pqb.utils.type_guards import has_sql_fields, is_dataclass_instance, is_mapping, is_msgspec_struct

__all__ = (
    "COLUMN_METADATA_KEY",
    "TIMESTAMP_FORMAT",
    "RecordField",
    "column",
    "map_record",
    "record_fields",
    "render_value",
)

COLUMN_METADATA_KEY = "pqb"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def column(name: str, **kwargs: Any) -> Any:
    """Declare a dataclass field stored under an explicit column name.

    Example:
        >>> @dataclass
        ... class Account:
        ...     display_name: str = column("name")

    Args:
        name: Column name used verbatim for the field.
        **kwargs: Passed through to :func:`dataclasses.field`.

    Returns:
        A dataclass field carrying the column override in its metadata.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[COLUMN_METADATA_KEY] = name
    return dataclass_field(metadata=metadata, **kwargs)


class RecordField(NamedTuple):
    """One mapped field of a record."""

    name: str
    column: str
    type: Any
    value: Any


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or str(tp)


def render_value(value: Any, declared_type: Any = None, field_name: Optional[str] = None) -> str:
    """Render a value as an inline SQL literal.

    Args:
        value: The field value.
        declared_type: The field's declared type. Defaults to the runtime type of ``value``.
        field_name: Used in the error message when the type is unsupported.

    Raises:
        UnsupportedFieldTypeError: If the type is not str, int, float, bool or datetime.

    Returns:
        The literal text.
    """
    if declared_type is None:
        declared_type = type(value)
    if not isinstance(declared_type, type):
        raise UnsupportedFieldTypeError(_type_name(declared_type), field_name)
    # bool before int, bool is an int subclass
    if issubclass(declared_type, bool):
        return "TRUE" if value else "FALSE"
    if issubclass(declared_type, int):
        return str(int(value))
    if issubclass(declared_type, float):
        return f"{float(value):f}"
    if issubclass(declared_type, str):
        # wrap before sanitising so quotes at the edges of the value are escaped too
        return sanitise_string(f"'{value}'")
    if issubclass(declared_type, datetime):
        return f"'{value.strftime(TIMESTAMP_FORMAT)}'"
    raise UnsupportedFieldTypeError(_type_name(declared_type), field_name)


def _dataclass_fields(record: Any) -> "list[RecordField]":
    try:
        hints = get_type_hints(type(record))
    except (NameError, TypeError):
        hints = {}
    mapped = []
    for field in dataclass_fields(record):
        override = field.metadata.get(COLUMN_METADATA_KEY)
        mapped.append(
            RecordField(
                name=field.name,
                column=override if override else snake_case(field.name),
                type=hints.get(field.name, field.type),
                value=getattr(record, field.name),
            )
        )
    return mapped


def _struct_fields(record: "msgspec.Struct") -> "list[RecordField]":
    # encode_name differs from name only when msgspec.field(name=...) or a rename rule is declared
    return [
        RecordField(
            name=info.name,
            column=info.encode_name if info.encode_name != info.name else snake_case(info.name),
            type=info.type,
            value=getattr(record, info.name),
        )
        for info in msgspec.structs.fields(record)
    ]


def record_fields(record: Any) -> "list[RecordField]":
    """Extract the mapped fields of a record in declaration order.

    Args:
        record: A dataclass instance, msgspec struct, ``__sql_fields__`` implementer or mapping.

    Raises:
        RecordMappingError: If the record is none of the supported shapes.

    Returns:
        The record's fields with resolved column names.
    """
    if has_sql_fields(record):
        return [RecordField(name=col, column=col, type=type(value), value=value) for col, value in record.__sql_fields__()]
    if is_dataclass_instance(record):
        return _dataclass_fields(record)
    if is_msgspec_struct(record):
        return _struct_fields(record)
    if is_mapping(record):
        return [RecordField(name=str(key), column=str(key), type=type(value), value=value) for key, value in record.items()]
    msg = f"Unsupported record type: {type(record).__name__}"
    raise RecordMappingError(msg)


def map_record(record: Any, dialect: "DialectType" = None) -> "tuple[list[str], list[str]]":
    """Map a record to quoted column names and rendered values.

    Args:
        record: The record to map.
        dialect: Dialect selecting the column quote character.

    Raises:
        UnsupportedFieldTypeError: If any field has an unsupported type.

    Returns:
        Parallel lists of quoted columns and literal values. No partial
        result is returned when a field fails to map.
    """
    quote = Dialect.resolve(dialect).quote_char
    columns: list[str] = []
    values: list[str] = []
    for field in record_fields(record):
        values.append(render_value(field.value, field.type, field.name))
        columns.append(f"{quote}{field.column}{quote}")
    return columns, values
