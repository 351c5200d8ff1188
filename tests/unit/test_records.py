"""Unit tests for record field extraction and literal rendering."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import IntEnum
from typing import Optional

import msgspec
import pytest

from pqb.exceptions import RecordMappingError, UnsupportedFieldTypeError
from pqb.records import COLUMN_METADATA_KEY, RecordField, column, map_record, record_fields, render_value


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


@dataclass
class Person:
    MyStringCol: str
    nickname: str = column("nick", default="")
    legacy: str = field(default="x", metadata={COLUMN_METADATA_KEY: "LegacyName"})


class Event(msgspec.Struct):
    CreatedAt: datetime
    title: str = msgspec.field(name="Title", default="")


@pytest.mark.parametrize(
    ("value", "declared", "expected"),
    [
        ("abc", str, "'abc'"),
        ("it's", str, "'it''s'"),
        ("'quoted'", str, "'''quoted'''"),
        (1, int, "1"),
        (-42, int, "-42"),
        (Priority.HIGH, Priority, "2"),
        (1.1, float, "1.100000"),
        (2.0, float, "2.000000"),
        (True, bool, "TRUE"),
        (False, bool, "FALSE"),
        (datetime(2022, 12, 31, 23, 59, 58, 123456), datetime, "'2022-12-31 23:59:58'"),
    ],
)
def test_render_value(value: object, declared: type, expected: str) -> None:
    """Test literal rendering of each supported type."""
    assert render_value(value, declared) == expected


def test_render_value_defaults_to_runtime_type() -> None:
    """Test the runtime type is used when no type is declared."""
    assert render_value(3) == "3"
    assert render_value(True) == "TRUE"
    assert render_value("x") == "'x'"


@pytest.mark.parametrize("declared", [date, list, dict, bytes, type(None)])
def test_render_value_unsupported_types(declared: type) -> None:
    """Test types outside the supported set fail with their name."""
    with pytest.raises(UnsupportedFieldTypeError, match=f"type: {declared.__name__} unsupported"):
        render_value(None, declared, "field")


def test_render_value_rejects_generic_annotations() -> None:
    """Test non-class annotations such as Optional are unsupported."""
    with pytest.raises(UnsupportedFieldTypeError, match="unsupported"):
        render_value("x", Optional[str])


def test_dataclass_column_names() -> None:
    """Test derived snake_case names and explicit overrides."""
    fields = record_fields(Person("kirk", "jim"))

    assert [f.column for f in fields] == ["my_string_col", "nick", "LegacyName"]
    assert fields[0] == RecordField(name="MyStringCol", column="my_string_col", type=str, value="kirk")


def test_msgspec_column_names() -> None:
    """Test msgspec renames are used verbatim."""
    fields = record_fields(Event(datetime(2020, 1, 1), "launch"))

    assert [(f.column, f.type) for f in fields] == [("created_at", datetime), ("Title", str)]


def test_mapping_keys_are_verbatim() -> None:
    """Test mapping keys are not converted."""
    assert [f.column for f in record_fields({"MixedCase": 1})] == ["MixedCase"]


def test_record_fields_rejects_classes() -> None:
    """Test a dataclass type, as opposed to an instance, is not a record."""
    with pytest.raises(RecordMappingError):
        record_fields(Person)


def test_map_record_quotes_columns() -> None:
    """Test map_record() returns quoted columns and literals."""
    assert map_record(Person("kirk")) == (['"my_string_col"', '"nick"', '"LegacyName"'], ["'kirk'", "''", "'x'"])
    assert map_record({"a": 1}, "mysql") == (["`a`"], ["1"])


def test_map_record_fails_without_partial_result() -> None:
    """Test a single bad field fails the whole record."""
    with pytest.raises(UnsupportedFieldTypeError) as exc_info:
        map_record({"ok": 1, "bad": b"bytes"})

    assert exc_info.value.field_name == "bad"
    assert exc_info.value.type_name == "bytes"
