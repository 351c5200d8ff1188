"""Type guard functions for runtime type checking of records.

This module provides type-safe runtime checks that help the type checker
understand type narrowing, replacing defensive hasattr() and duck typing patterns.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from msgspec import Struct

from pqb.protocols import SupportsSQLFields

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

    from pqb.protocols import DataclassProtocol

__all__ = (
    "has_sql_fields",
    "is_dataclass_instance",
    "is_float_sequence",
    "is_int_sequence",
    "is_mapping",
    "is_msgspec_struct",
    "is_string_sequence",
)


def is_dataclass_instance(obj: Any) -> "TypeGuard[DataclassProtocol]":
    """Check if an object is a dataclass instance.

    Args:
        obj: An object to check.

    Returns:
        True if the object is a dataclass instance.
    """
    # Instances only; a dataclass type itself does not count.
    return not isinstance(obj, type) and hasattr(type(obj), "__dataclass_fields__")


def is_msgspec_struct(obj: Any) -> "TypeGuard[Struct]":
    """Check if a value is a msgspec struct.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return isinstance(obj, Struct)


def has_sql_fields(obj: Any) -> "TypeGuard[SupportsSQLFields]":
    """Check if a value declares its own columns through ``__sql_fields__``.

    Args:
        obj: Value to check.

    Returns:
        bool
    """
    return not isinstance(obj, type) and isinstance(obj, SupportsSQLFields)


def is_mapping(obj: Any) -> "TypeGuard[Mapping[str, Any]]":
    return isinstance(obj, Mapping)


def _is_sequence_of(obj: Any, *types: type) -> bool:
    if isinstance(obj, (str, bytes)) or not isinstance(obj, Sequence) or not obj:
        return False
    return all(isinstance(item, types) and not isinstance(item, bool) for item in obj)


def is_int_sequence(obj: Any) -> "TypeGuard[Sequence[int]]":
    """Check for a non-empty sequence whose items are all ints (bools excluded)."""
    return _is_sequence_of(obj, int)


def is_float_sequence(obj: Any) -> "TypeGuard[Sequence[float]]":
    """Check for a non-empty sequence whose items are all floats."""
    return _is_sequence_of(obj, float)


def is_string_sequence(obj: Any) -> "TypeGuard[Sequence[str]]":
    """Check for a non-empty sequence whose items are all strings."""
    return _is_sequence_of(obj, str)
