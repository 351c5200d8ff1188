from typing import Any, Optional

__all__ = (
    "EmptyRecordError",
    "PQBError",
    "RecordMappingError",
    "SQLBuilderError",
    "UnsupportedFieldTypeError",
)


class PQBError(Exception):
    """Base exception class from which all pqb exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``PQBError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLBuilderError(PQBError):
    """Issues Building or Generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class RecordMappingError(SQLBuilderError):
    """A record could not be mapped to columns and values."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues mapping record to SQL columns."
        super().__init__(message)


class UnsupportedFieldTypeError(RecordMappingError):
    """A record field has a type that cannot be rendered as a SQL literal."""

    field_name: Optional[str]
    type_name: str

    def __init__(self, type_name: str, field_name: Optional[str] = None) -> None:
        message = f"type: {type_name} unsupported"
        if field_name:
            message = f"{message} (field: {field_name})"
        super().__init__(message)
        self.field_name = field_name
        self.type_name = type_name


class EmptyRecordError(RecordMappingError):
    """A record produced no columns to insert or set."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "sql build failed"
        super().__init__(message)
