from typing import TYPE_CHECKING, Any, cast

from pqb.builder._base import BuiltQuery
from pqb.exceptions import EmptyRecordError, RecordMappingError
from pqb.records import map_record
from pqb.utils.logging import get_logger, statement_context

if TYPE_CHECKING:
    from pqb.protocols import BuilderProtocol

__all__ = ("RecordStatementMixin",)

logger = get_logger("builder.record")


def _map(builder: "BuilderProtocol", table: str, record: Any) -> "tuple[list[str], list[str]]":
    try:
        columns, values = map_record(record, builder.dialect)
    except RecordMappingError:
        logger.debug("Failed to map %s record for %s", type(record).__name__, table, exc_info=True)
        raise
    if not columns:
        raise EmptyRecordError
    return columns, values


class RecordStatementMixin:
    """Mixin building INSERT and UPDATE statements from a record.

    Values are rendered inline as SQL literals; only the WHERE conditions of
    an UPDATE produce bound arguments.
    """

    def build_insert(self, table: str, record: Any, trailing_sql: str = "") -> BuiltQuery:
        """Build ``INSERT INTO table (columns) VALUES (values) trailing_sql``.

        Example:
            >>> StatementBuilder().build_insert("app.users", {"id": 1}, "ON CONFLICT DO NOTHING").sql
            'INSERT INTO "app"."users" ("id") VALUES (1) ON CONFLICT DO NOTHING'

        Args:
            table: Target table, optionally schema qualified.
            record: Dataclass, msgspec struct, mapping or ``__sql_fields__`` implementer.
            trailing_sql: Appended verbatim, e.g. ``ON CONFLICT DO NOTHING`` or ``RETURNING id``.

        Raises:
            UnsupportedFieldTypeError: If a field type cannot be rendered.
            EmptyRecordError: If the record has no fields.

        Returns:
            The statement and an empty argument list.
        """
        builder = cast("BuilderProtocol", self)
        columns, values = _map(builder, table, record)
        target = builder._format_schema(table)
        sql = f"INSERT INTO {target} ({', '.join(columns)}) VALUES ({', '.join(values)})"
        if trailing_sql:
            sql = f"{sql} {trailing_sql}"
        logger.debug("Built %s statement", "INSERT", extra=statement_context("INSERT", target, 0))
        return BuiltQuery(sql.strip(), [])

    def build_update(self, table: str, record: Any, trailing_sql: str = "") -> BuiltQuery:
        """Build ``UPDATE table SET column = value, ... [WHERE ...] [trailing_sql]``.

        The WHERE clause is the one accumulated through the ``where`` family.

        Args:
            table: Target table, optionally schema qualified.
            record: Dataclass, msgspec struct, mapping or ``__sql_fields__`` implementer.
            trailing_sql: Appended verbatim, e.g. ``RETURNING *``. Defaults to nothing.

        Raises:
            UnsupportedFieldTypeError: If a field type cannot be rendered.
            EmptyRecordError: If the record has no fields to set.

        Returns:
            The statement and the WHERE arguments.
        """
        builder = cast("BuilderProtocol", self)
        columns, values = _map(builder, table, record)
        assignments = ", ".join(f"{column} = {value}" for column, value in zip(columns, values))
        args: list[str] = []
        target = builder._format_schema(table)
        sections = [f"UPDATE {target} SET {assignments}", builder._where_sql(args), trailing_sql]
        logger.debug("Built %s statement", "UPDATE", extra=statement_context("UPDATE", target, len(args)))
        return BuiltQuery(" ".join(section for section in sections if section), args)
