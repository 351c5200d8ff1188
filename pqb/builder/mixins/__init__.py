"""SQL statement builder mixins."""

from pqb.builder.mixins._from import FromClauseMixin
from pqb.builder.mixins._join import JoinClauseMixin
from pqb.builder.mixins._order_limit import LimitOffsetClauseMixin, OrderByClauseMixin
from pqb.builder.mixins._record import RecordStatementMixin
from pqb.builder.mixins._select_columns import SelectColumnsMixin
from pqb.builder.mixins._where import WhereClauseMixin

__all__ = (
    "FromClauseMixin",
    "JoinClauseMixin",
    "LimitOffsetClauseMixin",
    "OrderByClauseMixin",
    "RecordStatementMixin",
    "SelectColumnsMixin",
    "WhereClauseMixin",
)
