"""Builder for CQL SELECT statements."""

from __future__ import annotations

import enum
from datetime import timedelta

from cqlx.qb.cmp import Cmp, write_where
from cqlx.qb.using import Using
from cqlx.qb.values import Limit, join_columns, limit_lit, limit_named


class Order(enum.Enum):
    """Sorting order for ORDER BY."""

    ASC = "ASC"
    DESC = "DESC"

    def __str__(self) -> str:
        return self.value


def as_(column: str, name: str) -> str:
    """Produce a ``column AS name`` result column."""
    return f"{column} AS {name}"


class SelectBuilder:
    """Builds CQL SELECT statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._limit = Limit()
        self._limit_per_partition = Limit()
        self._where: list[Cmp] = []
        self._group_by: list[str] = []
        self._order_by: list[str] = []
        self._columns: list[str] = []
        self._distinct: list[str] = []
        self._using = Using()
        self._allow_filtering = False
        self._bypass_cache = False
        self._json = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the statement text and the names of its bound parameters."""
        parts = ["SELECT "]
        names: list[str] = []

        if self._json:
            parts.append("JSON ")

        if self._distinct:
            parts.append("DISTINCT " + join_columns(self._distinct))
        elif self._group_by:
            parts.append(join_columns(self._group_by))
            if self._columns:
                parts.append("," + join_columns(self._columns))
        elif not self._columns:
            parts.append("*")
        else:
            parts.append(join_columns(self._columns))

        parts.append(f" FROM {self._table} ")

        for clause in (write_where(self._where),):
            parts.append(clause[0])
            names.extend(clause[1])

        if self._group_by:
            parts.append("GROUP BY " + join_columns(self._group_by) + " ")
        if self._order_by:
            parts.append("ORDER BY " + join_columns(self._order_by) + " ")

        for limit in (self._limit_per_partition, self._limit):
            text, lnames = limit.write_cql()
            parts.append(text)
            names.extend(lnames)

        if self._allow_filtering:
            parts.append("ALLOW FILTERING ")
        if self._bypass_cache:
            parts.append("BYPASS CACHE ")

        text, unames = self._using.write_cql()
        parts.append(text)
        names.extend(unames)

        return "".join(parts), names

    def from_(self, table: str) -> "SelectBuilder":
        self._table = table
        return self

    def json(self) -> "SelectBuilder":
        self._json = True
        return self

    def columns(self, *args: str) -> "SelectBuilder":
        self._columns.extend(args)
        return self

    def distinct(self, *args: str) -> "SelectBuilder":
        """Set the DISTINCT columns; they accumulate only once WHERE is set."""
        if not self._where:
            self._distinct = list(args)
        else:
            self._distinct.extend(args)
        return self

    def timeout(self, d: timedelta) -> "SelectBuilder":
        self._using.timeout(d)
        return self

    def timeout_named(self, name: str) -> "SelectBuilder":
        self._using.timeout_named(name)
        return self

    def service_level(self, name: str) -> "SelectBuilder":
        self._using.service_level(name)
        return self

    def where(self, *args: Cmp) -> "SelectBuilder":
        self._where.extend(args)
        return self

    def group_by(self, *args: str) -> "SelectBuilder":
        self._group_by.extend(args)
        return self

    def order_by(self, column: str, order: Order) -> "SelectBuilder":
        self._order_by.append(f"{column} {Order(order).value}")
        return self

    def limit(self, limit: int) -> "SelectBuilder":
        self._limit = limit_lit(limit, False)
        return self

    def limit_named(self, name: str) -> "SelectBuilder":
        self._limit = limit_named(name, False)
        return self

    def limit_per_partition(self, limit: int) -> "SelectBuilder":
        self._limit_per_partition = limit_lit(limit, True)
        return self

    def limit_per_partition_named(self, name: str) -> "SelectBuilder":
        self._limit_per_partition = limit_named(name, True)
        return self

    def allow_filtering(self) -> "SelectBuilder":
        self._allow_filtering = True
        return self

    def bypass_cache(self) -> "SelectBuilder":
        self._bypass_cache = True
        return self

    def _aggregate(self, name: str, column: str) -> "SelectBuilder":
        return self.columns(f"{name}({column})")

    def count(self, column: str) -> "SelectBuilder":
        return self._aggregate("count", column)

    def count_all(self) -> "SelectBuilder":
        return self.count("*")

    def min(self, column: str) -> "SelectBuilder":
        return self._aggregate("min", column)

    def max(self, column: str) -> "SelectBuilder":
        return self._aggregate("max", column)

    def avg(self, column: str) -> "SelectBuilder":
        return self._aggregate("avg", column)

    def sum(self, column: str) -> "SelectBuilder":
        return self._aggregate("sum", column)


def select(table: str) -> SelectBuilder:
    """Create a SelectBuilder for the given table."""
    return SelectBuilder(table)