"""Builder for CQL INSERT statements."""

from __future__ import annotations

from datetime import datetime, timedelta

from cqlx.qb.using import Using
from cqlx.qb.values import Func, Lit, Param, TupleParam, Value


class InsertBuilder:
    """Builds CQL INSERT statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._columns: list[tuple[str, Value]] = []
        self._using = Using()
        self._unique = False
        self._json = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the statement text and the names of its bound parameters."""
        head = f"INSERT INTO {self._table} "
        if self._json:
            # Everything else goes into the JSON document.
            return head + "JSON ?", []

        names: list[str] = []
        values: list[str] = []
        for _, value in self._columns:
            text, vnames = value.write_cql()
            values.append(text)
            names.extend(vnames)

        cols = ",".join(column for column, _ in self._columns)
        parts = [head, f"({cols}) ", "VALUES (" + ",".join(values) + ") "]
        if self._unique:
            parts.append("IF NOT EXISTS ")
        text, unames = self._using.write_cql()
        parts.append(text)
        names.extend(unames)
        return "".join(parts), names

    def into(self, table: str) -> "InsertBuilder":
        self._table = table
        return self

    def json(self) -> "InsertBuilder":
        self._json = True
        return self

    def columns(self, *args: str) -> "InsertBuilder":
        self._columns.extend((c, Param(c)) for c in args)
        return self

    def named_column(self, column: str, name: str) -> "InsertBuilder":
        self._columns.append((column, Param(name)))
        return self

    def lit_column(self, column: str, literal: str) -> "InsertBuilder":
        self._columns.append((column, Lit(literal)))
        return self

    def func_column(self, column: str, func: Func) -> "InsertBuilder":
        self._columns.append((column, func))
        return self

    def tuple_column(self, column: str, count: int) -> "InsertBuilder":
        self._columns.append((column, TupleParam(column, count)))
        return self

    def unique(self) -> "InsertBuilder":
        self._unique = True
        return self

    def ttl(self, d: timedelta) -> "InsertBuilder":
        self._using.ttl(d)
        return self

    def ttl_named(self, name: str) -> "InsertBuilder":
        self._using.ttl_named(name)
        return self

    def timestamp(self, t: datetime) -> "InsertBuilder":
        self._using.timestamp(t)
        return self

    def timestamp_named(self, name: str) -> "InsertBuilder":
        self._using.timestamp_named(name)
        return self

    def timeout(self, d: timedelta) -> "InsertBuilder":
        self._using.timeout(d)
        return self

    def timeout_named(self, name: str) -> "InsertBuilder":
        self._using.timeout_named(name)
        return self


def insert(table: str) -> InsertBuilder:
    """Create an InsertBuilder for the given table."""
    return InsertBuilder(table)