"""Builder for CQL DELETE statements."""

from __future__ import annotations

from datetime import datetime, timedelta

from cqlx.qb.cmp import Cmp, write_if, write_where
from cqlx.qb.using import Using
from cqlx.qb.values import join_columns


class DeleteBuilder:
    """Builds CQL DELETE statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._columns: list[str] = []
        self._where: list[Cmp] = []
        self._if: list[Cmp] = []
        self._using = Using()
        self._exists = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the statement text and the names of its bound parameters."""
        parts = ["DELETE "]
        if self._columns:
            parts.append(join_columns(self._columns) + " ")
        parts.append(f"FROM {self._table} ")

        names: list[str] = []
        for text, cnames in (
            self._using.write_cql(),
            write_where(self._where),
            write_if(self._if),
        ):
            parts.append(text)
            names.extend(cnames)

        if self._exists:
            parts.append("IF EXISTS ")
        return "".join(parts), names

    def from_(self, table: str) -> "DeleteBuilder":
        self._table = table
        return self

    def columns(self, *args: str) -> "DeleteBuilder":
        self._columns.extend(args)
        return self

    def timestamp(self, t: datetime) -> "DeleteBuilder":
        self._using.timestamp(t)
        return self

    def timestamp_named(self, name: str) -> "DeleteBuilder":
        self._using.timestamp_named(name)
        return self

    def timeout(self, d: timedelta) -> "DeleteBuilder":
        self._using.timeout(d)
        return self

    def timeout_named(self, name: str) -> "DeleteBuilder":
        self._using.timeout_named(name)
        return self

    def where(self, *args: Cmp) -> "DeleteBuilder":
        self._where.extend(args)
        return self

    def if_(self, *args: Cmp) -> "DeleteBuilder":
        self._if.extend(args)
        return self

    def existing(self) -> "DeleteBuilder":
        self._exists = True
        return self


def delete(table: str) -> DeleteBuilder:
    """Create a DeleteBuilder for the given table."""
    return DeleteBuilder(table)