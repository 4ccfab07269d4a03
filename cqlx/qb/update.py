"""Builder for CQL UPDATE statements."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from cqlx.qb.cmp import Cmp, write_if, write_where
from cqlx.qb.using import Using
from cqlx.qb.values import Func, Lit, Param, TupleParam, Value


@dataclass(frozen=True)
class _Assignment:
    """A ``column=[prefix]value`` item of the SET clause."""

    column: str
    value: Value
    value_prefix: str = ""

    def write_cql(self) -> tuple[str, list[str]]:
        text, names = self.value.write_cql()
        return f"{self.column}={self.value_prefix}{text}", names


class UpdateBuilder:
    """Builds CQL UPDATE statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._assignments: list[_Assignment] = []
        self._where: list[Cmp] = []
        self._if: list[Cmp] = []
        self._using = Using()
        self._exists = False
        self._allow_filtering = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the statement text and the names of its bound parameters."""
        parts = [f"UPDATE {self._table} "]
        names: list[str] = []

        text, unames = self._using.write_cql()
        parts.append(text)
        names.extend(unames)

        assignments: list[str] = []
        for assignment in self._assignments:
            atext, anames = assignment.write_cql()
            assignments.append(atext)
            names.extend(anames)
        parts.append("SET " + ",".join(assignments) + " ")

        for ctext, cnames in (write_where(self._where), write_if(self._if)):
            parts.append(ctext)
            names.extend(cnames)

        if self._exists:
            parts.append("IF EXISTS ")
        if self._allow_filtering:
            parts.append("ALLOW FILTERING ")
        return "".join(parts), names

    def table(self, table: str) -> "UpdateBuilder":
        self._table = table
        return self

    def ttl(self, d: timedelta) -> "UpdateBuilder":
        self._using.ttl(d)
        return self

    def ttl_named(self, name: str) -> "UpdateBuilder":
        self._using.ttl_named(name)
        return self

    def timestamp(self, t: datetime) -> "UpdateBuilder":
        self._using.timestamp(t)
        return self

    def timestamp_named(self, name: str) -> "UpdateBuilder":
        self._using.timestamp_named(name)
        return self

    def timeout(self, d: timedelta) -> "UpdateBuilder":
        self._using.timeout(d)
        return self

    def timeout_named(self, name: str) -> "UpdateBuilder":
        self._using.timeout_named(name)
        return self

    def set(self, *args: str) -> "UpdateBuilder":
        """Add ``column=?`` assignments; use set_tuple for tuple columns."""
        self._assignments.extend(_Assignment(c, Param(c)) for c in args)
        return self

    def set_named(self, column: str, name: str) -> "UpdateBuilder":
        self._assignments.append(_Assignment(column, Param(name)))
        return self

    def set_lit(self, column: str, literal: str) -> "UpdateBuilder":
        self._assignments.append(_Assignment(column, Lit(literal)))
        return self

    def set_func(self, column: str, func: Func) -> "UpdateBuilder":
        self._assignments.append(_Assignment(column, func))
        return self

    def set_tuple(self, column: str, count: int) -> "UpdateBuilder":
        self._assignments.append(_Assignment(column, TupleParam(column, count)))
        return self

    def _add_value(self, column: str, value: Value) -> "UpdateBuilder":
        self._assignments.append(_Assignment(column, value, column + "+"))
        return self

    def _remove_value(self, column: str, value: Value) -> "UpdateBuilder":
        self._assignments.append(_Assignment(column, value, column + "-"))
        return self

    def add(self, column: str) -> "UpdateBuilder":
        """Add ``column=column+?``."""
        return self._add_value(column, Param(column))

    def add_named(self, column: str, name: str) -> "UpdateBuilder":
        return self._add_value(column, Param(name))

    def add_lit(self, column: str, literal: str) -> "UpdateBuilder":
        return self._add_value(column, Lit(literal))

    def add_func(self, column: str, func: Func) -> "UpdateBuilder":
        return self._add_value(column, func)

    def remove(self, column: str) -> "UpdateBuilder":
        """Add ``column=column-?``."""
        return self._remove_value(column, Param(column))

    def remove_named(self, column: str, name: str) -> "UpdateBuilder":
        return self._remove_value(column, Param(name))

    def remove_lit(self, column: str, literal: str) -> "UpdateBuilder":
        return self._remove_value(column, Lit(literal))

    def remove_func(self, column: str, func: Func) -> "UpdateBuilder":
        return self._remove_value(column, func)

    def allow_filtering(self) -> "UpdateBuilder":
        self._allow_filtering = True
        return self

    def where(self, *args: Cmp) -> "UpdateBuilder":
        self._where.extend(args)
        return self

    def if_(self, *args: Cmp) -> "UpdateBuilder":
        self._if.extend(args)
        return self

    def existing(self) -> "UpdateBuilder":
        self._exists = True
        return self


def update(table: str) -> UpdateBuilder:
    """Create an UpdateBuilder for the given table."""
    return UpdateBuilder(table)