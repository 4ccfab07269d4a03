"""Builder for CQL BATCH statements."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable

from cqlx.qb.using import Using
from cqlx.qb.values import Builder


class BatchBuilder:
    """Builds a CQL BATCH statement out of other statements."""

    def __init__(self) -> None:
        self._stmts: list[str] = []
        self._names: list[str] = []
        self._using = Using()
        self._unlogged = False
        self._counter = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the statement text and the names of its bound parameters."""
        parts = ["BEGIN "]
        if self._unlogged:
            parts.append("UNLOGGED ")
        if self._counter:
            parts.append("COUNTER ")
        parts.append("BATCH ")

        text, names = self._using.write_cql()
        parts.append(text)
        names = list(names)

        parts.extend(f"{stmt}; " for stmt in self._stmts)
        names.extend(self._names)

        parts.append("APPLY BATCH ")
        return "".join(parts), names

    def add(self, builder: Builder) -> "BatchBuilder":
        """Build ``builder`` and add its statement to the batch."""
        stmt, names = builder.to_cql()
        return self.add_stmt(stmt, names)

    def add_stmt(self, stmt: str, names: Iterable[str]) -> "BatchBuilder":
        self._stmts.append(stmt)
        self._names.extend(names)
        return self

    def add_with_prefix(self, prefix: str, builder: Builder) -> "BatchBuilder":
        """Add a built statement, prefixing its names with ``prefix.``."""
        stmt, names = builder.to_cql()
        return self.add_stmt_with_prefix(prefix, stmt, names)

    def add_stmt_with_prefix(
        self, prefix: str, stmt: str, names: Iterable[str]
    ) -> "BatchBuilder":
        self._stmts.append(stmt)
        if prefix:
            self._names.extend(f"{prefix}.{name}" for name in names)
        else:
            self._names.extend(names)
        return self

    def unlogged(self) -> "BatchBuilder":
        self._unlogged = True
        return self

    def counter(self) -> "BatchBuilder":
        self._counter = True
        return self

    def ttl(self, d: timedelta) -> "BatchBuilder":
        self._using.ttl(d)
        return self

    def ttl_named(self, name: str) -> "BatchBuilder":
        self._using.ttl_named(name)
        return self

    def timestamp(self, t: datetime) -> "BatchBuilder":
        self._using.timestamp(t)
        return self

    def timestamp_named(self, name: str) -> "BatchBuilder":
        self._using.timestamp_named(name)
        return self

    def timeout(self, d: timedelta) -> "BatchBuilder":
        self._using.timeout(d)
        return self

    def timeout_named(self, name: str) -> "BatchBuilder":
        self._using.timeout_named(name)
        return self


def batch() -> BatchBuilder:
    """Create an empty BatchBuilder."""
    return BatchBuilder()