"""CRUD statements derived from a table's schema."""

from __future__ import annotations

from dataclasses import dataclass, field

from cqlx.qb.cmp import Cmp, eq
from cqlx.qb.delete import DeleteBuilder, delete
from cqlx.qb.insert import InsertBuilder, insert
from cqlx.qb.select import SelectBuilder, select
from cqlx.qb.update import UpdateBuilder, update


@dataclass(frozen=True)
class Metadata:
    """A table's name, its columns and its partition and sort keys."""

    name: str
    columns: tuple[str, ...] = field(default_factory=tuple)
    part_key: tuple[str, ...] = field(default_factory=tuple)
    sort_key: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for attr in ("columns", "part_key", "sort_key"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))


class Table:
    """Produces statements and builders for simple CRUD on one table."""

    def __init__(self, metadata: Metadata) -> None:
        self._metadata = metadata
        self._primary_key_cmp: tuple[Cmp, ...] = tuple(
            eq(k) for k in (*metadata.part_key, *metadata.sort_key)
        )
        self._part_key_cmp = self._primary_key_cmp[: len(metadata.part_key)]

        self._get = select(metadata.name).where(*self._primary_key_cmp).to_cql()
        self._sel = select(metadata.name).where(*self._part_key_cmp).to_cql()
        self._insert = insert(metadata.name).columns(*metadata.columns).to_cql()

    def metadata(self) -> Metadata:
        """Return the table schema."""
        return self._metadata

    def name(self) -> str:
        return self._metadata.name

    def primary_key_cmp(self) -> list[Cmp]:
        """Return a copy of the primary key comparators."""
        return list(self._primary_key_cmp)

    @staticmethod
    def _copy(cql: tuple[str, list[str]]) -> tuple[str, list[str]]:
        return cql[0], list(cql[1])

    def get(self, *args: str) -> tuple[str, list[str]]:
        """Select by primary key."""
        if not args:
            return self._copy(self._get)
        return self.get_builder(*args).to_cql()

    def get_builder(self, *args: str) -> SelectBuilder:
        return select(self._metadata.name).columns(*args).where(*self._primary_key_cmp)

    def select(self, *args: str) -> tuple[str, list[str]]:
        """Select by partition key."""
        if not args:
            return self._copy(self._sel)
        return self.select_builder(*args).to_cql()

    def select_builder(self, *args: str) -> SelectBuilder:
        return select(self._metadata.name).columns(*args).where(*self._part_key_cmp)

    def select_all(self) -> tuple[str, list[str]]:
        """Select every row."""
        return select(self._metadata.name).to_cql()

    def insert(self) -> tuple[str, list[str]]:
        """Insert all columns."""
        return self._copy(self._insert)

    def insert_builder(self) -> InsertBuilder:
        return insert(self._metadata.name).columns(*self._metadata.columns)

    def update(self, *args: str) -> tuple[str, list[str]]:
        """Update the given columns by primary key."""
        return self.update_builder(*args).to_cql()

    def update_builder(self, *args: str) -> UpdateBuilder:
        return update(self._metadata.name).set(*args).where(*self._primary_key_cmp)

    def delete(self, *args: str) -> tuple[str, list[str]]:
        """Delete by primary key."""
        return self.delete_builder(*args).to_cql()

    def delete_builder(self, *args: str) -> DeleteBuilder:
        return delete(self._metadata.name).columns(*args).where(*self._primary_key_cmp)