"""Comparators used in WHERE and IF clauses."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

from cqlx.qb.values import Func, Lit, Param, TupleParam, Value


class Op(enum.Enum):
    """Comparison operator, valued by its CQL text."""

    EQ = "="
    NE = "!="
    LT = "<"
    LEQ = "<="
    GT = ">"
    GEQ = ">="
    IN = " IN "
    CNT = " CONTAINS "
    CNT_KEY = " CONTAINS KEY "
    LIKE = " LIKE "


@dataclass(frozen=True)
class Cmp:
    """A single ``column <op> value`` filter."""

    column: str
    op: Op
    value: Value

    def write_cql(self) -> tuple[str, list[str]]:
        text, names = self.value.write_cql()
        return f"{self.column}{self.op.value}{text}", names


def write_cmps(cmps: Iterable[Cmp]) -> tuple[str, list[str]]:
    """Join comparators with AND, followed by a trailing space."""
    texts: list[str] = []
    names: list[str] = []
    for c in cmps:
        text, cnames = c.write_cql()
        texts.append(text)
        names.extend(cnames)
    return " AND ".join(texts) + " ", names


def _clause(keyword: str, cmps) -> tuple[str, list[str]]:
    cmps = list(cmps)
    if not cmps:
        return "", []
    text, names = write_cmps(cmps)
    return keyword + text, names


def write_where(cmps: Iterable[Cmp]) -> tuple[str, list[str]]:
    """Render a WHERE clause, or nothing if there are no comparators."""
    return _clause("WHERE ", cmps)


def write_if(cmps: Iterable[Cmp]) -> tuple[str, list[str]]:
    """Render an IF clause, or nothing if there are no comparators."""
    return _clause("IF ", cmps)


def _tuple(column_or_name: str, count: int) -> TupleParam:
    return TupleParam(column_or_name, count)


# --- = ---

def eq(column: str) -> Cmp:
    return Cmp(column, Op.EQ, Param(column))


def eq_tuple(column: str, count: int) -> Cmp:
    return Cmp(column, Op.EQ, _tuple(column, count))


def eq_named(column: str, name: str) -> Cmp:
    return Cmp(column, Op.EQ, Param(name))


def eq_tuple_named(column: str, count: int, name: str) -> Cmp:
    return Cmp(column, Op.EQ, _tuple(name, count))


def eq_lit(column: str, literal: str) -> Cmp:
    return Cmp(column, Op.EQ, Lit(literal))


def eq_func(column: str, func: Func) -> Cmp:
    return Cmp(column, Op.EQ, func)


# --- != ---

def ne(column: str) -> Cmp:
    return Cmp(column, Op.NE, Param(column))


def ne_tuple(column: str, count: int) -> Cmp:
    return Cmp(column, Op.NE, _tuple(column, count))


def ne_named(column: str, name: str) -> Cmp:
    return Cmp(column, Op.NE, Param(name))


def ne_tuple_named(column: str, count: int, name: str) -> Cmp:
    return Cmp(column, Op.NE, _tuple(name, count))


def ne_lit(column: str, literal: str) -> Cmp:
    return Cmp(column, Op.NE, Lit(literal))


def ne_func(column: str, func: Func) -> Cmp:
    return Cmp(column, Op.NE, func)


# --- < ---

def lt(column: str) -> Cmp:
    return Cmp(column, Op.LT, Param(column))


def lt_tuple(column: str, count: int) -> Cmp:
    return Cmp(column, Op.LT, _tuple(column, count))


def lt_named(column: str, name: str) -> Cmp:
    return Cmp(column, Op.LT, Param(name))


def lt_tuple_named(column: str, count: int, name: str) -> Cmp:
    return Cmp(column, Op.LT, _tuple(name, count))


def lt_lit(column: str, literal: str) -> Cmp:
    return Cmp(column, Op.LT, Lit(literal))


def lt_func(column: str, func: Func) -> Cmp:
    return Cmp(column, Op.LT, func)


# --- <= ---

def lt_or_eq(column: str) -> Cmp:
    return Cmp(column, Op.LEQ, Param(column))


def lt_or_eq_tuple(column: str, count: int) -> Cmp:
    return Cmp(column, Op.LEQ, _tuple(column, count))


def lt_or_eq_named(column: str, name: str) -> Cmp:
    return Cmp(column, Op.LEQ, Param(name))


def lt_or_eq_tuple_named(column: str, count: int, name: str) -> Cmp:
    return Cmp(column, Op.LEQ, _tuple(name, count))


def lt_or_eq_lit(column: str, literal: str) -> Cmp:
    return Cmp(column, Op.LEQ, Lit(literal))


def lt_or_eq_func(column: str, func: Func) -> Cmp:
    return Cmp(column, Op.LEQ, func)


# --- > ---

def gt(column: str) -> Cmp:
    return Cmp(column, Op.GT, Param(column))


def gt_tuple(column: str, count: int) -> Cmp:
    return Cmp(column, Op.GT, _tuple(column, count))


def gt_named(column: str, name: str) -> Cmp:
    return Cmp(column, Op.GT, Param(name))


def gt_tuple_named(column: str, count: int, name: str) -> Cmp:
    return Cmp(column, Op.GT, _tuple(name, count))


def gt_lit(column: str, literal: str) -> Cmp:
    return Cmp(column, Op.GT, Lit(literal))


def gt_func(column: str, func: Func) -> Cmp:
    return Cmp(column, Op.GT, func)


# --- >= ---

def gt_or_eq(column: str) -> Cmp:
    return Cmp(column, Op.GEQ, Param(column))


def gt_or_eq_tuple(column: str, count: int) -> Cmp:
    return Cmp(column, Op.GEQ, _tuple(column, count))


def gt_or_eq_named(column: str, name: str) -> Cmp:
    return Cmp(column, Op.GEQ, Param(name))


def gt_or_eq_tuple_named(column: str, count: int, name: str) -> Cmp:
    return Cmp(column, Op.GEQ, _tuple(name, count))


def gt_or_eq_lit(column: str, literal: str) -> Cmp:
    return Cmp(column, Op.GEQ, Lit(literal))


def gt_or_eq_func(column: str, func: Func) -> Cmp:
    return Cmp(column, Op.GEQ, func)


# --- IN ---

def in_(column: str) -> Cmp:
    return Cmp(column, Op.IN, Param(column))


def in_tuple(column: str, count: int) -> Cmp:
    return Cmp(column, Op.IN, _tuple(column, count))


def in_named(column: str, name: str) -> Cmp:
    return Cmp(column, Op.IN, Param(name))


def in_tuple_named(column: str, count: int, name: str) -> Cmp:
    return Cmp(column, Op.IN, _tuple(name, count))


def in_lit(column: str, literal: str) -> Cmp:
    return Cmp(column, Op.IN, Lit(literal))


# --- CONTAINS / CONTAINS KEY ---

def contains(column: str) -> Cmp:
    return Cmp(column, Op.CNT, Param(column))


def contains_tuple(column: str, count: int) -> Cmp:
    return Cmp(column, Op.CNT, _tuple(column, count))


def contains_key(column: str) -> Cmp:
    return Cmp(column, Op.CNT_KEY, Param(column))


def contains_key_tuple(column: str, count: int) -> Cmp:
    return Cmp(column, Op.CNT_KEY, _tuple(column, count))


def contains_named(column: str, name: str) -> Cmp:
    return Cmp(column, Op.CNT, Param(name))


def contains_key_named(column: str, name: str) -> Cmp:
    return Cmp(column, Op.CNT_KEY, Param(name))


def contains_tuple_named(column: str, count: int, name: str) -> Cmp:
    return Cmp(column, Op.CNT, _tuple(name, count))


def contains_key_tuple_named(column: str, count: int, name: str) -> Cmp:
    return Cmp(column, Op.CNT_KEY, _tuple(name, count))


def contains_lit(column: str, literal: str) -> Cmp:
    return Cmp(column, Op.CNT, Lit(literal))


# --- LIKE ---

def like(column: str) -> Cmp:
    return Cmp(column, Op.LIKE, Param(column))


def like_tuple(column: str, count: int) -> Cmp:
    return Cmp(column, Op.LIKE, _tuple(column, count))


def like_tuple_named(column: str, count: int, name: str) -> Cmp:
    return Cmp(column, Op.LIKE, _tuple(name, count))