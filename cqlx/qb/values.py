"""CQL value expressions, limits and small formatting helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Protocol, Union, runtime_checkable

_MICROS_PER_MILLISECOND = 1_000
_MICROS_PER_SECOND = 1_000_000
_MICROS_PER_MINUTE = 60 * _MICROS_PER_SECOND


@runtime_checkable
class Builder(Protocol):
    """Anything that can render itself as a CQL statement."""

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the statement text and the names of its bound parameters."""


def placeholders(count: int) -> str:
    """Return ``count`` question-mark placeholders joined with commas."""
    if count < 1:
        return ""
    return ",".join("?" * count)


def join_columns(columns) -> str:
    """Join column names with commas."""
    return ",".join(columns)


def format_duration(d: timedelta) -> str:
    """Format a duration as minutes, seconds and milliseconds, e.g. ``1m45s123ms``.

    Zero and negative durations produce an empty string.
    """
    micros = d // timedelta(microseconds=1)
    if micros <= 0:
        return ""
    minutes, rest = divmod(micros, _MICROS_PER_MINUTE)
    seconds, rest = divmod(rest, _MICROS_PER_SECOND)
    milliseconds = rest // _MICROS_PER_MILLISECOND

    parts = []
    if minutes > 0:
        parts.append(f"{minutes}m")
    if seconds > 0:
        parts.append(f"{seconds}s")
    if milliseconds > 0:
        parts.append(f"{milliseconds}ms")
    return "".join(parts)


@dataclass(frozen=True)
class Param:
    """A named ``?`` placeholder."""

    name: str

    def write_cql(self) -> tuple[str, list[str]]:
        return "?", [self.name]


@dataclass(frozen=True)
class TupleParam:
    """A tuple of ``count`` placeholders named ``name[0]``, ``name[1]``, ..."""

    name: str
    count: int

    def write_cql(self) -> tuple[str, list[str]]:
        indices = range(max(self.count - 1, 0))
        names = [f"{self.name}[{i}]" for i in indices]
        names.append(f"{self.name}[{self.count - 1}]")
        text = "(" + "".join("?," for _ in indices) + "?)"
        return text, names


@dataclass(frozen=True)
class Lit:
    """A literal CQL value written verbatim."""

    text: str

    def write_cql(self) -> tuple[str, list[str]]:
        return self.text, []


@dataclass(frozen=True)
class Func:
    """A database function call whose arguments are named placeholders."""

    name: str
    param_names: tuple[str, ...] = ()

    def write_cql(self) -> tuple[str, list[str]]:
        text = f"{self.name}({placeholders(len(self.param_names))})"
        return text, list(self.param_names)


Value = Union[Param, TupleParam, Lit, Func]


def fn(name: str, *args: str) -> Func:
    """Create a function call with the given parameter names."""
    return Func(name, tuple(args))


def min_timeuuid(name: str) -> Func:
    """Produce ``minTimeuuid(?)``."""
    return fn("minTimeuuid", name)


def max_timeuuid(name: str) -> Func:
    """Produce ``maxTimeuuid(?)``."""
    return fn("maxTimeuuid", name)


def now() -> Func:
    """Produce ``now()``."""
    return fn("now")


@dataclass(frozen=True)
class Limit:
    """A LIMIT or PER PARTITION LIMIT clause; empty when ``value`` is None."""

    value: Optional[Value] = None
    per_partition: bool = False

    def write_cql(self) -> tuple[str, list[str]]:
        if self.value is None:
            return "", []
        prefix = "PER PARTITION LIMIT " if self.per_partition else "LIMIT "
        text, names = self.value.write_cql()
        return f"{prefix}{text} ", names


def limit_lit(value: int, per_partition: bool) -> Limit:
    """Create a limit with a literal non-negative row count."""
    if value < 0:
        raise ValueError(f"limit must be non-negative, got {value}")
    return Limit(Lit(str(int(value))), per_partition)


def limit_named(name: str, per_partition: bool) -> Limit:
    """Create a limit bound to a named parameter."""
    return Limit(Param(name), per_partition)