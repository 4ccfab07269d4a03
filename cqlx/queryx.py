"""Named query compilation and binding of named parameters to values."""

from __future__ import annotations

import string
from dataclasses import fields, is_dataclass
from typing import Any, Iterable, Mapping, Optional, Union

from cqlx.transformer import Transformer, default_bind_transformer

_BIND_CHARS = frozenset(string.ascii_letters + string.digits)
_MISSING = object()


class NamedQueryError(ValueError):
    """Raised when a named query cannot be compiled."""


class BindError(Exception):
    """Raised when a named parameter has no value to bind."""


def _allowed_bind_char(ch: str) -> bool:
    return ch in _BIND_CHARS


def compile_named_query(qs: Union[str, bytes]) -> tuple[str, list[str]]:
    """Turn ``:name`` parameters into ``?`` placeholders.

    Returns the rewritten statement and the parameter names in order.
    A literal ``:`` is written as ``::``.
    """
    if isinstance(qs, (bytes, bytearray)):
        qs = bytes(qs).decode("utf-8")
    if ":" not in qs:
        raise NamedQueryError("expected a named query")

    names: list[str] = []
    rebound: list[str] = []
    name: list[str] = []
    in_name = False
    last = len(qs) - 1

    for i, ch in enumerate(qs):
        if ch == ":":
            if in_name and i > 0 and qs[i - 1] == ":":
                # second ':' of a '::' escape
                rebound.append(":")
                in_name = False
                continue
            if in_name:
                raise NamedQueryError(
                    f"unexpected `:` while reading named param at {i}"
                )
            in_name = True
            name = []
        elif in_name and (_allowed_bind_char(ch) or ch in "_.") and i != last:
            name.append(ch)
        elif in_name:
            in_name = False
            if i == last and _allowed_bind_char(ch):
                name.append(ch)
            names.append("".join(name))
            rebound.append("?")
            if i != last or not _allowed_bind_char(ch):
                rebound.append(ch)
        else:
            rebound.append(ch)

    return "".join(rebound), names


def snake_case(name: str) -> str:
    """Convert a CamelCase identifier to snake_case, e.g. ``UserID`` -> ``user_id``."""
    out: list[str] = []
    for i, ch in enumerate(name):
        if ch in string.ascii_uppercase:
            prev = name[i - 1] if i > 0 else ""
            nxt = name[i + 1] if i + 1 < len(name) else ""
            if i > 0 and prev != "_" and (
                prev.islower() or prev.isdigit() or nxt.islower()
            ):
                out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def _field_names(obj: Any) -> dict[str, str]:
    """Map column names of ``obj`` to its attribute names."""
    if is_dataclass(obj) and not isinstance(obj, type):
        result: dict[str, str] = {}
        for f in fields(obj):
            tag = f.metadata.get("db")
            if tag == "-":
                continue
            result[tag or snake_case(f.name)] = f.name
        return result
    if isinstance(obj, tuple) and hasattr(obj, "_fields"):
        return {snake_case(n): n for n in obj._fields}
    try:
        attrs = vars(obj)
    except TypeError:
        return {}
    return {snake_case(n): n for n in attrs if not n.startswith("_")}


def _lookup(obj: Any, name: str) -> Any:
    """Find the value of a possibly dotted column name in ``obj``."""
    current = obj
    for part in name.split("."):
        attr = _field_names(current).get(part)
        if attr is None:
            return _MISSING
        current = getattr(current, attr)
    return current


class Queryx:
    """A statement with named parameters and the values bound to them."""

    def __init__(
        self,
        stmt: str = "",
        names: Iterable[str] = (),
        transformer: Optional[Transformer] = default_bind_transformer,
        strict: bool = False,
    ) -> None:
        self.stmt = stmt
        self.names = list(names)
        self.values: list[Any] = []
        self._transformer = transformer
        self._strict = strict
        self._err: Optional[BindError] = None

    @property
    def is_strict(self) -> bool:
        return self._strict

    def with_bind_transformer(self, transformer: Optional[Transformer]) -> "Queryx":
        """Set the transformer called right before a value is bound."""
        self._transformer = transformer
        return self

    def _transform(self, name: str, value: Any) -> Any:
        if self._transformer is None:
            return value
        return self._transformer(name, value)

    def bind_struct_args(
        self, arg0: Any, arg1: Optional[Mapping[str, Any]]
    ) -> list[Any]:
        """Return values for the names, taken from ``arg0`` then ``arg1``."""
        values: list[Any] = []
        for name in self.names:
            value = _lookup(arg0, name)
            if value is _MISSING:
                if arg1 is None or name not in arg1:
                    raise BindError(
                        f"could not find name {name!r} in {arg0!r} and {arg1!r}"
                    )
                value = arg1[name]
            values.append(self._transform(name, value))
        return values

    def bind_map_args(self, arg: Mapping[str, Any]) -> list[Any]:
        """Return values for the names, taken from the mapping."""
        values: list[Any] = []
        for name in self.names:
            if name not in arg:
                raise BindError(f"could not find name {name!r} in {arg!r}")
            values.append(self._transform(name, arg[name]))
        return values

    def _bind_from(self, produce) -> "Queryx":
        try:
            values = produce()
        except BindError as exc:
            self._err = BindError(f"bind error: {exc}")
        else:
            self._err = None
            self.bind(*values)
        return self

    def bind_struct(self, arg: Any) -> "Queryx":
        """Bind the named parameters to attributes of ``arg``.

        A missing value is recorded and reported by ``err()``.
        """
        return self._bind_from(lambda: self.bind_struct_args(arg, None))

    def bind_struct_map(self, arg0: Any, arg1: Mapping[str, Any]) -> "Queryx":
        """Bind from attributes of ``arg0``, falling back to the mapping ``arg1``."""
        return self._bind_from(lambda: self.bind_struct_args(arg0, arg1))

    def bind_map(self, arg: Mapping[str, Any]) -> "Queryx":
        """Bind the named parameters from a mapping."""
        return self._bind_from(lambda: self.bind_map_args(arg))

    def bind(self, *args: Any) -> "Queryx":
        """Set the bound values directly, replacing any earlier ones."""
        self.values = list(args)
        return self

    def strict(self) -> "Queryx":
        """Report unmapped columns as errors instead of ignoring them."""
        self._strict = True
        return self

    def err(self) -> Optional[BindError]:
        """Return the error of the last bind, if any."""
        return self._err