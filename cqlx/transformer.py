"""Bind transformers applied to values right before they are bound."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import timedelta
from decimal import Decimal
from typing import Any, Callable, Optional

Transformer = Callable[[str, Any], Any]

#: No transformation by default; a transformer can be set per query.
default_bind_transformer: Optional[Transformer] = None


class Unset:
    """Marker for a parameter that should be left unset in the database.

    There is exactly one instance, ``UNSET``.
    """

    _instance: Optional["Unset"] = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (Unset, ())


UNSET = Unset()


def _is_zero(value: Any) -> bool:
    """Tell whether ``value`` is the zero value of its kind."""
    if value is None:
        return True
    if isinstance(value, (bool, int, float, complex, Decimal, str, bytes, timedelta)):
        return not value
    if is_dataclass(value) and not isinstance(value, type):
        return all(_is_zero(getattr(value, f.name)) for f in fields(value))
    if isinstance(value, tuple):
        return all(_is_zero(item) for item in value)
    return False


def unset_empty_transformer(name: str, value: Any) -> Any:
    """Replace zero values with ``UNSET``.

    Using it avoids tombstones when the same insert or update statement is
    used for fully and partially filled parameters.
    """
    if _is_zero(value):
        return UNSET
    return value