"""Comparators on the ``token()`` of partition key columns, for paging."""

from __future__ import annotations

from dataclasses import dataclass

from cqlx.qb.cmp import Cmp, Op
from cqlx.qb.values import Param, fn


@dataclass(frozen=True)
class TokenBuilder:
    """Builds comparators of the form ``token(a,b,...) <op> ...``."""

    columns: tuple[str, ...] = ()

    @property
    def _column(self) -> str:
        return "token(" + ",".join(self.columns) + ")"

    def _cmp(self, op: Op, names: tuple[str, ...]) -> Cmp:
        params = names if names else self.columns
        return Cmp(self._column, op, fn("token", *params))

    def _value_cmp(self, op: Op, name: str) -> Cmp:
        return Cmp(self._column, op, Param(name or "token"))

    def eq(self) -> Cmp:
        """Produce ``token(columns)=token(?...)``."""
        return self._cmp(Op.EQ, ())

    def eq_value(self) -> Cmp:
        """Produce ``token(columns)=?``."""
        return self._value_cmp(Op.EQ, "")

    def eq_named(self, *args: str) -> Cmp:
        return self._cmp(Op.EQ, args)

    def eq_value_named(self, name: str) -> Cmp:
        return self._value_cmp(Op.EQ, name)

    def lt(self) -> Cmp:
        return self._cmp(Op.LT, ())

    def lt_value(self) -> Cmp:
        return self._value_cmp(Op.LT, "")

    def lt_named(self, *args: str) -> Cmp:
        return self._cmp(Op.LT, args)

    def lt_value_named(self, name: str) -> Cmp:
        return self._value_cmp(Op.LT, name)

    def lt_or_eq(self) -> Cmp:
        return self._cmp(Op.LEQ, ())

    def lt_or_eq_value(self) -> Cmp:
        return self._value_cmp(Op.LEQ, "")

    def lt_or_eq_named(self, *args: str) -> Cmp:
        return self._cmp(Op.LEQ, args)

    def lt_or_eq_value_named(self, name: str) -> Cmp:
        return self._value_cmp(Op.LEQ, name)

    def gt(self) -> Cmp:
        return self._cmp(Op.GT, ())

    def gt_value(self) -> Cmp:
        return self._value_cmp(Op.GT, "")

    def gt_named(self, *args: str) -> Cmp:
        return self._cmp(Op.GT, args)

    def gt_value_named(self, name: str) -> Cmp:
        return self._value_cmp(Op.GT, name)

    def gt_or_eq(self) -> Cmp:
        return self._cmp(Op.GEQ, ())

    def gt_or_eq_value(self) -> Cmp:
        return self._value_cmp(Op.GEQ, "")

    def gt_or_eq_named(self, *args: str) -> Cmp:
        return self._cmp(Op.GEQ, args)

    def gt_or_eq_value_named(self, name: str) -> Cmp:
        return self._value_cmp(Op.GEQ, name)


def token(*args: str) -> TokenBuilder:
    """Create a TokenBuilder over the given columns."""
    return TokenBuilder(tuple(args))