"""Comparators used in WHERE and IF clauses."""

from __future__ import annotations

import io
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, TextIO

from cqlx.qb.values import Func, Lit, Param, TupleParam, Value


class Op(Enum):
    """Comparison operator, valued by its CQL spelling."""

    EQ = "="
    NE = "!="
    LT = "<"
    LEQ = "<="
    GT = ">"
    GEQ = ">="
    IN = " IN "
    CONTAINS = " CONTAINS "
    CONTAINS_KEY = " CONTAINS KEY "
    LIKE = " LIKE "


@dataclass(frozen=True)
class Cmp:
    """A filtering comparison of a column against a value."""

    op: Op
    column: str
    value: Value

    def write_cql(self, out: TextIO) -> list[str]:
        out.write(self.column)
        out.write(self.op.value)
        return self.value.write_cql(out)

    def to_cql(self) -> tuple[str, list[str]]:
        out = io.StringIO()
        names = self.write_cql(out)
        return out.getvalue(), names


def write_cmps(cmps: Sequence[Cmp], out: TextIO) -> list[str]:
    """Write comparisons joined by AND, followed by a space."""
    names: list[str] = []
    for i, c in enumerate(cmps):
        if i:
            out.write(" AND ")
        names.extend(c.write_cql(out))
    out.write(" ")
    return names


def write_where(cmps: Sequence[Cmp], out: TextIO) -> list[str]:
    """Write a WHERE clause, or nothing if there are no comparisons."""
    if not cmps:
        return []
    out.write("WHERE ")
    return write_cmps(cmps, out)


def write_if(cmps: Sequence[Cmp], out: TextIO) -> list[str]:
    """Write an IF clause, or nothing if there are no comparisons."""
    if not cmps:
        return []
    out.write("IF ")
    return write_cmps(cmps, out)


def _param(op: Op, column: str, name: str) -> Cmp:
    return Cmp(op, column, Param(name))


def _tuple(op: Op, column: str, count: int, name: str) -> Cmp:
    return Cmp(op, column, TupleParam(name, count))


def _lit(op: Op, column: str, literal: str) -> Cmp:
    return Cmp(op, column, Lit(literal))


def eq(column: str) -> Cmp:
    """column=?"""
    return _param(Op.EQ, column, column)


def eq_tuple(column: str, count: int) -> Cmp:
    """column=(?,?,...)"""
    return _tuple(Op.EQ, column, count, column)


def eq_named(column: str, name: str) -> Cmp:
    return _param(Op.EQ, column, name)


def eq_tuple_named(column: str, count: int, name: str) -> Cmp:
    return _tuple(Op.EQ, column, count, name)


def eq_lit(column: str, literal: str) -> Cmp:
    return _lit(Op.EQ, column, literal)


def eq_func(column: str, func: Func) -> Cmp:
    return Cmp(Op.EQ, column, func)


def ne(column: str) -> Cmp:
    """column!=?"""
    return _param(Op.NE, column, column)


def ne_tuple(column: str, count: int) -> Cmp:
    return _tuple(Op.NE, column, count, column)


def ne_named(column: str, name: str) -> Cmp:
    return _param(Op.NE, column, name)


def ne_tuple_named(column: str, count: int, name: str) -> Cmp:
    return _tuple(Op.NE, column, count, name)


def ne_lit(column: str, literal: str) -> Cmp:
    return _lit(Op.NE, column, literal)


def ne_func(column: str, func: Func) -> Cmp:
    return Cmp(Op.NE, column, func)


def lt(column: str) -> Cmp:
    """column<?"""
    return _param(Op.LT, column, column)


def lt_tuple(column: str, count: int) -> Cmp:
    return _tuple(Op.LT, column, count, column)


def lt_named(column: str, name: str) -> Cmp:
    return _param(Op.LT, column, name)


def lt_tuple_named(column: str, count: int, name: str) -> Cmp:
    return _tuple(Op.LT, column, count, name)


def lt_lit(column: str, literal: str) -> Cmp:
    return _lit(Op.LT, column, literal)


def lt_func(column: str, func: Func) -> Cmp:
    return Cmp(Op.LT, column, func)


def lt_or_eq(column: str) -> Cmp:
    """column<=?"""
    return _param(Op.LEQ, column, column)


def lt_or_eq_tuple(column: str, count: int) -> Cmp:
    return _tuple(Op.LEQ, column, count, column)


def lt_or_eq_named(column: str, name: str) -> Cmp:
    return _param(Op.LEQ, column, name)


def lt_or_eq_tuple_named(column: str, count: int, name: str) -> Cmp:
    return _tuple(Op.LEQ, column, count, name)


def lt_or_eq_lit(column: str, literal: str) -> Cmp:
    return _lit(Op.LEQ, column, literal)


def lt_or_eq_func(column: str, func: Func) -> Cmp:
    return Cmp(Op.LEQ, column, func)


def gt(column: str) -> Cmp:
    """column>?"""
    return _param(Op.GT, column, column)


def gt_tuple(column: str, count: int) -> Cmp:
    return _tuple(Op.GT, column, count, column)


def gt_named(column: str, name: str) -> Cmp:
    return _param(Op.GT, column, name)


def gt_tuple_named(column: str, count: int, name: str) -> Cmp:
    return _tuple(Op.GT, column, count, name)


def gt_lit(column: str, literal: str) -> Cmp:
    return _lit(Op.GT, column, literal)


def gt_func(column: str, func: Func) -> Cmp:
    return Cmp(Op.GT, column, func)


def gt_or_eq(column: str) -> Cmp:
    """column>=?"""
    return _param(Op.GEQ, column, column)


def gt_or_eq_tuple(column: str, count: int) -> Cmp:
    return _tuple(Op.GEQ, column, count, column)


def gt_or_eq_named(column: str, name: str) -> Cmp:
    return _param(Op.GEQ, column, name)


def gt_or_eq_tuple_named(column: str, count: int, name: str) -> Cmp:
    return _tuple(Op.GEQ, column, count, name)


def gt_or_eq_lit(column: str, literal: str) -> Cmp:
    return _lit(Op.GEQ, column, literal)


def gt_or_eq_func(column: str, func: Func) -> Cmp:
    return Cmp(Op.GEQ, column, func)


def in_(column: str) -> Cmp:
    """column IN ?"""
    return _param(Op.IN, column, column)


def in_tuple(column: str, count: int) -> Cmp:
    return _tuple(Op.IN, column, count, column)


def in_named(column: str, name: str) -> Cmp:
    return _param(Op.IN, column, name)


def in_tuple_named(column: str, count: int, name: str) -> Cmp:
    return _tuple(Op.IN, column, count, name)


def in_lit(column: str, literal: str) -> Cmp:
    return _lit(Op.IN, column, literal)


def contains(column: str) -> Cmp:
    """column CONTAINS ?"""
    return _param(Op.CONTAINS, column, column)


def contains_tuple(column: str, count: int) -> Cmp:
    return _tuple(Op.CONTAINS, column, count, column)


def contains_key(column: str) -> Cmp:
    """column CONTAINS KEY ?"""
    return _param(Op.CONTAINS_KEY, column, column)


def contains_key_tuple(column: str, count: int) -> Cmp:
    return _tuple(Op.CONTAINS_KEY, column, count, column)


def contains_named(column: str, name: str) -> Cmp:
    return _param(Op.CONTAINS, column, name)


def contains_key_named(column: str, name: str) -> Cmp:
    return _param(Op.CONTAINS_KEY, column, name)


def contains_tuple_named(column: str, count: int, name: str) -> Cmp:
    return _tuple(Op.CONTAINS, column, count, name)


def contains_key_tuple_named(column: str, count: int, name: str) -> Cmp:
    return _tuple(Op.CONTAINS_KEY, column, count, name)


def contains_lit(column: str, literal: str) -> Cmp:
    return _lit(Op.CONTAINS, column, literal)


def like(column: str) -> Cmp:
    """column LIKE ?"""
    return _param(Op.LIKE, column, column)


def like_tuple(column: str, count: int) -> Cmp:
    return _tuple(Op.LIKE, column, count, column)


def like_tuple_named(column: str, count: int, name: str) -> Cmp:
    return _tuple(Op.LIKE, column, count, name)