"""Builder for CQL UPDATE statements."""

from __future__ import annotations

import io
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, TextIO

from cqlx.qb.cmp import Cmp, write_if, write_where
from cqlx.qb.using import Using
from cqlx.qb.values import Func, Lit, Param, TupleParam, Value


@dataclass(frozen=True)
class _Assignment:
    """One ``column=[prefix]value`` item of a SET clause."""

    column: str
    value: Value
    prefix: str = ""

    def write_cql(self, out: TextIO) -> list[str]:
        out.write(f"{self.column}={self.prefix}")
        return self.value.write_cql(out)


class UpdateBuilder:
    """Builds CQL UPDATE statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._using = Using()
        self._assignments: list[_Assignment] = []
        self._where: list[Cmp] = []
        self._if: list[Cmp] = []
        self._exists = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the statement and the names of its bound parameters."""
        out = io.StringIO()
        out.write(f"UPDATE {self._table} ")

        names: list[str] = []
        names.extend(self._using.write_cql(out))

        out.write("SET ")
        for i, assignment in enumerate(self._assignments):
            if i:
                out.write(",")
            names.extend(assignment.write_cql(out))
        out.write(" ")

        names.extend(write_where(self._where, out))
        names.extend(write_if(self._if, out))

        if self._exists:
            out.write("IF EXISTS ")

        return out.getvalue(), names

    def query(self, session: Any) -> Any:
        """Create a query on ``session`` from the current state."""
        return session.query(*self.to_cql())

    def table(self, table: str) -> "UpdateBuilder":
        self._table = table
        return self

    def ttl(self, duration: timedelta) -> "UpdateBuilder":
        self._using.ttl(duration)
        return self

    def ttl_named(self, name: str) -> "UpdateBuilder":
        self._using.ttl_named(name)
        return self

    def timestamp(self, moment: datetime) -> "UpdateBuilder":
        self._using.timestamp(moment)
        return self

    def timestamp_named(self, name: str) -> "UpdateBuilder":
        self._using.timestamp_named(name)
        return self

    def timeout(self, duration: timedelta) -> "UpdateBuilder":
        self._using.timeout(duration)
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

    def add(self, column: str) -> "UpdateBuilder":
        """Add ``column=column+?``."""
        return self._add_value(column, Param(column))

    def add_named(self, column: str, name: str) -> "UpdateBuilder":
        return self._add_value(column, Param(name))

    def add_lit(self, column: str, literal: str) -> "UpdateBuilder":
        return self._add_value(column, Lit(literal))

    def add_func(self, column: str, func: Func) -> "UpdateBuilder":
        return self._add_value(column, func)

    def _remove_value(self, column: str, value: Value) -> "UpdateBuilder":
        self._assignments.append(_Assignment(column, value, column + "-"))
        return self

    def remove(self, column: str) -> "UpdateBuilder":
        """Add ``column=column-?``."""
        return self._remove_value(column, Param(column))

    def remove_named(self, column: str, name: str) -> "UpdateBuilder":
        return self._remove_value(column, Param(name))

    def remove_lit(self, column: str, literal: str) -> "UpdateBuilder":
        return self._remove_value(column, Lit(literal))

    def remove_func(self, column: str, func: Func) -> "UpdateBuilder":
        return self._remove_value(column, func)

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
    """Create an UpdateBuilder for ``table``."""
    return UpdateBuilder(table)