"""Builder for CQL INSERT statements."""

from __future__ import annotations

import io
from datetime import datetime, timedelta
from typing import Any

from cqlx.qb.using import Using
from cqlx.qb.values import Func, Lit, Param, TupleParam, Value, join_columns


class InsertBuilder:
    """Builds CQL INSERT statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._columns: list[tuple[str, Value]] = []
        self._unique = False
        self._using = Using()
        self._json = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the statement and the names of its bound parameters."""
        out = io.StringIO()
        out.write(f"INSERT INTO {self._table} ")

        if self._json:
            out.write("JSON ?")
            return out.getvalue(), []

        out.write(f"({join_columns(column for column, _ in self._columns)}) ")

        names: list[str] = []
        out.write("VALUES (")
        for i, (_, value) in enumerate(self._columns):
            if i:
                out.write(",")
            names.extend(value.write_cql(out))
        out.write(") ")

        if self._unique:
            out.write("IF NOT EXISTS ")
        names.extend(self._using.write_cql(out))

        return out.getvalue(), names

    def query(self, session: Any) -> Any:
        """Create a query on ``session`` from the current state."""
        return session.query(*self.to_cql())

    def into(self, table: str) -> "InsertBuilder":
        self._table = table
        return self

    def json(self) -> "InsertBuilder":
        """Insert a single JSON document; columns and options are then ignored."""
        self._json = True
        return self

    def columns(self, *args: str) -> "InsertBuilder":
        self._columns.extend((column, Param(column)) for column in args)
        return self

    def named_column(self, column: str, name: str) -> "InsertBuilder":
        self._columns.append((column, Param(name)))
        return self

    def lit_column(self, column: str, literal: str) -> "InsertBuilder":
        self._columns.append((column, Lit(literal)))
        return self

    def func_column(self, column: str, func: Func) -> "InsertBuilder":
        self._columns.append((column, func))
        return self

    def tuple_column(self, column: str, count: int) -> "InsertBuilder":
        self._columns.append((column, TupleParam(column, count)))
        return self

    def unique(self) -> "InsertBuilder":
        self._unique = True
        return self

    def ttl(self, duration: timedelta) -> "InsertBuilder":
        self._using.ttl(duration)
        return self

    def ttl_named(self, name: str) -> "InsertBuilder":
        self._using.ttl_named(name)
        return self

    def timestamp(self, moment: datetime) -> "InsertBuilder":
        self._using.timestamp(moment)
        return self

    def timestamp_named(self, name: str) -> "InsertBuilder":
        self._using.timestamp_named(name)
        return self

    def timeout(self, duration: timedelta) -> "InsertBuilder":
        self._using.timeout(duration)
        return self

    def timeout_named(self, name: str) -> "InsertBuilder":
        self._using.timeout_named(name)
        return self


def insert(table: str) -> InsertBuilder:
    """Create an InsertBuilder for ``table``."""
    return InsertBuilder(table)