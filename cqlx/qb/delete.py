"""Builder for CQL DELETE statements."""

from __future__ import annotations

import io
from datetime import datetime, timedelta
from typing import Any

from cqlx.qb.cmp import Cmp, write_if, write_where
from cqlx.qb.using import Using
from cqlx.qb.values import join_columns


class DeleteBuilder:
    """Builds CQL DELETE statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._columns: list[str] = []
        self._using = Using()
        self._where: list[Cmp] = []
        self._if: list[Cmp] = []
        self._exists = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the statement and the names of its bound parameters."""
        out = io.StringIO()
        out.write("DELETE ")
        if self._columns:
            out.write(join_columns(self._columns) + " ")
        out.write(f"FROM {self._table} ")

        names: list[str] = []
        names.extend(self._using.write_cql(out))
        names.extend(write_where(self._where, out))
        names.extend(write_if(self._if, out))

        if self._exists:
            out.write("IF EXISTS ")

        return out.getvalue(), names

    def query(self, session: Any) -> Any:
        """Create a query on ``session`` from the current state."""
        return session.query(*self.to_cql())

    def from_(self, table: str) -> "DeleteBuilder":
        self._table = table
        return self

    def columns(self, *args: str) -> "DeleteBuilder":
        self._columns.extend(args)
        return self

    def timestamp(self, moment: datetime) -> "DeleteBuilder":
        self._using.timestamp(moment)
        return self

    def timestamp_named(self, name: str) -> "DeleteBuilder":
        self._using.timestamp_named(name)
        return self

    def timeout(self, duration: timedelta) -> "DeleteBuilder":
        self._using.timeout(duration)
        return self

    def timeout_named(self, name: str) -> "DeleteBuilder":
        self._using.timeout_named(name)
        return self

    def where(self, *args: Cmp) -> "DeleteBuilder":
        self._where.extend(args)
        return self

    def if_(self, *args: Cmp) -> "DeleteBuilder":
        self._if.extend(args)
        return self

    def existing(self) -> "DeleteBuilder":
        self._exists = True
        return self


def delete(table: str) -> DeleteBuilder:
    """Create a DeleteBuilder for ``table``."""
    return DeleteBuilder(table)