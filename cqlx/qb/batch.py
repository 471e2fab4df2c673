"""Builder for CQL BATCH statements."""

from __future__ import annotations

import io
from datetime import datetime, timedelta
from typing import Any, Iterable

from cqlx.qb.using import Using
from cqlx.qb.values import Builder


class BatchBuilder:
    """Builds a CQL BATCH from other statements, rendered as one query."""

    def __init__(self) -> None:
        self._unlogged = False
        self._counter = False
        self._using = Using()
        self._stmts: list[str] = []
        self._names: list[str] = []

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the statement and the names of its bound parameters."""
        out = io.StringIO()
        out.write("BEGIN ")
        if self._unlogged:
            out.write("UNLOGGED ")
        if self._counter:
            out.write("COUNTER ")
        out.write("BATCH ")

        names = self._using.write_cql(out)
        for stmt in self._stmts:
            out.write(f"{stmt}; ")
        names.extend(self._names)

        out.write("APPLY BATCH ")
        return out.getvalue(), names

    def query(self, session: Any) -> Any:
        """Create a query on ``session`` from the current state."""
        return session.query(*self.to_cql())

    def add(self, builder: Builder) -> "BatchBuilder":
        """Build ``builder`` and add its statement to the batch."""
        return self.add_stmt(*builder.to_cql())

    def add_stmt(self, stmt: str, names: Iterable[str]) -> "BatchBuilder":
        self._stmts.append(stmt)
        self._names.extend(names)
        return self

    def add_with_prefix(self, prefix: str, builder: Builder) -> "BatchBuilder":
        """Build ``builder`` and add it, prefixing its names with ``prefix.``."""
        stmt, names = builder.to_cql()
        return self.add_stmt_with_prefix(prefix, stmt, names)

    def add_stmt_with_prefix(
        self, prefix: str, stmt: str, names: Iterable[str]
    ) -> "BatchBuilder":
        self._stmts.append(stmt)
        self._names.extend(f"{prefix}.{name}" if prefix else name for name in names)
        return self

    def unlogged(self) -> "BatchBuilder":
        self._unlogged = True
        return self

    def counter(self) -> "BatchBuilder":
        self._counter = True
        return self

    def ttl(self, duration: timedelta) -> "BatchBuilder":
        self._using.ttl(duration)
        return self

    def ttl_named(self, name: str) -> "BatchBuilder":
        self._using.ttl_named(name)
        return self

    def timestamp(self, moment: datetime) -> "BatchBuilder":
        self._using.timestamp(moment)
        return self

    def timestamp_named(self, name: str) -> "BatchBuilder":
        self._using.timestamp_named(name)
        return self

    def timeout(self, duration: timedelta) -> "BatchBuilder":
        self._using.timeout(duration)
        return self

    def timeout_named(self, name: str) -> "BatchBuilder":
        self._using.timeout_named(name)
        return self


def batch() -> BatchBuilder:
    """Create an empty BatchBuilder."""
    return BatchBuilder()