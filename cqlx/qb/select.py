"""Builder for CQL SELECT statements."""

from __future__ import annotations

import io
from datetime import timedelta
from enum import Enum
from typing import Any

from cqlx.qb.cmp import Cmp, write_where
from cqlx.qb.using import Limit, Using
from cqlx.qb.values import join_columns


class Order(Enum):
    """Sorting order of an ORDER BY column."""

    ASC = "ASC"
    DESC = "DESC"

    def __str__(self) -> str:
        return self.value


def as_(column: str, name: str) -> str:
    """Produce a ``column AS name`` result column."""
    return f"{column} AS {name}"


class SelectBuilder:
    """Builds CQL SELECT statements."""

    def __init__(self, table: str) -> None:
        self._table = table
        self._columns: list[str] = []
        self._distinct: list[str] = []
        self._using = Using()
        self._where: list[Cmp] = []
        self._group_by: list[str] = []
        self._order_by: list[str] = []
        self._limit = Limit()
        self._limit_per_partition = Limit()
        self._allow_filtering = False
        self._bypass_cache = False
        self._json = False

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the statement and the names of its bound parameters."""
        out = io.StringIO()
        out.write("SELECT ")
        if self._json:
            out.write("JSON ")

        if self._distinct:
            out.write("DISTINCT " + join_columns(self._distinct))
        elif self._group_by:
            out.write(join_columns(self._group_by))
            if self._columns:
                out.write("," + join_columns(self._columns))
        elif not self._columns:
            out.write("*")
        else:
            out.write(join_columns(self._columns))

        out.write(f" FROM {self._table} ")

        names: list[str] = []
        names.extend(self._using.write_cql(out))
        names.extend(write_where(self._where, out))

        if self._group_by:
            out.write(f"GROUP BY {join_columns(self._group_by)} ")
        if self._order_by:
            out.write(f"ORDER BY {join_columns(self._order_by)} ")

        names.extend(self._limit_per_partition.write_cql(out))
        names.extend(self._limit.write_cql(out))

        if self._allow_filtering:
            out.write("ALLOW FILTERING ")
        if self._bypass_cache:
            out.write("BYPASS CACHE ")

        return out.getvalue(), names

    def query(self, session: Any) -> Any:
        """Create a query on ``session`` from the current state."""
        return session.query(*self.to_cql())

    def from_(self, table: str) -> "SelectBuilder":
        self._table = table
        return self

    def json(self) -> "SelectBuilder":
        self._json = True
        return self

    def columns(self, *args: str) -> "SelectBuilder":
        self._columns.extend(args)
        return self

    def distinct(self, *args: str) -> "SelectBuilder":
        """Set DISTINCT columns; they replace earlier ones unless a WHERE is set."""
        if self._where:
            self._distinct.extend(args)
        else:
            self._distinct = list(args)
        return self

    def timeout(self, duration: timedelta) -> "SelectBuilder":
        self._using.timeout(duration)
        return self

    def timeout_named(self, name: str) -> "SelectBuilder":
        self._using.timeout_named(name)
        return self

    def where(self, *args: Cmp) -> "SelectBuilder":
        self._where.extend(args)
        return self

    def group_by(self, *args: str) -> "SelectBuilder":
        """Add GROUP BY columns; they are also written as the first selectors."""
        self._group_by.extend(args)
        return self

    def order_by(self, column: str, order: Order) -> "SelectBuilder":
        self._order_by.append(f"{column} {order.value}")
        return self

    def limit(self, value: int) -> "SelectBuilder":
        self._limit = Limit.literal(value, False)
        return self

    def limit_named(self, name: str) -> "SelectBuilder":
        self._limit = Limit.named(name, False)
        return self

    def limit_per_partition(self, value: int) -> "SelectBuilder":
        self._limit_per_partition = Limit.literal(value, True)
        return self

    def limit_per_partition_named(self, name: str) -> "SelectBuilder":
        self._limit_per_partition = Limit.named(name, True)
        return self

    def allow_filtering(self) -> "SelectBuilder":
        self._allow_filtering = True
        return self

    def bypass_cache(self) -> "SelectBuilder":
        self._bypass_cache = True
        return self

    def _fn(self, name: str, column: str) -> "SelectBuilder":
        return self.columns(f"{name}({column})")

    def count(self, column: str) -> "SelectBuilder":
        return self._fn("count", column)

    def count_all(self) -> "SelectBuilder":
        return self.count("*")

    def min(self, column: str) -> "SelectBuilder":
        return self._fn("min", column)

    def max(self, column: str) -> "SelectBuilder":
        return self._fn("max", column)

    def avg(self, column: str) -> "SelectBuilder":
        return self._fn("avg", column)

    def sum(self, column: str) -> "SelectBuilder":
        return self._fn("sum", column)


def select(table: str) -> SelectBuilder:
    """Create a SelectBuilder for ``table``."""
    return SelectBuilder(table)