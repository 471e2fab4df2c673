"""CRUD statements for a table described by its schema metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from cqlx.qb.cmp import Cmp, eq
from cqlx.qb.delete import DeleteBuilder, delete
from cqlx.qb.insert import InsertBuilder, insert
from cqlx.qb.select import SelectBuilder, select
from cqlx.qb.update import UpdateBuilder, update


@dataclass(frozen=True)
class Metadata:
    """Table schema: name, columns, partition key and sort (clustering) key."""

    name: str
    columns: Sequence[str] = field(default_factory=tuple)
    part_key: Sequence[str] = field(default_factory=tuple)
    sort_key: Sequence[str] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for attr in ("columns", "part_key", "sort_key"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))


class Table:
    """Simple CRUD statements built from table metadata."""

    def __init__(self, metadata: Metadata) -> None:
        self._metadata = metadata
        self._primary_key_cmp: tuple[Cmp, ...] = tuple(
            eq(k) for k in (*metadata.part_key, *metadata.sort_key)
        )
        self._part_key_cmp = self._primary_key_cmp[: len(metadata.part_key)]

        self._get = select(metadata.name).where(*self._primary_key_cmp).to_cql()
        self._select = select(metadata.name).where(*self._part_key_cmp).to_cql()
        self._insert = insert(metadata.name).columns(*metadata.columns).to_cql()

    def metadata(self) -> Metadata:
        """Return the table metadata."""
        return self._metadata

    def primary_key_cmp(self) -> list[Cmp]:
        """Return a copy of the primary key comparisons."""
        return list(self._primary_key_cmp)

    def name(self) -> str:
        return self._metadata.name

    def get(self, *args: str) -> tuple[str, list[str]]:
        """Select by primary key, optionally only the given columns."""
        if not args:
            stmt, names = self._get
            return stmt, list(names)
        return (
            select(self._metadata.name)
            .columns(*args)
            .where(*self._primary_key_cmp)
            .to_cql()
        )

    def get_query(self, session: Any, *args: str) -> Any:
        return session.query(*self.get(*args))

    def select(self, *args: str) -> tuple[str, list[str]]:
        """Select by partition key, optionally only the given columns."""
        if not args:
            stmt, names = self._select
            return stmt, list(names)
        return self.select_builder(*args).to_cql()

    def select_query(self, session: Any, *args: str) -> Any:
        return session.query(*self.select(*args))

    def select_builder(self, *args: str) -> SelectBuilder:
        """Return a fresh builder selecting by partition key."""
        return select(self._metadata.name).columns(*args).where(*self._part_key_cmp)

    def select_all(self) -> tuple[str, list[str]]:
        """Return a ``SELECT *`` statement without conditions."""
        return select(self._metadata.name).to_cql()

    def insert(self) -> tuple[str, list[str]]:
        """Insert all columns."""
        stmt, names = self._insert
        return stmt, list(names)

    def insert_query(self, session: Any) -> Any:
        return session.query(*self.insert())

    def insert_builder(self) -> InsertBuilder:
        return insert(self._metadata.name).columns(*self._metadata.columns)

    def update(self, *args: str) -> tuple[str, list[str]]:
        """Update the given columns by primary key."""
        return self.update_builder(*args).to_cql()

    def update_query(self, session: Any, *args: str) -> Any:
        return session.query(*self.update(*args))

    def update_builder(self, *args: str) -> UpdateBuilder:
        return update(self._metadata.name).set(*args).where(*self._primary_key_cmp)

    def delete(self, *args: str) -> tuple[str, list[str]]:
        """Delete by primary key, optionally only the given columns."""
        return self.delete_builder(*args).to_cql()

    def delete_query(self, session: Any, *args: str) -> Any:
        return session.query(*self.delete(*args))

    def delete_builder(self, *args: str) -> DeleteBuilder:
        return delete(self._metadata.name).columns(*args).where(*self._primary_key_cmp)