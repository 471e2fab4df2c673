"""Value expressions used in CQL statements: parameters, literals and functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol, TextIO, Union, runtime_checkable


@runtime_checkable
class Builder(Protocol):
    """Anything that can render itself into a CQL statement and parameter names."""

    def to_cql(self) -> tuple[str, list[str]]:
        """Return the CQL statement and the names of its bound parameters."""


def placeholders(count: int) -> str:
    """Return ``count`` comma separated ``?`` placeholders, or "" if count < 1."""
    if count < 1:
        return ""
    return ",".join("?" * count)


def join_columns(columns: Iterable[str]) -> str:
    """Join column names with commas."""
    return ",".join(columns)


@dataclass(frozen=True)
class Param:
    """A named ``?`` parameter."""

    name: str

    def write_cql(self, out: TextIO) -> list[str]:
        out.write("?")
        return [self.name]


@dataclass(frozen=True)
class TupleParam:
    """A named tuple of ``count`` parameters, rendered as ``(?,?,...)``."""

    name: str
    count: int

    def write_cql(self, out: TextIO) -> list[str]:
        names = [f"{self.name}[{i}]" for i in range(self.count - 1)]
        names.append(f"{self.name}[{self.count - 1}]")
        out.write("(" + "?," * max(self.count - 1, 0) + "?)")
        return names


@dataclass(frozen=True)
class Lit:
    """A literal CQL value written verbatim; it binds no parameters."""

    text: str

    def write_cql(self, out: TextIO) -> list[str]:
        out.write(self.text)
        return []


@dataclass(frozen=True)
class Func:
    """A database function call whose arguments are named parameters."""

    name: str
    param_names: tuple[str, ...] = field(default_factory=tuple)

    def write_cql(self, out: TextIO) -> list[str]:
        out.write(f"{self.name}({placeholders(len(self.param_names))})")
        return list(self.param_names)


Value = Union[Param, TupleParam, Lit, Func]


def fn(name: str, *args: str) -> Func:
    """Create a function call ``name(?,...)`` with the given parameter names."""
    return Func(name, tuple(args))


def min_timeuuid(name: str) -> Func:
    """Produce ``minTimeuuid(?)``."""
    return fn("minTimeuuid", name)


def max_timeuuid(name: str) -> Func:
    """Produce ``maxTimeuuid(?)``."""
    return fn("maxTimeuuid", name)


def now() -> Func:
    """Produce ``now()``."""
    return fn("now")