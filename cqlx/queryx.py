"""Named-parameter queries: compiling, binding values and executing on a session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Union

Transformer = Callable[[str, Any], Any]
Mapper = Callable[[str], str]


class QueryError(Exception):
    """Raised when a query cannot be compiled or executed."""


class BindError(QueryError):
    """Raised when a named parameter has no value to bind."""


class _Unset:
    """Marker for a bound value the server should leave untouched."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET_VALUE"


UNSET_VALUE = _Unset()

_ZERO_TYPES = (bool, int, float, complex, str, bytes)


def unset_empty_transformer(name: str, val: Any) -> Any:
    """Replace empty values (None, zero, empty string or bytes) with UNSET_VALUE.

    Using it avoids writing tombstones when one statement serves both
    fully and partially filled parameters.
    """
    if val is None or (isinstance(val, _ZERO_TYPES) and not val):
        return UNSET_VALUE
    return val


def _allowed_bind_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


def compile_named_query(qs: Union[str, bytes]) -> tuple[str, list[str]]:
    """Turn ``:name`` parameters into ``?`` placeholders and return their names.

    A literal ``:`` is written as ``::``.
    """
    if isinstance(qs, (bytes, bytearray)):
        qs = bytes(qs).decode()
    if ":" not in qs:
        raise QueryError("expected a named query")

    out: list[str] = []
    names: list[str] = []
    name: list[str] = []
    in_name = False
    last = len(qs) - 1

    for i, c in enumerate(qs):
        if c == ":":
            if in_name and i > 0 and qs[i - 1] == ":":
                out.append(":")
                in_name = False
                continue
            if in_name:
                raise QueryError(f"unexpected `:` while reading named param at {i}")
            in_name = True
            name = []
        elif in_name and (_allowed_bind_char(c) or c in "_.") and i != last:
            name.append(c)
        elif in_name:
            in_name = False
            if i == last and _allowed_bind_char(c):
                name.append(c)
            names.append("".join(name))
            out.append("?")
            if i != last or not _allowed_bind_char(c):
                out.append(c)
        else:
            out.append(c)

    return "".join(out), names


def default_mapper(name: str) -> str:
    """Map a parameter name to an attribute name; names are used as they are."""
    return name


_MISSING = object()


def _lookup(obj: Any, path: str) -> Any:
    value = obj
    for part in path.split("."):
        value = getattr(value, part, _MISSING)
        if value is _MISSING:
            return _MISSING
    return value


class Queryx:
    """A statement with named parameters and the values bound to them.

    The underlying session, if any, must provide ``execute(stmt, values)``.
    """

    def __init__(
        self,
        stmt: str,
        names: Optional[Iterable[str]] = None,
        session: Any = None,
        mapper: Optional[Mapper] = None,
        transformer: Optional[Transformer] = None,
    ) -> None:
        self.stmt = stmt
        self.names: list[str] = list(names or ())
        self.values: list[Any] = []
        self.mapper: Mapper = mapper or default_mapper
        self.transformer = transformer
        self._session = session

    def __repr__(self) -> str:
        return f"Queryx(stmt={self.stmt!r}, names={self.names!r})"

    def with_bind_transformer(self, transformer: Optional[Transformer]) -> "Queryx":
        """Set a function applied to each value right before it is bound."""
        self.transformer = transformer
        return self

    def _transform(self, name: str, val: Any) -> Any:
        return self.transformer(name, val) if self.transformer else val

    def _struct_args(self, arg0: Any, arg1: Optional[Mapping[str, Any]]) -> list[Any]:
        args: list[Any] = []
        for name in self.names:
            val = _lookup(arg0, self.mapper(name))
            if val is _MISSING:
                if arg1 is None or name not in arg1:
                    raise BindError(
                        f"bind error: could not find name {name!r} "
                        f"in {arg0!r} and {arg1!r}"
                    )
                val = arg1[name]
            args.append(self._transform(name, val))
        return args

    def bind_struct(self, arg: Any) -> "Queryx":
        """Bind parameters from attributes of ``arg``."""
        return self.bind(*self._struct_args(arg, None))

    def bind_struct_map(self, arg0: Any, arg1: Mapping[str, Any]) -> "Queryx":
        """Bind parameters from attributes of ``arg0``, falling back to ``arg1``."""
        return self.bind(*self._struct_args(arg0, arg1))

    def bind_map(self, arg: Mapping[str, Any]) -> "Queryx":
        """Bind parameters from a mapping of names to values."""
        args: list[Any] = []
        for name in self.names:
            if name not in arg:
                raise BindError(f"bind error: could not find name {name!r} in {arg!r}")
            args.append(self._transform(name, arg[name]))
        return self.bind(*args)

    def bind(self, *args: Any) -> "Queryx":
        """Set the query values, replacing any bound before."""
        self.values = list(args)
        return self

    def exec(self) -> None:
        """Execute the query on its session without returning rows."""
        if self._session is None:
            raise QueryError("query is not attached to a session")
        self._session.execute(self.stmt, list(self.values))


@dataclass
class Session:
    """Wraps a driver session and creates Queryx instances on it."""

    session: Any
    mapper: Mapper = field(default=default_mapper)

    def query(self, stmt: str, names: Optional[Sequence[str]]) -> Queryx:
        """Create a query from a statement and its parameter names."""
        return Queryx(stmt, names, session=self.session, mapper=self.mapper)

    def exec_stmt(self, stmt: str) -> None:
        """Execute a statement that has no parameters."""
        self.query(stmt, None).exec()