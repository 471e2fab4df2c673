"""USING and LIMIT clauses."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, TextIO

from cqlx.qb.values import Lit, Param, Value

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ZERO = timedelta(0)


def ttl(duration: timedelta) -> int:
    """Convert a duration to whole seconds, as expected by USING TTL."""
    return int(duration.total_seconds())


def timestamp(moment: datetime) -> int:
    """Convert a time to microseconds since the epoch, as expected by USING TIMESTAMP.

    Naive datetimes are taken to be in UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    delta = moment - _EPOCH
    return (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds


def _fraction(value: int, precision: int) -> tuple[int, str]:
    whole, frac = divmod(value, 10**precision)
    digits = f"{frac:0{precision}d}".rstrip("0") if precision else ""
    return whole, f".{digits}" if digits else ""


def format_duration(duration: timedelta) -> str:
    """Format a duration the way CQL timeouts are written, e.g. "1s", "1.5ms", "1h0m0s"."""
    nanos = (
        (duration.days * 86400 + duration.seconds) * 1_000_000 + duration.microseconds
    ) * 1000
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    u = abs(nanos)
    if u < 1_000_000_000:
        if u < 1_000:
            precision, unit = 0, "ns"
        elif u < 1_000_000:
            precision, unit = 3, "µs"
        else:
            precision, unit = 6, "ms"
        whole, frac = _fraction(u, precision)
        return f"{sign}{whole}{frac}{unit}"
    whole, frac = _fraction(u, 9)
    minutes, seconds = divmod(whole, 60)
    text = f"{seconds}{frac}s"
    if minutes:
        hours, minutes = divmod(minutes, 60)
        text = f"{minutes}m{text}"
        if hours:
            text = f"{hours}h{text}"
    return sign + text


class Using:
    """Accumulates TTL, TIMESTAMP and TIMEOUT options of a USING clause."""

    def __init__(self) -> None:
        # 0 means unset; -1 marks an explicit TTL of zero.
        self._ttl = 0
        self._ttl_name = ""
        self._timestamp = 0
        self._timestamp_name = ""
        self._timeout = _ZERO
        self._timeout_name = ""

    def ttl(self, duration: timedelta) -> "Using":
        self._ttl = ttl(duration) or -1
        self._timestamp_name = ""
        return self

    def ttl_named(self, name: str) -> "Using":
        self._ttl = 0
        self._ttl_name = name
        return self

    def timestamp(self, moment: datetime) -> "Using":
        self._timestamp = timestamp(moment)
        self._timestamp_name = ""
        return self

    def timestamp_named(self, name: str) -> "Using":
        self._timestamp = 0
        self._timestamp_name = name
        return self

    def timeout(self, duration: timedelta) -> "Using":
        self._timeout = duration
        self._timeout_name = ""
        return self

    def timeout_named(self, name: str) -> "Using":
        self._timeout = _ZERO
        self._timeout_name = name
        return self

    def write_cql(self, out: TextIO) -> list[str]:
        clauses: list[str] = []
        names: list[str] = []

        if self._ttl:
            clauses.append(f"TTL {0 if self._ttl == -1 else self._ttl} ")
        elif self._ttl_name:
            clauses.append("TTL ? ")
            names.append(self._ttl_name)

        if self._timestamp:
            clauses.append(f"TIMESTAMP {self._timestamp} ")
        elif self._timestamp_name:
            clauses.append("TIMESTAMP ? ")
            names.append(self._timestamp_name)

        if self._timeout:
            clauses.append(f"TIMEOUT {format_duration(self._timeout)} ")
        elif self._timeout_name:
            clauses.append("TIMEOUT ? ")
            names.append(self._timeout_name)

        if clauses:
            out.write("USING " + "AND ".join(clauses))
        return names


@dataclass(frozen=True)
class Limit:
    """A LIMIT or PER PARTITION LIMIT clause; empty when it has no value."""

    value: Optional[Value] = None
    per_partition: bool = False

    @classmethod
    def literal(cls, value: int, per_partition: bool = False) -> "Limit":
        if value < 0:
            raise ValueError(f"limit must not be negative, got {value}")
        return cls(Lit(str(value)), per_partition)

    @classmethod
    def named(cls, name: str, per_partition: bool = False) -> "Limit":
        return cls(Param(name), per_partition)

    def write_cql(self, out: TextIO) -> list[str]:
        if self.value is None:
            return []
        if self.per_partition:
            out.write("PER PARTITION ")
        out.write("LIMIT ")
        names = self.value.write_cql(out)
        out.write(" ")
        return names