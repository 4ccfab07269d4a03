"""The USING clause: TTL, TIMESTAMP, TIMEOUT and SERVICE LEVEL."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from cqlx.qb.values import format_duration

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ZERO = timedelta(0)


def ttl(d: timedelta) -> int:
    """Convert a duration to whole seconds as expected by USING TTL."""
    return int(d.total_seconds())


def timestamp(t: datetime) -> int:
    """Convert a time to microseconds since the epoch for USING TIMESTAMP.

    Naive datetimes are taken to be in UTC.
    """
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    return (t - _EPOCH) // timedelta(microseconds=1)


class Using:
    """Accumulates the options of a USING clause."""

    def __init__(self) -> None:
        self._ttl_name = ""
        self._timestamp_name = ""
        self._timeout_name = ""
        # 0 means unset; -1 stands for an explicit TTL of zero.
        self._ttl = 0
        self._timestamp = 0
        self._timeout = _ZERO
        self._service_level = ""

    def ttl(self, d: timedelta) -> "Using":
        self._ttl = ttl(d)
        if self._ttl == 0:
            self._ttl = -1
        self._timestamp_name = ""
        return self

    def ttl_named(self, name: str) -> "Using":
        self._ttl = 0
        self._ttl_name = name
        return self

    def timestamp(self, t: datetime) -> "Using":
        self._timestamp = timestamp(t)
        self._timestamp_name = ""
        return self

    def timestamp_named(self, name: str) -> "Using":
        self._timestamp = 0
        self._timestamp_name = name
        return self

    def timeout(self, d: timedelta) -> "Using":
        self._timeout = d
        self._timeout_name = ""
        return self

    def timeout_named(self, name: str) -> "Using":
        self._timeout = _ZERO
        self._timeout_name = name
        return self

    def service_level(self, name: str) -> "Using":
        self._service_level = name
        return self

    def write_cql(self) -> tuple[str, list[str]]:
        """Render the clause; returns an empty string when nothing is set."""
        parts: list[str] = []
        names: list[str] = []

        if self._ttl != 0:
            parts.append(f"TTL {0 if self._ttl == -1 else self._ttl}")
        elif self._ttl_name:
            parts.append("TTL ?")
            names.append(self._ttl_name)

        if self._timestamp != 0:
            parts.append(f"TIMESTAMP {self._timestamp}")
        elif self._timestamp_name:
            parts.append("TIMESTAMP ?")
            names.append(self._timestamp_name)

        if self._timeout != _ZERO:
            parts.append(f"TIMEOUT {format_duration(self._timeout)}")
        elif self._timeout_name:
            parts.append("TIMEOUT ?")
            names.append(self._timeout_name)

        if self._service_level:
            escaped = self._service_level.replace("'", "''")
            parts.append(f"SERVICE LEVEL '{escaped}'")

        if not parts:
            return "", names
        return "USING " + " AND ".join(parts) + " ", names