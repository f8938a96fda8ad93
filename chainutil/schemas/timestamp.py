"""
Schemas & Canonicalization
File: timestamp.py

Purpose: UTC timestamps in the google.protobuf.Timestamp shape
({seconds: int64, nanos: int32}) so they can be embedded directly in
protocol messages.
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .canonical import ensure_utc
from .errors import TimestampException

NANOS_PER_SECOND: int = 1_000_000_000

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Seconds of 0001-01-01T00:00:00Z and 9999-12-31T23:59:59Z. The wire form
# accepts any int64; only conversions to datetime and text are bounded.
_CALENDAR_MIN_SECONDS: int = -62_135_596_800
_CALENDAR_MAX_SECONDS: int = 253_402_300_799


class Timestamp(BaseModel):
    """
    An instant in UTC as whole seconds since the Unix epoch plus the
    nanosecond remainder within that second.

    Immutable once built; nanos is always in [0, 1_000_000_000).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    seconds: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Seconds since the Unix epoch")
    nanos: int = Field(default=0, ge=0, lt=NANOS_PER_SECOND, description="Sub-second remainder in nanoseconds")

    @classmethod
    def from_unix_nanos(cls, total_nanos: int) -> "Timestamp":
        """Split a nanosecond count since the epoch into (seconds, nanos)."""
        seconds, nanos = divmod(total_nanos, NANOS_PER_SECOND)
        return cls(seconds=seconds, nanos=nanos)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Timestamp":
        """Build a Timestamp from a datetime. Naive datetimes are treated as UTC."""
        delta = ensure_utc(dt) - _EPOCH
        total_micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        return cls.from_unix_nanos(total_micros * 1_000)

    def to_unix_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    def _calendar(self, microseconds: int = 0) -> datetime:
        try:
            return _EPOCH + timedelta(seconds=self.seconds, microseconds=microseconds)
        except OverflowError as e:
            raise TimestampException(
                f"Timestamp seconds={self.seconds} is outside the calendar range "
                f"{_CALENDAR_MIN_SECONDS}..{_CALENDAR_MAX_SECONDS}",
                cause=e,
                details={"seconds": self.seconds},
            ) from e

    def to_datetime(self) -> datetime:
        """
        Convert to an aware UTC datetime.

        datetime only carries microseconds, so the last three digits of
        nanos are truncated.

        Raises:
            TimestampException: If seconds falls outside years 0001-9999
        """
        return self._calendar(self.nanos // 1_000)

    def to_rfc3339(self) -> str:
        """
        Render in the protobuf JSON text form, e.g. "2026-01-27T21:35:00.123456789Z".

        Fractional digits are emitted in groups of 0, 3, 6 or 9.

        Raises:
            TimestampException: If seconds falls outside years 0001-9999
        """
        base = self._calendar().replace(tzinfo=None).isoformat(timespec="seconds")
        if self.nanos == 0:
            return f"{base}Z"
        if self.nanos % 1_000_000 == 0:
            return f"{base}.{self.nanos // 1_000_000:03d}Z"
        if self.nanos % 1_000 == 0:
            return f"{base}.{self.nanos // 1_000:06d}Z"
        return f"{base}.{self.nanos:09d}Z"

    def to_dict(self) -> dict[str, Any]:
        return {"seconds": self.seconds, "nanos": self.nanos}


def create_utc_timestamp() -> Timestamp:
    """
    Capture the current wall-clock time as a UTC Timestamp.

    The clock is read exactly once so seconds and nanos always describe
    the same instant.
    """
    return Timestamp.from_unix_nanos(time.time_ns())


__all__ = [
    "NANOS_PER_SECOND",
    "Timestamp",
    "create_utc_timestamp",
]
