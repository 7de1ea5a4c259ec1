"""UTC instant helpers with millisecond precision."""

from __future__ import annotations

import math
import time
from datetime import UTC, datetime, timedelta, tzinfo

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(UTC)


def now_ms() -> float:
    """Return wall-clock time as epoch milliseconds."""
    return time.time() * 1000


def truncate_to_ms(value: datetime) -> datetime:
    """Drop sub-millisecond precision so the instant survives an epoch-ms round trip."""
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def to_utc(value: datetime, default_tz: tzinfo = UTC) -> datetime:
    """Attach `default_tz` to naive datetimes, then convert to UTC.

    Raises:
        ValueError: If the UTC instant falls outside the datetime range.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=default_tz)
    try:
        return value.astimezone(UTC)
    except OverflowError as e:
        raise ValueError(f"Instant out of range: {value.isoformat()}") from e


def from_epoch_ms(ms: int | float) -> datetime:
    """Build a UTC instant from epoch milliseconds, truncating fractions toward zero.

    Raises:
        ValueError: If `ms` is not finite or outside the datetime range.
    """
    try:
        finite = math.isfinite(ms)
    except OverflowError as e:
        raise ValueError(f"Epoch milliseconds out of range: {ms!r}") from e
    if not finite:
        raise ValueError(f"Epoch milliseconds must be finite, got {ms!r}")
    try:
        return EPOCH + timedelta(milliseconds=int(ms))
    except OverflowError as e:
        raise ValueError(f"Epoch milliseconds out of range: {ms!r}") from e


def to_epoch_ms(value: datetime) -> int:
    """Return the instant as whole epoch milliseconds."""
    return (to_utc(value) - EPOCH) // _ONE_MS
