from __future__ import annotations

from datetime import datetime, timezone


def unix_to_datetime(ts: int) -> datetime:
    """Convert integer unix seconds into a tz-aware UTC datetime."""
    if isinstance(ts, bool) or not isinstance(ts, int):
        raise TypeError(f"timestamp must be an integer number of seconds, got {type(ts).__name__}")
    return datetime.fromtimestamp(ts, tz=timezone.utc)


def iso_z(dt: datetime) -> str:
    """UTC ISO-8601 with 'Z' suffix, used when frames are logged."""
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def bool_flag(v: bool) -> str:
    return "1" if v else "0"
