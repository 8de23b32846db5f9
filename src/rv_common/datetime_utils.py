"""Timezone-aware datetime utilities."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def to_epoch_seconds(dt: datetime) -> int:
    """Whole epoch seconds; naive datetimes are rejected."""
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return int(dt.timestamp())


def from_epoch_seconds(ts: int) -> datetime:
    return datetime.fromtimestamp(ts, tz=timezone.utc)


def get_zone(name: str) -> ZoneInfo:
    return ZoneInfo(name)
