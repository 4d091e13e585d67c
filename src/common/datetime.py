"""Datetime utilities."""

from datetime import datetime, timezone


def parse_datetime(value) -> datetime:
    """Parse datetime from ISO string or return as-is if already datetime."""
    if value is None:
        return datetime.now(timezone.utc)
    if isinstance(value, datetime):
        return _ensure_utc(value)
    return _ensure_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))


def _ensure_utc(value: datetime) -> datetime:
    # Naive timestamps from feeds are treated as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def hours_since(value: datetime, now: datetime | None = None) -> float:
    """Return the number of hours elapsed between value and now (UTC)."""
    now = now or datetime.now(timezone.utc)
    return (_ensure_utc(now) - _ensure_utc(value)).total_seconds() / 3600
