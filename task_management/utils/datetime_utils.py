"""Utility functions for datetime handling."""

from datetime import UTC, date, datetime


def ensure_utc_aware(dt: datetime | None) -> datetime | None:
    """Ensure datetime is UTC-aware. Naive values are taken to be UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def utc_now() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(UTC)


def utc_today(now: datetime | None = None) -> date:
    """Get the current UTC calendar date, or the UTC date of ``now``."""
    return ensure_utc_aware(now or utc_now()).date()
