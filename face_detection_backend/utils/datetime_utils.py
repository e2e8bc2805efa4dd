"""
Centralized DateTime Utilities
==============================

All timestamps in the application are UTC.

Functions:
- utc_now(): timezone-aware current UTC datetime (use for persisted values)
- ensure_utc(): normalize naive/aware datetimes to aware UTC
- to_iso(): ISO 8601 string with millisecond precision and a ``Z`` suffix
- now_iso(): shortcut for ``to_iso(utc_now())``, used in real-time messages
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (SQLite drops tzinfo on read)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: datetime) -> str:
    """Format a datetime the way browsers print ``Date.toISOString()``."""
    value = ensure_utc(dt)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_iso() -> str:
    return to_iso(utc_now())
