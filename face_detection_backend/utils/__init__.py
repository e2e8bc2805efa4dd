"""Utility modules for the face detection backend."""

from .datetime_utils import utc_now, ensure_utc, to_iso, now_iso

__all__ = [
    "utc_now",
    "ensure_utc",
    "to_iso",
    "now_iso",
]
