"""Utility helper functions for the stats API."""

import os
from datetime import datetime, timezone


def mtime_from_timestamp(timestamp: float) -> datetime:
    """
    Convert a stat modification time to an aware UTC datetime.

    Args:
        timestamp: Seconds since the epoch (st_mtime)

    Returns:
        UTC datetime
    """
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def format_timestamp(value: datetime) -> str:
    """
    Format a datetime as RFC 3339 in UTC (e.g. "2023-01-01T00:00:00Z").

    Fractional seconds are only emitted when non-zero.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def entry_name(path: str) -> str:
    """
    Return the final component of a filesystem path.

    Args:
        path: Filesystem path, possibly with trailing separators

    Returns:
        Base name, or "/" for the filesystem root
    """
    stripped = path.rstrip(os.sep)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)
