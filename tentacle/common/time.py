"""Common time utilities."""

from __future__ import annotations

import datetime as dt


def format_rfc3339(value: dt.datetime) -> str:
    """Render an aware timestamp as RFC 3339 in UTC with a ``Z`` suffix.

    Raises
    ------
    ValueError
        If ``value`` is naive.

    """
    if value.tzinfo is None:
        msg = "timestamp must be timezone-aware"
        raise ValueError(msg)
    return value.astimezone(dt.UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def from_epoch_seconds(value: int) -> dt.datetime:
    """Convert a Unix timestamp (as sent in rate limit headers) to UTC."""
    return dt.datetime.fromtimestamp(value, tz=dt.UTC)
