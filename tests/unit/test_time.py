"""Unit tests for timestamp helpers."""

from __future__ import annotations

import datetime as dt

import pytest

from tentacle.common import format_rfc3339, from_epoch_seconds


def test_format_rfc3339_converts_to_utc() -> None:
    """Offsets are normalised to UTC with a ``Z`` suffix."""
    value = dt.datetime(2024, 1, 2, 5, 4, 5, tzinfo=dt.timezone(dt.timedelta(hours=2)))

    assert format_rfc3339(value) == "2024-01-02T03:04:05Z"


def test_format_rfc3339_rejects_naive() -> None:
    """Naive timestamps are ambiguous and rejected."""
    with pytest.raises(ValueError, match="timezone-aware"):
        format_rfc3339(dt.datetime(2024, 1, 2))  # noqa: DTZ001


def test_from_epoch_seconds() -> None:
    """Epoch seconds become aware UTC datetimes."""
    assert from_epoch_seconds(86400) == dt.datetime(1970, 1, 2, tzinfo=dt.UTC)
