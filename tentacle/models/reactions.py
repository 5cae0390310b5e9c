"""Reaction rollups attached to issues and comments."""

from __future__ import annotations

import msgspec

from ._base import GitHubStruct


class Reactions(GitHubStruct):
    """Reaction counts keyed by emoji name.

    GitHub keys thumbs-up and thumbs-down as ``+1`` and ``-1``; those are
    exposed here as ``plus_one`` and ``minus_one``.
    """

    total_count: int | None = None
    plus_one: int | None = msgspec.field(default=None, name="+1")
    minus_one: int | None = msgspec.field(default=None, name="-1")
    laugh: int | None = None
    confused: int | None = None
    heart: int | None = None
    hooray: int | None = None
    rocket: int | None = None
    eyes: int | None = None
    url: str | None = None
