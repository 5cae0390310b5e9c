"""Base struct shared by GitHub resource records."""

from __future__ import annotations

import msgspec


class GitHubStruct(msgspec.Struct, kw_only=True, omit_defaults=True):
    """Record mirroring a GitHub JSON object.

    Every field is optional and defaults to ``None`` so that partial payloads
    decode cleanly and unset fields are left out when encoding. Subclasses
    inherit the ``kw_only`` and ``omit_defaults`` configuration.
    """
