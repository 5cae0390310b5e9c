"""Rate limit records."""

from __future__ import annotations

import typing as typ

from tentacle.common.time import from_epoch_seconds

from ._base import GitHubStruct

if typ.TYPE_CHECKING:
    import datetime as dt


class Rate(GitHubStruct):
    """Rate limit state for one resource family.

    ``reset`` is a Unix timestamp, matching both the ``rate_limit`` endpoint
    and the ``X-RateLimit-Reset`` header.
    """

    limit: int | None = None
    remaining: int | None = None
    used: int | None = None
    reset: int | None = None
    resource: str | None = None

    @property
    def reset_at(self) -> dt.datetime | None:
        """Return the reset time as an aware UTC datetime."""
        if self.reset is None:
            return None
        return from_epoch_seconds(self.reset)


class RateLimits(GitHubStruct):
    """Per-resource rate limits reported by ``GET /rate_limit``."""

    core: Rate | None = None
    search: Rate | None = None
    graphql: Rate | None = None
    integration_manifest: Rate | None = None
    code_search: Rate | None = None


class RateLimitResponse(GitHubStruct):
    """Envelope returned by ``GET /rate_limit``."""

    resources: RateLimits | None = None
    rate: Rate | None = None
