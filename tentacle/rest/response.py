"""Metadata describing a completed GitHub REST exchange."""

from __future__ import annotations

import dataclasses
import typing as typ

from tentacle.models.rate_limit import Rate

from .pagination import PageLinks, parse_link_header

if typ.TYPE_CHECKING:
    import httpx

_RATE_HEADERS = {
    "limit": "X-RateLimit-Limit",
    "remaining": "X-RateLimit-Remaining",
    "used": "X-RateLimit-Used",
    "reset": "X-RateLimit-Reset",
}


def _header_int(headers: httpx.Headers, name: str) -> int | None:
    raw_value = headers.get(name)
    if raw_value is None:
        return None
    raw_value = raw_value.strip()
    if not (raw_value.isascii() and raw_value.isdigit()):
        return None
    return int(raw_value)


def parse_rate(headers: httpx.Headers) -> Rate | None:
    """Build a :class:`Rate` from ``X-RateLimit-*`` headers.

    Returns ``None`` when the response carries no limit header, as happens
    for endpoints that are not rate limited.
    """
    limit = _header_int(headers, _RATE_HEADERS["limit"])
    if limit is None:
        return None
    return Rate(
        limit=limit,
        remaining=_header_int(headers, _RATE_HEADERS["remaining"]),
        used=_header_int(headers, _RATE_HEADERS["used"]),
        reset=_header_int(headers, _RATE_HEADERS["reset"]),
        resource=headers.get("X-RateLimit-Resource"),
    )


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubResponse:
    """Status, headers, rate limit and pagination for one response.

    Attributes
    ----------
    status_code
        HTTP status code.
    headers
        Raw response headers.
    rate
        Rate limit state from ``X-RateLimit-*`` headers, when present.
    links
        Neighbouring pages advertised by the ``Link`` header.

    """

    status_code: int
    headers: httpx.Headers
    rate: Rate | None = None
    links: PageLinks = dataclasses.field(default_factory=PageLinks)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> GitHubResponse:
        """Capture metadata from an ``httpx`` response."""
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            rate=parse_rate(response.headers),
            links=parse_link_header(response.headers.get("Link")),
        )

    @property
    def next_page(self) -> int | None:
        """Return the next page number for offset pagination."""
        return self.links.next_page

    @property
    def prev_page(self) -> int | None:
        """Return the previous page number for offset pagination."""
        return self.links.prev_page

    @property
    def first_page(self) -> int | None:
        """Return the first page number for offset pagination."""
        return self.links.first_page

    @property
    def last_page(self) -> int | None:
        """Return the last page number for offset pagination."""
        return self.links.last_page

    @property
    def next_cursor(self) -> str | None:
        """Return the ``after`` cursor for cursor pagination."""
        return self.links.next_cursor

    @property
    def prev_cursor(self) -> str | None:
        """Return the ``before`` cursor for cursor pagination."""
        return self.links.prev_cursor
