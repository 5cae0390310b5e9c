"""Pagination metadata and page walking.

GitHub advertises neighbouring pages in the ``Link`` response header.
Offset-paginated endpoints carry a ``page`` query parameter on each link;
cursor-paginated endpoints carry ``after`` or ``before`` instead.
"""

from __future__ import annotations

import dataclasses
import typing as typ

import httpx

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .response import GitHubResponse

_PAGE_RELATIONS = ("next", "prev", "first", "last")


@dataclasses.dataclass(frozen=True, slots=True)
class PageLinks:
    """Page numbers and cursors parsed from a ``Link`` header.

    A field is ``None`` when the header does not advertise that relation.
    """

    next_page: int | None = None
    prev_page: int | None = None
    first_page: int | None = None
    last_page: int | None = None
    next_cursor: str | None = None
    prev_cursor: str | None = None


def _split_link(segment: str) -> tuple[str, str] | None:
    """Return ``(url, rel)`` for one ``<url>; rel="x"`` segment."""
    target, *params = (part.strip() for part in segment.split(";"))
    if not (target.startswith("<") and target.endswith(">")):
        return None
    url = target[1:-1]
    for param in params:
        name, _, value = param.partition("=")
        if name.strip() == "rel":
            return url, value.strip().strip('"')
    return None


def _page_number(params: httpx.QueryParams) -> int | None:
    raw_page = params.get("page")
    if raw_page is None or not (raw_page.isascii() and raw_page.isdigit()):
        return None
    return int(raw_page)


def parse_link_header(header: str | None) -> PageLinks:
    """Parse a ``Link`` header into :class:`PageLinks`.

    Malformed segments are skipped; an absent header yields empty links.
    """
    if not header:
        return PageLinks()

    pages: dict[str, int | None] = {}
    next_cursor: str | None = None
    prev_cursor: str | None = None
    for segment in header.split(","):
        parsed = _split_link(segment)
        if parsed is None:
            continue
        url, rel = parsed
        if rel not in _PAGE_RELATIONS:
            continue
        try:
            params = httpx.URL(url).params
        except httpx.InvalidURL:
            continue
        pages[rel] = _page_number(params)
        if rel == "next":
            next_cursor = params.get("after")
        elif rel == "prev":
            prev_cursor = params.get("before")

    return PageLinks(
        next_page=pages.get("next"),
        prev_page=pages.get("prev"),
        first_page=pages.get("first"),
        last_page=pages.get("last"),
        next_cursor=next_cursor,
        prev_cursor=prev_cursor,
    )


PageToken = int | str | None
"""Page number for offset pagination or ``after`` cursor for cursor pagination."""


async def scan[T](
    fetch: cabc.Callable[
        [PageToken], cabc.Awaitable[tuple[list[T], GitHubResponse]]
    ],
) -> cabc.AsyncIterator[T]:
    """Yield every item across all pages of a list operation.

    ``fetch`` is called with ``None`` for the first page and then with the
    next page number (offset pagination) or ``after`` cursor (cursor
    pagination) advertised by the previous response. Iteration ends when no
    further page is advertised. Errors raised by ``fetch`` propagate and stop
    the walk.

    Example:
    >>> async def fetch(page):
    ...     options = ListOptions(page=page, per_page=100)
    ...     return await client.organizations.list_members("octo-org", options)
    >>> members = [member async for member in scan(fetch)]

    """
    token: PageToken = None
    while True:
        items, response = await fetch(token)
        for item in items:
            yield item

        if response.next_page is not None:
            token = response.next_page
        elif response.next_cursor:
            token = response.next_cursor
        else:
            return


__all__ = ["PageLinks", "PageToken", "parse_link_header", "scan"]
