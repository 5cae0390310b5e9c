"""Unit tests for Link header parsing and page walking."""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

import httpx
import pytest

from tentacle.rest import (
    GitHubAPIError,
    GitHubResponse,
    ListOptions,
    PageLinks,
    parse_link_header,
    scan,
)

if typ.TYPE_CHECKING:
    from tentacle import GitHubClient
    from tentacle.models import User
    from tentacle.rest.pagination import PageToken
    from tests.helpers.github_api import FakeGitHub

_BASE = "https://api.github.com/organizations/1/members"


def test_parse_offset_links() -> None:
    """Offset links yield next, prev, first and last page numbers."""
    header = (
        f'<{_BASE}?page=3&per_page=2>; rel="next", '
        f'<{_BASE}?page=1&per_page=2>; rel="prev", '
        f'<{_BASE}?page=1&per_page=2>; rel="first", '
        f'<{_BASE}?page=9&per_page=2>; rel="last"'
    )

    assert parse_link_header(header) == PageLinks(
        next_page=3, prev_page=1, first_page=1, last_page=9
    )


def test_parse_cursor_links() -> None:
    """Cursor links yield the after and before cursors."""
    header = (
        f'<{_BASE}?after=Y3Vyc29yOjI%3D>; rel="next", '
        f'<{_BASE}?before=Y3Vyc29yOjE%3D>; rel="prev"'
    )

    links = parse_link_header(header)

    assert links.next_cursor == "Y3Vyc29yOjI=", "Expected the decoded cursor."
    assert links.prev_cursor == "Y3Vyc29yOjE="
    assert links.next_page is None, "Expected no page number for cursor links."


@pytest.mark.parametrize(
    "header",
    [None, "", "garbage", f'{_BASE}?page=2; rel="next"', f"<{_BASE}?page=2>"],
)
def test_parse_malformed_links(header: str | None) -> None:
    """Absent or malformed headers produce empty links."""
    assert parse_link_header(header) == PageLinks()


def test_parse_links_ignores_non_ascii_page_digits() -> None:
    """A page value that is not an ASCII number yields no page number."""
    links = parse_link_header(f'<{_BASE}?page=%C2%B2>; rel="next"')

    assert links.next_page is None, "Expected the superscript page to be ignored."


def _response(link: str | None = None) -> GitHubResponse:
    headers = httpx.Headers({"Link": link} if link else {})
    return GitHubResponse(
        status_code=HTTPStatus.OK, headers=headers, links=parse_link_header(link)
    )


@pytest.mark.asyncio
async def test_scan_follows_page_numbers() -> None:
    """scan keeps fetching while a next page is advertised."""
    pages = {
        None: (["a", "b"], _response(f'<{_BASE}?page=2>; rel="next"')),
        2: (["c"], _response(f'<{_BASE}?page=3>; rel="next"')),
        3: (["d"], _response()),
    }
    seen: list[PageToken] = []

    async def fetch(token: PageToken) -> tuple[list[str], GitHubResponse]:
        seen.append(token)
        return pages[token]

    items = [item async for item in scan(fetch)]

    assert items == ["a", "b", "c", "d"]
    assert seen == [None, 2, 3], "Expected one fetch per advertised page."


@pytest.mark.asyncio
async def test_scan_follows_cursors() -> None:
    """scan passes the after cursor when no page number is advertised."""
    pages = {
        None: ([1], _response(f'<{_BASE}?after=abc>; rel="next"')),
        "abc": ([2], _response()),
    }

    async def fetch(token: PageToken) -> tuple[list[int], GitHubResponse]:
        return pages[token]

    assert [item async for item in scan(fetch)] == [1, 2]


@pytest.mark.asyncio
async def test_scan_over_service_and_error_stops_walk(
    fake_github: FakeGitHub, github_client: GitHubClient
) -> None:
    """Errors from a later page propagate after earlier items are yielded."""
    fake_github.queue(
        json=[{"login": "a"}],
        headers={"Link": f'<{_BASE}?page=2>; rel="next"'},
    )
    fake_github.queue(HTTPStatus.INTERNAL_SERVER_ERROR, json={"message": "boom"})

    async def fetch(token: PageToken) -> tuple[list[User], GitHubResponse]:
        page = token if isinstance(token, int) else None
        return await github_client.organizations.list_members(
            "octo-org", ListOptions(page=page, per_page=1)
        )

    logins: list[str | None] = []
    with pytest.raises(GitHubAPIError):
        async for member in scan(fetch):
            logins.append(member.login)

    assert logins == ["a"], "Expected the first page before the failure."
    assert fake_github.requests[1].url.params["page"] == "2"
