"""Unit tests for the users service."""

from __future__ import annotations

import typing as typ

import pytest

from tentacle.models import User
from tentacle.rest import UserListOptions

if typ.TYPE_CHECKING:
    from tentacle import GitHubClient
    from tests.helpers.github_api import FakeGitHub


@pytest.mark.parametrize(
    ("login", "expected_path"),
    [("octocat", "/api/v3/users/octocat"), (None, "/api/v3/user")],
)
@pytest.mark.asyncio
async def test_get_user(
    fake_github: FakeGitHub,
    github_client: GitHubClient,
    login: str | None,
    expected_path: str,
) -> None:
    """A named user or the authenticated user is fetched."""
    fake_github.queue(json={"login": "octocat", "site_admin": False})

    user, _ = await github_client.users.get(login)

    assert fake_github.last_request.url.path == expected_path
    assert user.login == "octocat"
    assert user.site_admin is False


@pytest.mark.asyncio
async def test_edit_user(
    fake_github: FakeGitHub, github_client: GitHubClient
) -> None:
    """Editing PATCHes the authenticated user's profile."""
    fake_github.queue(json={"login": "octocat", "bio": "Octo"})

    user, _ = await github_client.users.edit(User(bio="Octo"))

    assert fake_github.last_request.method == "PATCH"
    assert fake_github.last_request.url.path == "/api/v3/user"
    assert fake_github.last_json() == {"bio": "Octo"}
    assert user.bio == "Octo"


@pytest.mark.asyncio
async def test_list_all_uses_since_id(
    fake_github: FakeGitHub, github_client: GitHubClient
) -> None:
    """Listing every user pages by the last seen user ID."""
    fake_github.queue(json=[{"login": "b", "id": 136}])

    users, _ = await github_client.users.list_all(
        UserListOptions(since=135, per_page=1)
    )

    request = fake_github.last_request
    assert request.url.path == "/api/v3/users"
    assert list(request.url.params.multi_items()) == [
        ("since", "135"),
        ("per_page", "1"),
    ]
    assert [user.id for user in users] == [136]
