"""Unit tests for request construction on the GitHub REST client."""

from __future__ import annotations

import datetime as dt

import pytest

from tentacle import GitHubClient, GitHubClientConfig
from tentacle.models import PullRequestComment
from tentacle.rest import (
    GitHubConfigError,
    PullRequestListCommentsOptions,
    RequestConstructionError,
)
from tests.helpers.github_api import TEST_BASE_URL, TEST_TOKEN, FakeGitHub


def _client(**overrides: object) -> GitHubClient:
    settings: dict[str, object] = {"token": TEST_TOKEN, "base_url": TEST_BASE_URL}
    settings.update(overrides)
    return GitHubClient(GitHubClientConfig(**settings))  # type: ignore[arg-type]


class TestNewRequest:
    """Tests for GitHubClient.new_request."""

    def test_resolves_path_against_base_url(self) -> None:
        """Relative paths are joined onto the configured base URL."""
        request = _client().new_request("GET", "repos/octo/reef/pulls/7")

        assert str(request.url) == f"{TEST_BASE_URL}repos/octo/reef/pulls/7", (
            "Expected the path to resolve under the base URL."
        )
        assert request.method == "GET", "Expected the method to be preserved."

    def test_sets_github_headers(self) -> None:
        """Requests carry the media type, API version, user agent and token."""
        request = _client().new_request("GET", "user")

        assert request.headers["Accept"] == "application/vnd.github+json"
        assert request.headers["X-GitHub-Api-Version"] == "2022-11-28"
        assert request.headers["User-Agent"].startswith("tentacle/")
        assert request.headers["Authorization"] == f"Bearer {TEST_TOKEN}"
        assert "Content-Type" not in request.headers, (
            "Expected no Content-Type for a request without a body."
        )

    def test_unauthenticated_request_has_no_authorization(self) -> None:
        """A client without a token sends no Authorization header."""
        request = _client(token=None).new_request("GET", "users/octocat")

        assert "Authorization" not in request.headers, (
            "Expected unauthenticated requests to omit Authorization."
        )

    def test_encodes_struct_body_without_unset_fields(self) -> None:
        """Struct bodies are JSON encoded with only the populated fields."""
        comment = PullRequestComment(body="nice", path="main.go", position=4)

        request = _client().new_request(
            "POST", "repos/owner/repo/pulls/7/comments", comment
        )

        assert request.content == b'{"body":"nice","path":"main.go","position":4}'
        assert request.headers["Content-Type"] == "application/json"

    def test_encodes_mapping_body(self) -> None:
        """Plain mappings are accepted as request bodies."""
        request = _client().new_request("PATCH", "user", {"bio": "octo"})

        assert request.content == b'{"bio":"octo"}', "Expected mapping body."

    def test_rejects_unserializable_body(self) -> None:
        """A body that cannot be encoded raises before any I/O."""
        with pytest.raises(RequestConstructionError, match="not JSON serializable"):
            _client().new_request("POST", "user", {"when": object()})

    def test_rejects_unparseable_path(
        self, fake_github: FakeGitHub, github_client: GitHubClient
    ) -> None:
        """A path that does not form a URL raises and nothing is sent."""
        with pytest.raises(RequestConstructionError, match="Cannot build request URL"):
            github_client.new_request("GET", "http://[::1")

        assert fake_github.requests == [], "Expected no request to be sent."

    def test_appends_query_parameters_in_order(self) -> None:
        """List options encode as sort, direction, since, page, per_page."""
        since = dt.datetime(2024, 1, 2, 3, 4, 5, tzinfo=dt.UTC)
        options = PullRequestListCommentsOptions(
            sort="created", direction="asc", since=since, page=2, per_page=50
        )

        request = _client().new_request(
            "GET", "repos/o/r/pulls/comments", params=options
        )

        assert list(request.url.params.multi_items()) == [
            ("sort", "created"),
            ("direction", "asc"),
            ("since", "2024-01-02T03:04:05Z"),
            ("page", "2"),
            ("per_page", "50"),
        ], "Expected query parameters in the documented order."

    def test_rejects_naive_since(self) -> None:
        """Naive timestamps cannot be rendered as RFC 3339."""
        naive = dt.datetime(2024, 1, 2)  # noqa: DTZ001
        options = PullRequestListCommentsOptions(since=naive)

        with pytest.raises(RequestConstructionError, match="timezone-aware"):
            _client().new_request("GET", "repos/o/r/pulls/comments", params=options)


class TestClientConfiguration:
    """Tests for client configuration validation."""

    @pytest.mark.parametrize(
        "base_url",
        ["https://github.test/api/v3", "api/v3/", "not a url"],
    )
    def test_rejects_unusable_base_url(self, base_url: str) -> None:
        """Base URLs must be absolute and end with a slash."""
        with pytest.raises(GitHubConfigError, match="base URL"):
            _client(base_url=base_url)

    def test_rejects_blank_token(self) -> None:
        """An explicitly blank token is a configuration error."""
        with pytest.raises(GitHubConfigError, match="non-empty"):
            _client(token="   ")

    def test_defaults_to_public_github(self) -> None:
        """The default configuration targets api.github.com."""
        client = GitHubClient()

        assert str(client.base_url) == "https://api.github.com/", (
            "Expected the public GitHub API as default base URL."
        )
        assert client.config.token is None, "Expected no default token."
