"""Behavioural coverage for creating pull request review comments."""

from __future__ import annotations

import asyncio
import typing as typ
from http import HTTPStatus

from pytest_bdd import given, parsers, scenario, then, when

from tentacle.models import PullRequestComment
from tentacle.rest import GitHubAPIError
from tests.helpers.github_api import TEST_BASE_URL, FakeGitHub

if typ.TYPE_CHECKING:
    from tentacle.rest import GitHubResponse


class CommentContext(typ.TypedDict, total=False):
    """Mutable context shared between steps."""

    fake: FakeGitHub
    comment: PullRequestComment
    response: GitHubResponse
    error: GitHubAPIError


@scenario(
    "../pull_request_comments.feature",
    "Create a review comment on a pull request",
)
def test_create_review_comment() -> None:
    """Wrapper for pytest-bdd scenario."""


@scenario(
    "../pull_request_comments.feature",
    "Reject a comment on a missing pull request",
)
def test_reject_comment_on_missing_pull_request() -> None:
    """Wrapper for pytest-bdd scenario."""


@given(
    "a GitHub API that accepts review comments",
    target_fixture="comment_context",
)
def given_api_accepting_comments() -> CommentContext:
    """Queue a 201 reply carrying the server-assigned comment ID."""
    fake = FakeGitHub()
    fake.queue(
        HTTPStatus.CREATED,
        json={"id": 1, "body": "nice", "path": "main.go", "position": 4},
    )
    return {"fake": fake}


@given(
    parsers.parse("a GitHub API that reports pull request {number:d} as missing"),
    target_fixture="comment_context",
)
def given_api_missing_pull_request(number: int) -> CommentContext:
    """Queue a 404 reply for the pull request."""
    fake = FakeGitHub()
    fake.queue(
        HTTPStatus.NOT_FOUND,
        json={"message": f"Pull request {number} Not Found"},
    )
    return {"fake": fake}


@when(
    parsers.parse(
        'I comment "{body}" at position {position:d} of "{path}" in pull request '
        '{number:d} of "{slug}"'
    )
)
def when_create_comment(  # noqa: PLR0913 - one argument per step placeholder
    comment_context: CommentContext,
    body: str,
    position: int,
    path: str,
    number: int,
    slug: str,
) -> None:
    """Create a review comment through the pull request service."""
    owner, repo = slug.split("/", 1)
    client = comment_context["fake"].client()
    comment = PullRequestComment(body=body, path=path, position=position)

    async def _create() -> None:
        async with client:
            try:
                created, response = await client.pull_requests.create_comment(
                    owner, repo, number, comment
                )
            except GitHubAPIError as exc:
                comment_context["error"] = exc
                return
            comment_context["comment"] = created
            comment_context["response"] = response

    asyncio.run(_create())


@then(parsers.parse('the request is a POST to "{path}"'))
def then_request_is_post(comment_context: CommentContext, path: str) -> None:
    """Check the method, URL and body of the outgoing request."""
    fake = comment_context["fake"]
    request = fake.last_request
    assert request.method == "POST", "Expected a POST request."
    assert str(request.url) == f"{TEST_BASE_URL}{path}", "Expected the comments URL."
    assert fake.last_json() == {"body": "nice", "path": "main.go", "position": 4}


@then(parsers.parse('the created comment has ID {comment_id:d} and body "{body}"'))
def then_comment_created(
    comment_context: CommentContext, comment_id: int, body: str
) -> None:
    """Check the decoded comment."""
    comment = comment_context["comment"]
    assert comment.id == comment_id, "Expected the server-assigned ID."
    assert comment.body == body
    assert comment_context["response"].status_code == HTTPStatus.CREATED


@then(parsers.parse("the client raises an API error with status {status:d}"))
def then_api_error(comment_context: CommentContext, status: int) -> None:
    """Check that the error carries the status and nothing was returned."""
    assert "comment" not in comment_context, "Expected no comment to be returned."
    assert comment_context["error"].status_code == status
