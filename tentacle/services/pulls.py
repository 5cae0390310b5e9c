"""Pull request and review comment operations.

GitHub API docs: https://docs.github.com/rest/pulls
"""

from __future__ import annotations

import typing as typ

from tentacle.models.pulls import PullRequest, PullRequestComment

from ._base import Service

if typ.TYPE_CHECKING:
    from tentacle.rest.options import PullRequestListCommentsOptions
    from tentacle.rest.response import GitHubResponse

ALL_PULL_REQUESTS: None = None
"""Pass as ``number`` to list review comments across a whole repository."""


def _require_positive(number: int, *, field: str) -> int:
    if number <= 0:
        msg = f"{field} must be a positive integer, got {number}"
        raise ValueError(msg)
    return number


class PullRequestsService(Service):
    """Operations on pull requests and their review comments."""

    async def get(
        self, owner: str, repo: str, number: int
    ) -> tuple[PullRequest, GitHubResponse]:
        """Fetch a single pull request."""
        _require_positive(number, field="number")
        request = self._client.new_request(
            "GET", f"repos/{owner}/{repo}/pulls/{number}"
        )
        return await self._client.do(request, PullRequest)

    async def list_comments(
        self,
        owner: str,
        repo: str,
        number: int | None,
        options: PullRequestListCommentsOptions | None = None,
    ) -> tuple[list[PullRequestComment], GitHubResponse]:
        """List review comments on one pull request or on the whole repository.

        Parameters
        ----------
        owner, repo
            Repository coordinates.
        number
            Pull request number. Pass :data:`ALL_PULL_REQUESTS` (``None``) to
            list comments across every pull request in the repository.
        options
            Optional sort, direction, since and paging parameters.

        Raises
        ------
        ValueError
            If ``number`` is zero or negative. Repository-wide listing must be
            requested explicitly with :data:`ALL_PULL_REQUESTS`.

        """
        if number is ALL_PULL_REQUESTS:
            path = f"repos/{owner}/{repo}/pulls/comments"
        else:
            _require_positive(number, field="number")
            path = f"repos/{owner}/{repo}/pulls/{number}/comments"

        request = self._client.new_request("GET", path, params=options)
        comments, response = await self._client.do(request, list[PullRequestComment])
        return comments or [], response

    async def get_comment(
        self, owner: str, repo: str, comment_id: int
    ) -> tuple[PullRequestComment, GitHubResponse]:
        """Fetch a single review comment by its ID."""
        request = self._client.new_request(
            "GET", f"repos/{owner}/{repo}/pulls/comments/{comment_id}"
        )
        return await self._client.do(request, PullRequestComment)

    async def create_comment(
        self,
        owner: str,
        repo: str,
        number: int,
        comment: PullRequestComment,
    ) -> tuple[PullRequestComment, GitHubResponse]:
        """Create a review comment on pull request ``number``.

        Only the fields set on ``comment`` are sent, typically ``body``,
        ``path``, ``commit_id`` and ``position`` or ``line``. The returned
        comment carries the ID GitHub assigned.
        """
        _require_positive(number, field="number")
        request = self._client.new_request(
            "POST", f"repos/{owner}/{repo}/pulls/{number}/comments", comment
        )
        return await self._client.do(request, PullRequestComment)

    async def edit_comment(
        self,
        owner: str,
        repo: str,
        comment_id: int,
        comment: PullRequestComment,
    ) -> tuple[PullRequestComment, GitHubResponse]:
        """Update the body of an existing review comment."""
        request = self._client.new_request(
            "PATCH", f"repos/{owner}/{repo}/pulls/comments/{comment_id}", comment
        )
        return await self._client.do(request, PullRequestComment)

    async def delete_comment(
        self, owner: str, repo: str, comment_id: int
    ) -> GitHubResponse:
        """Delete a review comment."""
        request = self._client.new_request(
            "DELETE", f"repos/{owner}/{repo}/pulls/comments/{comment_id}"
        )
        _, response = await self._client.do(request)
        return response
