"""GitHub pull request and review comment records."""

from __future__ import annotations

import datetime as dt

from ._base import GitHubStruct
from .issues import Label
from .reactions import Reactions
from .repos import Repository
from .users import User


class PullRequestBranch(GitHubStruct):
    """The head or base side of a pull request."""

    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    user: User | None = None
    repo: Repository | None = None


class PullRequest(GitHubStruct):
    """A GitHub pull request."""

    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    state: str | None = None
    locked: bool | None = None
    title: str | None = None
    body: str | None = None
    user: User | None = None
    draft: bool | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    mergeable_state: str | None = None
    merged_by: User | None = None
    merge_commit_sha: str | None = None
    head: PullRequestBranch | None = None
    base: PullRequestBranch | None = None
    labels: list[Label] | None = None
    comments: int | None = None
    review_comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    author_association: str | None = None
    html_url: str | None = None
    url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    merged_at: dt.datetime | None = None
    closed_at: dt.datetime | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class PullRequestComment(GitHubStruct):
    """A review comment left on a line of a pull request diff.

    As a request body only the fields the caller sets are sent, so the same
    record serves for create (``body``, ``path``, ``position`` or ``line``,
    ``commit_id``) and edit (``body``) payloads.
    """

    id: int | None = None
    node_id: str | None = None
    in_reply_to_id: int | None = None
    pull_request_review_id: int | None = None
    body: str | None = None
    path: str | None = None
    diff_hunk: str | None = None
    position: int | None = None
    original_position: int | None = None
    line: int | None = None
    original_line: int | None = None
    side: str | None = None
    start_line: int | None = None
    start_side: str | None = None
    commit_id: str | None = None
    original_commit_id: str | None = None
    user: User | None = None
    reactions: Reactions | None = None
    author_association: str | None = None
    url: str | None = None
    html_url: str | None = None
    pull_request_url: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
