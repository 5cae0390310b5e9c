"""GitHub issue, label and issue comment records."""

from __future__ import annotations

import datetime as dt

from ._base import GitHubStruct
from .reactions import Reactions
from .users import User


class Label(GitHubStruct):
    """A label applied to an issue or pull request."""

    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    name: str | None = None
    color: str | None = None
    description: str | None = None
    default: bool | None = None


class IssuePullRequestLinks(GitHubStruct):
    """Links present on an issue that is backed by a pull request."""

    url: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    merged_at: dt.datetime | None = None


class Issue(GitHubStruct):
    """A GitHub issue.

    Pull requests are also issues; for those ``pull_request`` carries the
    links to the pull request resource.
    """

    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    state: str | None = None
    state_reason: str | None = None
    title: str | None = None
    body: str | None = None
    user: User | None = None
    labels: list[Label] | None = None
    assignee: User | None = None
    assignees: list[User] | None = None
    comments: int | None = None
    locked: bool | None = None
    author_association: str | None = None
    reactions: Reactions | None = None
    pull_request: IssuePullRequestLinks | None = None
    html_url: str | None = None
    url: str | None = None
    closed_at: dt.datetime | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class IssueComment(GitHubStruct):
    """A comment on an issue or on a pull request's conversation tab."""

    id: int | None = None
    node_id: str | None = None
    body: str | None = None
    user: User | None = None
    author_association: str | None = None
    reactions: Reactions | None = None
    html_url: str | None = None
    url: str | None = None
    issue_url: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
