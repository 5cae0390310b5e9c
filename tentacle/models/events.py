"""Webhook event payloads.

Each struct mirrors the JSON body GitHub delivers for one ``X-GitHub-Event``
name. The envelope fields ``sender``, ``organization`` and ``installation``
are shared through :class:`WebhookEvent`; ``repository`` is declared per
event because push deliveries use a different repository shape.
"""

from __future__ import annotations

import datetime as dt
import enum
import typing as typ

from ._base import GitHubStruct
from .apps import Installation
from .issues import Issue, IssueComment, Label
from .orgs import Membership, Organization
from .pulls import PullRequest, PullRequestComment
from .repos import Repository
from .users import User


class EventType(enum.StrEnum):
    """Webhook event names carried in the ``X-GitHub-Event`` header."""

    INSTALLATION = "installation"
    INSTALLATION_REPOSITORIES = "installation_repositories"
    ISSUE_COMMENT = "issue_comment"
    ISSUES = "issues"
    MEMBER = "member"
    ORGANIZATION = "organization"
    PING = "ping"
    PULL_REQUEST = "pull_request"
    PULL_REQUEST_REVIEW_COMMENT = "pull_request_review_comment"
    PUSH = "push"
    STAR = "star"


class WebhookEvent(GitHubStruct):
    """Context fields common to webhook deliveries."""

    sender: User | None = None
    organization: Organization | None = None
    installation: Installation | None = None


class PingEvent(WebhookEvent):
    """Sent when a webhook is first created."""

    zen: str | None = None
    hook_id: int | None = None
    hook: dict[str, typ.Any] | None = None
    repository: Repository | None = None


class CommitAuthor(GitHubStruct):
    """Author or committer of a pushed commit."""

    name: str | None = None
    email: str | None = None
    username: str | None = None
    date: dt.datetime | None = None


class PushEventCommit(GitHubStruct):
    """A commit listed in a push delivery."""

    id: str | None = None
    tree_id: str | None = None
    message: str | None = None
    timestamp: dt.datetime | None = None
    url: str | None = None
    distinct: bool | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None
    added: list[str] | None = None
    removed: list[str] | None = None
    modified: list[str] | None = None


class PushEventRepository(GitHubStruct):
    """Repository shape used by push deliveries.

    ``created_at`` and ``pushed_at`` arrive as Unix timestamps here, while
    other deliveries use ISO 8601 strings, so both forms are accepted.
    """

    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    full_name: str | None = None
    owner: User | None = None
    private: bool | None = None
    description: str | None = None
    fork: bool | None = None
    html_url: str | None = None
    url: str | None = None
    homepage: str | None = None
    language: str | None = None
    default_branch: str | None = None
    master_branch: str | None = None
    organization: str | None = None
    size: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    forks_count: int | None = None
    open_issues_count: int | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_pages: bool | None = None
    has_downloads: bool | None = None
    created_at: dt.datetime | int | None = None
    pushed_at: dt.datetime | int | None = None
    updated_at: dt.datetime | None = None


class PushEvent(WebhookEvent):
    """A git push to a repository branch or tag."""

    ref: str | None = None
    before: str | None = None
    after: str | None = None
    created: bool | None = None
    deleted: bool | None = None
    forced: bool | None = None
    base_ref: str | None = None
    compare: str | None = None
    commits: list[PushEventCommit] | None = None
    head_commit: PushEventCommit | None = None
    pusher: CommitAuthor | None = None
    repository: PushEventRepository | None = None


class PullRequestEvent(WebhookEvent):
    """Activity on a pull request (opened, closed, synchronize, ...)."""

    action: str | None = None
    number: int | None = None
    pull_request: PullRequest | None = None
    changes: dict[str, typ.Any] | None = None
    label: Label | None = None
    assignee: User | None = None
    requested_reviewer: User | None = None
    before: str | None = None
    after: str | None = None
    repository: Repository | None = None


class PullRequestReviewCommentEvent(WebhookEvent):
    """Activity on a pull request diff comment."""

    action: str | None = None
    comment: PullRequestComment | None = None
    pull_request: PullRequest | None = None
    changes: dict[str, typ.Any] | None = None
    repository: Repository | None = None


class IssuesEvent(WebhookEvent):
    """Activity on an issue."""

    action: str | None = None
    issue: Issue | None = None
    changes: dict[str, typ.Any] | None = None
    label: Label | None = None
    assignee: User | None = None
    repository: Repository | None = None


class IssueCommentEvent(WebhookEvent):
    """Activity on an issue comment; also fired for pull request comments."""

    action: str | None = None
    issue: Issue | None = None
    comment: IssueComment | None = None
    changes: dict[str, typ.Any] | None = None
    repository: Repository | None = None


class InstallationEvent(WebhookEvent):
    """A GitHub App was installed, removed, suspended or reconfigured."""

    action: str | None = None
    repositories: list[Repository] | None = None
    requester: User | None = None


class InstallationRepositoriesEvent(WebhookEvent):
    """Repositories were added to or removed from an installation."""

    action: str | None = None
    repository_selection: str | None = None
    repositories_added: list[Repository] | None = None
    repositories_removed: list[Repository] | None = None
    requester: User | None = None


class MemberEvent(WebhookEvent):
    """A collaborator was added to, removed from or edited on a repository."""

    action: str | None = None
    member: User | None = None
    changes: dict[str, typ.Any] | None = None
    repository: Repository | None = None


class OrganizationEvent(WebhookEvent):
    """Membership or lifecycle activity on an organisation."""

    action: str | None = None
    membership: Membership | None = None
    invitation: dict[str, typ.Any] | None = None
    changes: dict[str, typ.Any] | None = None


class StarEvent(WebhookEvent):
    """A repository was starred or unstarred."""

    action: str | None = None
    starred_at: dt.datetime | None = None
    repository: Repository | None = None


EVENT_TYPES: dict[EventType, type[WebhookEvent]] = {
    EventType.INSTALLATION: InstallationEvent,
    EventType.INSTALLATION_REPOSITORIES: InstallationRepositoriesEvent,
    EventType.ISSUE_COMMENT: IssueCommentEvent,
    EventType.ISSUES: IssuesEvent,
    EventType.MEMBER: MemberEvent,
    EventType.ORGANIZATION: OrganizationEvent,
    EventType.PING: PingEvent,
    EventType.PULL_REQUEST: PullRequestEvent,
    EventType.PULL_REQUEST_REVIEW_COMMENT: PullRequestReviewCommentEvent,
    EventType.PUSH: PushEvent,
    EventType.STAR: StarEvent,
}
