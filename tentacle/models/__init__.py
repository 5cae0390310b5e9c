"""Typed records mirroring GitHub REST and webhook JSON payloads."""

from __future__ import annotations

from ._base import GitHubStruct
from .apps import Installation
from .events import (
    EVENT_TYPES,
    CommitAuthor,
    EventType,
    InstallationEvent,
    InstallationRepositoriesEvent,
    IssueCommentEvent,
    IssuesEvent,
    MemberEvent,
    OrganizationEvent,
    PingEvent,
    PullRequestEvent,
    PullRequestReviewCommentEvent,
    PushEvent,
    PushEventCommit,
    PushEventRepository,
    StarEvent,
    WebhookEvent,
)
from .issues import Issue, IssueComment, IssuePullRequestLinks, Label
from .orgs import Membership, Organization, Team
from .pulls import PullRequest, PullRequestBranch, PullRequestComment
from .rate_limit import Rate, RateLimitResponse, RateLimits
from .reactions import Reactions
from .repos import Repository
from .users import User

__all__ = [
    "EVENT_TYPES",
    "CommitAuthor",
    "EventType",
    "GitHubStruct",
    "Installation",
    "InstallationEvent",
    "InstallationRepositoriesEvent",
    "Issue",
    "IssueComment",
    "IssueCommentEvent",
    "IssuePullRequestLinks",
    "IssuesEvent",
    "Label",
    "MemberEvent",
    "Membership",
    "Organization",
    "OrganizationEvent",
    "PingEvent",
    "PullRequest",
    "PullRequestBranch",
    "PullRequestComment",
    "PullRequestEvent",
    "PullRequestReviewCommentEvent",
    "PushEvent",
    "PushEventCommit",
    "PushEventRepository",
    "Rate",
    "RateLimitResponse",
    "RateLimits",
    "Reactions",
    "Repository",
    "StarEvent",
    "User",
    "WebhookEvent",
]
