"""Per-resource service objects exposed on :class:`GitHubClient`."""

from __future__ import annotations

from .orgs import OrganizationsService
from .pulls import ALL_PULL_REQUESTS, PullRequestsService
from .users import UsersService

__all__ = [
    "ALL_PULL_REQUESTS",
    "OrganizationsService",
    "PullRequestsService",
    "UsersService",
]
