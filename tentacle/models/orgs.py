"""GitHub organisation and team records."""

from __future__ import annotations

import datetime as dt

from ._base import GitHubStruct
from .users import User


class Organization(GitHubStruct):
    """A GitHub organisation."""

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    avatar_url: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    description: str | None = None
    public_repos: int | None = None
    followers: int | None = None
    following: int | None = None
    type: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None


class Team(GitHubStruct):
    """A team within an organisation."""

    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    url: str | None = None
    html_url: str | None = None
    permission: str | None = None
    privacy: str | None = None
    members_count: int | None = None
    repos_count: int | None = None


class Membership(GitHubStruct):
    """A user's membership of an organisation, as sent in webhooks."""

    url: str | None = None
    state: str | None = None
    role: str | None = None
    organization_url: str | None = None
    user: User | None = None
