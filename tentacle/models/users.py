"""GitHub user records."""

from __future__ import annotations

import datetime as dt

from ._base import GitHubStruct


class User(GitHubStruct):
    """A GitHub user or bot account.

    The same shape is embedded wherever GitHub reports an actor: comment
    authors, webhook senders, repository owners and organisation members.
    """

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    public_repos: int | None = None
    followers: int | None = None
    following: int | None = None
    type: str | None = None
    site_admin: bool | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
