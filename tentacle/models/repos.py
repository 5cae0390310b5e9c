"""GitHub repository records."""

from __future__ import annotations

import datetime as dt

from ._base import GitHubStruct
from .users import User


class Repository(GitHubStruct):
    """A GitHub repository."""

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
    forks_count: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    open_issues_count: int | None = None
    size: int | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_pages: bool | None = None
    has_downloads: bool | None = None
    archived: bool | None = None
    disabled: bool | None = None
    visibility: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    pushed_at: dt.datetime | None = None
