"""GitHub App installation records."""

from __future__ import annotations

import datetime as dt

from ._base import GitHubStruct
from .users import User


class Installation(GitHubStruct):
    """An installation of a GitHub App on a user or organisation account.

    Most webhook deliveries only carry ``id`` and ``node_id``; the full
    record arrives with ``installation`` events.
    """

    id: int | None = None
    node_id: str | None = None
    app_id: int | None = None
    app_slug: str | None = None
    target_id: int | None = None
    target_type: str | None = None
    account: User | None = None
    repository_selection: str | None = None
    access_tokens_url: str | None = None
    repositories_url: str | None = None
    html_url: str | None = None
    events: list[str] | None = None
    permissions: dict[str, str] | None = None
    single_file_name: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    suspended_at: dt.datetime | None = None
