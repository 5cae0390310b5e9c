"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import typing as typ

import pytest

from tests.helpers.github_api import FakeGitHub

if typ.TYPE_CHECKING:
    from tentacle import GitHubClient


@pytest.fixture
def fake_github() -> FakeGitHub:
    """Return an in-memory GitHub API with an empty response queue."""
    return FakeGitHub()


@pytest.fixture
def github_client(fake_github: FakeGitHub) -> GitHubClient:
    """Return a client wired to ``fake_github``."""
    return fake_github.client()
