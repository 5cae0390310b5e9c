"""Shared plumbing for resource services."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from tentacle.rest.client import GitHubClient


class Service:
    """Base class holding the client a resource service delegates to."""

    def __init__(self, client: GitHubClient) -> None:
        """Bind the service to ``client``."""
        self._client = client
