"""Tentacle: an asynchronous GitHub REST API client and webhook toolkit."""

from __future__ import annotations

from tentacle.rest import (
    GitHubAPIError,
    GitHubClient,
    GitHubClientConfig,
    GitHubConfigError,
    GitHubError,
    GitHubResponse,
    GitHubResponseShapeError,
    RateLimitError,
    RequestConstructionError,
)

__version__ = "0.1.0"

__all__ = [
    "GitHubAPIError",
    "GitHubClient",
    "GitHubClientConfig",
    "GitHubConfigError",
    "GitHubError",
    "GitHubResponse",
    "GitHubResponseShapeError",
    "RateLimitError",
    "RequestConstructionError",
    "__version__",
]
