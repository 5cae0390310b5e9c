"""Request construction, dispatch and error decoding for the REST API."""

from __future__ import annotations

from .client import GitHubClient, check_response
from .config import GitHubClientConfig
from .errors import (
    ErrorDetail,
    ErrorResponse,
    GitHubAPIError,
    GitHubConfigError,
    GitHubError,
    GitHubResponseShapeError,
    RateLimitError,
    RequestConstructionError,
)
from .options import ListOptions, PullRequestListCommentsOptions, UserListOptions
from .pagination import PageLinks, parse_link_header, scan
from .response import GitHubResponse, parse_rate

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "GitHubAPIError",
    "GitHubClient",
    "GitHubClientConfig",
    "GitHubConfigError",
    "GitHubError",
    "GitHubResponse",
    "GitHubResponseShapeError",
    "ListOptions",
    "PageLinks",
    "PullRequestListCommentsOptions",
    "RateLimitError",
    "RequestConstructionError",
    "UserListOptions",
    "check_response",
    "parse_link_header",
    "parse_rate",
    "scan",
]
