"""Configuration for the GitHub REST client."""

from __future__ import annotations

import dataclasses
import math
import os

from .errors import GitHubConfigError

_DEFAULT_BASE_URL = "https://api.github.com/"
_DEFAULT_USER_AGENT = "tentacle/0.1.0"
_DEFAULT_API_VERSION = "2022-11-28"
_DEFAULT_TIMEOUT_S = 30.0


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubClientConfig:
    """Connection settings for :class:`~tentacle.rest.client.GitHubClient`.

    Attributes
    ----------
    token
        Bearer token sent in the ``Authorization`` header. ``None`` makes
        unauthenticated requests.
    base_url
        Root of the REST API. Must end with ``/``; point it at
        ``https://<host>/api/v3/`` for GitHub Enterprise Server.
    user_agent
        Value of the ``User-Agent`` header.
    api_version
        Value of the ``X-GitHub-Api-Version`` header.
    timeout_s
        Timeout applied to the HTTP client the GitHub client creates. Ignored
        when an ``httpx.AsyncClient`` is injected.

    """

    token: str | None = None
    base_url: str = _DEFAULT_BASE_URL
    user_agent: str = _DEFAULT_USER_AGENT
    api_version: str = _DEFAULT_API_VERSION
    timeout_s: float = _DEFAULT_TIMEOUT_S

    @staticmethod
    def _parse_timeout_from_env() -> float:
        raw_timeout = os.environ.get("TENTACLE_GITHUB_TIMEOUT_S")
        if raw_timeout is None:
            return _DEFAULT_TIMEOUT_S

        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise GitHubConfigError.invalid_timeout(raw_timeout) from exc

        if not math.isfinite(timeout) or timeout <= 0:
            raise GitHubConfigError.invalid_timeout(raw_timeout)
        return timeout

    @classmethod
    def from_env(cls) -> GitHubClientConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``TENTACLE_GITHUB_TOKEN``: Optional token; blank means
          unauthenticated
        - ``TENTACLE_GITHUB_BASE_URL``: Optional API root override
        - ``TENTACLE_GITHUB_TIMEOUT_S``: Optional timeout (positive float)

        Raises
        ------
        GitHubConfigError
            If the timeout is not a positive number.

        """
        token = os.environ.get("TENTACLE_GITHUB_TOKEN", "").strip() or None
        base_url = os.environ.get("TENTACLE_GITHUB_BASE_URL", _DEFAULT_BASE_URL)
        return cls(
            token=token,
            base_url=base_url.strip(),
            timeout_s=cls._parse_timeout_from_env(),
        )
