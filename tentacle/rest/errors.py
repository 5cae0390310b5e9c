"""Errors raised by the GitHub REST client.

Three failure families reach callers:

- local construction failures (``RequestConstructionError``), raised before
  any network I/O;
- transport failures, which are ``httpx`` exceptions propagated unchanged;
- API failures (``GitHubAPIError`` and ``RateLimitError``) for any response
  outside the 2xx range.
"""

from __future__ import annotations

import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from tentacle.models.rate_limit import Rate

    from .response import GitHubResponse

_BODY_PREVIEW_LIMIT = 100


class GitHubError(Exception):
    """Base exception for all Tentacle client errors."""


class ErrorDetail(msgspec.Struct, kw_only=True, omit_defaults=True):
    """One entry of the ``errors`` array in a GitHub error body.

    Validation codes include ``missing``, ``missing_field``, ``invalid``,
    ``already_exists`` and ``custom`` (which carries ``message``).
    """

    resource: str | None = None
    field: str | None = None
    code: str | None = None
    message: str | None = None

    def describe(self) -> str:
        """Return a one-line summary of the validation failure."""
        if self.code == "custom" and self.message:
            return self.message
        return (
            f"{self.code} error caused by {self.field} field on "
            f"{self.resource} resource"
        )


class ErrorResponse(msgspec.Struct, kw_only=True, omit_defaults=True):
    """Body GitHub returns alongside a non-2xx status.

    Some endpoints report ``errors`` as plain strings rather than objects,
    so both shapes are accepted.
    """

    message: str | None = None
    documentation_url: str | None = None
    errors: list[ErrorDetail | str] = msgspec.field(default_factory=list)


def _preview(text: str) -> str:
    if len(text) > _BODY_PREVIEW_LIMIT:
        return text[:_BODY_PREVIEW_LIMIT] + "..."
    return text


class RequestConstructionError(GitHubError):
    """Raised when a request cannot be built locally."""

    @classmethod
    def unserializable_body(cls, detail: str) -> RequestConstructionError:
        """Return an error for a payload that cannot be encoded as JSON."""
        return cls(f"Request body is not JSON serializable: {detail}")

    @classmethod
    def invalid_url(cls, url: str, detail: str) -> RequestConstructionError:
        """Return an error for a path that does not form a valid URL."""
        return cls(f"Cannot build request URL from {url!r}: {detail}")

    @classmethod
    def invalid_query(cls, detail: str) -> RequestConstructionError:
        """Return an error for query options that cannot be encoded."""
        return cls(f"Invalid query parameters: {detail}")


class GitHubAPIError(GitHubError):
    """Raised when GitHub answers with a status outside the 2xx range.

    Attributes
    ----------
    status_code
        HTTP status code of the response.
    method
        HTTP method of the failed request.
    url
        Fully-qualified URL of the failed request.
    message
        GitHub's ``message`` field, or an empty string when absent.
    errors
        Individual validation failures reported by GitHub.
    documentation_url
        Link to the GitHub documentation for the failing endpoint.
    response
        Metadata for the failed response (headers, rate limit, pagination).

    """

    def __init__(  # noqa: PLR0913
        self,
        message: str,
        *,
        status_code: int,
        method: str = "",
        url: str = "",
        errors: cabc.Sequence[ErrorDetail | str] = (),
        documentation_url: str | None = None,
        response: GitHubResponse | None = None,
    ) -> None:
        """Initialise with the decoded error body and request context."""
        self.status_code = status_code
        self.method = method
        self.url = url
        self.message = message
        self.errors = tuple(errors)
        self.documentation_url = documentation_url
        self.response = response
        super().__init__(self._summary())

    def _summary(self) -> str:
        summary = f"{self.method} {self.url}: {self.status_code} {self.message}"
        if self.errors:
            details = "; ".join(
                error.describe() if isinstance(error, ErrorDetail) else error
                for error in self.errors
            )
            summary = f"{summary} [{details}]"
        return summary.strip()

    @classmethod
    def from_error_body(
        cls,
        body: ErrorResponse,
        *,
        status_code: int,
        method: str,
        url: str,
        response: GitHubResponse | None = None,
    ) -> GitHubAPIError:
        """Build an error from a decoded GitHub error body."""
        return cls(
            body.message or "",
            status_code=status_code,
            method=method,
            url=url,
            errors=body.errors,
            documentation_url=body.documentation_url,
            response=response,
        )


class RateLimitError(GitHubAPIError):
    """Raised when a request is refused because the rate limit is exhausted."""

    @property
    def rate(self) -> Rate | None:
        """Return the rate limit state reported with the refusal."""
        if self.response is None:
            return None
        return self.response.rate


class GitHubResponseShapeError(GitHubError):
    """Raised when a successful response body does not match the expected type."""

    @classmethod
    def undecodable(
        cls, type_name: str, detail: str, body: str
    ) -> GitHubResponseShapeError:
        """Return an error for a 2xx body that failed to decode."""
        return cls(
            f"GitHub response is not a valid {type_name}: {detail} "
            f"(body: {_preview(body)})"
        )


class GitHubConfigError(GitHubError):
    """Raised when client configuration is invalid."""

    @classmethod
    def empty_token(cls) -> GitHubConfigError:
        """Return an error for an explicitly empty token."""
        return cls("GitHub token must be non-empty when provided")

    @classmethod
    def invalid_base_url(cls, base_url: str) -> GitHubConfigError:
        """Return an error for a base URL that cannot anchor relative paths."""
        return cls(
            f"GitHub base URL must be absolute and end with '/': {base_url!r}"
        )

    @classmethod
    def invalid_timeout(cls, value: str) -> GitHubConfigError:
        """Return an error for a non-positive or non-numeric timeout."""
        return cls(f"Invalid timeout {value!r}. Must be a positive number of seconds")
