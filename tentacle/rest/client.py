"""GitHub REST client: request construction, dispatch and error decoding.

Every service method funnels through two calls:

``new_request``
    resolves a relative path against the configured base URL, encodes the
    body as JSON and attaches the headers GitHub expects. It performs no I/O.
``do``
    sends the request once, raises a typed error for non-2xx responses and
    decodes successful bodies into the requested ``msgspec`` type.

Example:
>>> import asyncio
>>> from tentacle import GitHubClient, GitHubClientConfig
>>> async def main():
...     async with GitHubClient(GitHubClientConfig(token="...")) as client:
...         user, response = await client.users.get("octocat")
...         return user.login, response.rate
>>> # asyncio.run(main())

"""

from __future__ import annotations

import typing as typ

import httpx
import msgspec

from tentacle.logging import get_logger, log_debug, log_warning
from tentacle.models.rate_limit import RateLimitResponse, RateLimits
from tentacle.services.orgs import OrganizationsService
from tentacle.services.pulls import PullRequestsService
from tentacle.services.users import UsersService

from .config import GitHubClientConfig
from .errors import (
    ErrorResponse,
    GitHubAPIError,
    GitHubConfigError,
    GitHubResponseShapeError,
    RateLimitError,
    RequestConstructionError,
)
from .response import GitHubResponse

if typ.TYPE_CHECKING:
    import types

    from .options import QueryOptions

logger = get_logger(__name__)

_JSON_MEDIA_TYPE = "application/json"
_GITHUB_MEDIA_TYPE = "application/vnd.github+json"
_HTTP_FORBIDDEN = 403
_HTTP_TOO_MANY_REQUESTS = 429


def _is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299  # noqa: PLR2004


def _decode_error_body(content: bytes) -> ErrorResponse:
    """Decode an error body, tolerating empty or unexpected payloads."""
    if not content.strip():
        return ErrorResponse()
    try:
        return msgspec.json.decode(content, type=ErrorResponse)
    except msgspec.DecodeError:
        pass
    try:
        raw = msgspec.json.decode(content)
    except msgspec.DecodeError:
        return ErrorResponse()
    if isinstance(raw, dict) and isinstance(raw.get("message"), str):
        return ErrorResponse(message=raw["message"])
    return ErrorResponse()


def _is_rate_limited(response: httpx.Response) -> bool:
    if response.status_code == _HTTP_TOO_MANY_REQUESTS:
        return True
    return (
        response.status_code == _HTTP_FORBIDDEN
        and response.headers.get("X-RateLimit-Remaining") == "0"
    )


def check_response(
    response: httpx.Response, metadata: GitHubResponse | None = None
) -> None:
    """Raise a typed error when ``response`` is outside the 2xx range.

    The body is decoded into :class:`ErrorResponse` when possible; any other
    body is ignored and the error carries only the status code.

    Raises
    ------
    RateLimitError
        For 429 responses and 403 responses with no remaining rate limit.
    GitHubAPIError
        For any other non-2xx response.

    """
    if _is_success(response.status_code):
        return

    body = _decode_error_body(response.content)
    error_cls = RateLimitError if _is_rate_limited(response) else GitHubAPIError
    error = error_cls.from_error_body(
        body,
        status_code=response.status_code,
        method=response.request.method,
        url=str(response.request.url),
        response=metadata or GitHubResponse.from_httpx(response),
    )
    log_warning(logger, "GitHub API error: %s", error)
    raise error


class GitHubClient:
    """Asynchronous client for the GitHub REST API.

    Parameters
    ----------
    config
        Connection settings. Defaults to unauthenticated access to
        ``https://api.github.com/``.
    http_client
        Optional ``httpx.AsyncClient`` to send requests with. When omitted
        the instance creates and owns one.

    Attributes
    ----------
    pull_requests
        Pull request and review comment operations.
    organizations
        Organisation, membership and team operations.
    users
        User account operations.

    """

    def __init__(
        self,
        config: GitHubClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Validate configuration and wire up the resource services."""
        self._config = config or GitHubClientConfig()
        if self._config.token is not None and not self._config.token.strip():
            raise GitHubConfigError.empty_token()
        self._base_url = self._parse_base_url(self._config.base_url)

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=self._config.timeout_s
        )

        self.pull_requests = PullRequestsService(self)
        self.organizations = OrganizationsService(self)
        self.users = UsersService(self)

    @staticmethod
    def _parse_base_url(base_url: str) -> httpx.URL:
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as exc:
            raise GitHubConfigError.invalid_base_url(base_url) from exc
        if not url.is_absolute_url or not url.path.endswith("/"):
            raise GitHubConfigError.invalid_base_url(base_url)
        return url

    @property
    def config(self) -> GitHubClientConfig:
        """Return the configuration used to build this client."""
        return self._config

    @property
    def base_url(self) -> httpx.URL:
        """Return the URL relative paths are resolved against."""
        return self._base_url

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> typ.Self:
        """Return the client for use in ``async with``."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned resources on exit."""
        await self.aclose()

    def _headers(self, *, has_body: bool) -> dict[str, str]:
        headers = {
            "Accept": _GITHUB_MEDIA_TYPE,
            "User-Agent": self._config.user_agent,
            "X-GitHub-Api-Version": self._config.api_version,
        }
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"
        if has_body:
            headers["Content-Type"] = _JSON_MEDIA_TYPE
        return headers

    def new_request(
        self,
        method: str,
        path: str,
        body: object | None = None,
        *,
        params: QueryOptions | None = None,
    ) -> httpx.Request:
        """Build a request for ``path`` relative to the base URL.

        Parameters
        ----------
        method
            HTTP verb.
        path
            Resource path without a leading slash, e.g.
            ``"repos/octo/reef/pulls/7/comments"``.
        body
            Optional payload (a struct, mapping or list) encoded as JSON.
        params
            Optional query options appended to the URL.

        Raises
        ------
        RequestConstructionError
            If ``body`` cannot be encoded, ``params`` are invalid, or
            ``path`` does not form a valid URL.

        """
        try:
            url = self._base_url.join(path)
        except httpx.InvalidURL as exc:
            raise RequestConstructionError.invalid_url(path, str(exc)) from exc

        query: list[tuple[str, str]] = []
        if params is not None:
            try:
                query = params.to_params()
            except ValueError as exc:
                raise RequestConstructionError.invalid_query(str(exc)) from exc

        content: bytes | None = None
        if body is not None:
            try:
                content = msgspec.json.encode(body)
            except (TypeError, msgspec.EncodeError) as exc:
                raise RequestConstructionError.unserializable_body(str(exc)) from exc

        return httpx.Request(
            method,
            url,
            params=query or None,
            headers=self._headers(has_body=content is not None),
            content=content,
        )

    @typ.overload
    async def do[T](
        self, request: httpx.Request, response_type: type[T]
    ) -> tuple[T, GitHubResponse]: ...

    @typ.overload
    async def do(
        self, request: httpx.Request, response_type: None = None
    ) -> tuple[None, GitHubResponse]: ...

    async def do(
        self,
        request: httpx.Request,
        response_type: typ.Any = None,
    ) -> tuple[typ.Any, GitHubResponse]:
        """Send ``request`` once and decode the response.

        Parameters
        ----------
        request
            Request produced by :meth:`new_request`.
        response_type
            Type to decode a successful body into, e.g. ``PullRequestComment``
            or ``list[User]``. ``None`` discards the body.

        Returns
        -------
        tuple
            The decoded value (``None`` when no type was requested or the body
            is empty) and the response metadata.

        Raises
        ------
        GitHubAPIError
            If the response status is outside the 2xx range.
        GitHubResponseShapeError
            If a successful body does not decode into ``response_type``.
        httpx.TransportError
            Propagated unchanged when the request cannot be sent.

        """
        response = await self._client.send(request)
        log_debug(
            logger,
            "%s %s -> %d",
            request.method,
            request.url,
            response.status_code,
        )
        metadata = GitHubResponse.from_httpx(response)
        check_response(response, metadata)

        if response_type is None or not response.content.strip():
            return None, metadata
        try:
            value = msgspec.json.decode(response.content, type=response_type)
        except msgspec.DecodeError as exc:
            raise GitHubResponseShapeError.undecodable(
                getattr(response_type, "__name__", str(response_type)),
                str(exc),
                response.text,
            ) from exc
        return value, metadata

    async def rate_limit(self) -> tuple[RateLimits, GitHubResponse]:
        """Fetch the current rate limits for every resource family."""
        request = self.new_request("GET", "rate_limit")
        body, response = await self.do(request, RateLimitResponse)
        limits = body.resources or RateLimits(core=body.rate)
        return limits, response
