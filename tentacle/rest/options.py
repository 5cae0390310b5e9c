"""Optional query parameters accepted by list operations.

Each record renders only the parameters the caller set, in a stable order,
so ``sort``/``direction``/``since`` appear exactly as GitHub documents them.
"""

from __future__ import annotations

import dataclasses
import typing as typ

from tentacle.common.time import format_rfc3339

if typ.TYPE_CHECKING:
    import datetime as dt


def _paging_params(page: int | None, per_page: int | None) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    if page is not None:
        params.append(("page", str(page)))
    if per_page is not None:
        params.append(("per_page", str(per_page)))
    return params


@dataclasses.dataclass(frozen=True, slots=True)
class ListOptions:
    """Offset pagination parameters shared by most list endpoints."""

    page: int | None = None
    per_page: int | None = None

    def to_params(self) -> list[tuple[str, str]]:
        """Return the query parameters for this record."""
        return _paging_params(self.page, self.per_page)


@dataclasses.dataclass(frozen=True, slots=True)
class PullRequestListCommentsOptions:
    """Optional parameters for listing pull request review comments.

    Attributes
    ----------
    sort
        ``created`` or ``updated``.
    direction
        ``asc`` or ``desc``.
    since
        Only comments updated at or after this aware timestamp.
    page, per_page
        Offset pagination.

    """

    sort: typ.Literal["created", "updated"] | None = None
    direction: typ.Literal["asc", "desc"] | None = None
    since: dt.datetime | None = None
    page: int | None = None
    per_page: int | None = None

    def to_params(self) -> list[tuple[str, str]]:
        """Return the query parameters for this record.

        Raises
        ------
        ValueError
            If ``since`` is a naive datetime.

        """
        params: list[tuple[str, str]] = []
        if self.sort:
            params.append(("sort", self.sort))
        if self.direction:
            params.append(("direction", self.direction))
        if self.since is not None:
            params.append(("since", format_rfc3339(self.since)))
        params.extend(_paging_params(self.page, self.per_page))
        return params


@dataclasses.dataclass(frozen=True, slots=True)
class UserListOptions:
    """Optional parameters for listing every GitHub account.

    ``since`` is the integer ID of the last user seen, not a timestamp.
    """

    since: int | None = None
    per_page: int | None = None

    def to_params(self) -> list[tuple[str, str]]:
        """Return the query parameters for this record."""
        params: list[tuple[str, str]] = []
        if self.since is not None:
            params.append(("since", str(self.since)))
        params.extend(_paging_params(None, self.per_page))
        return params


class QueryOptions(typ.Protocol):
    """Anything that can render itself as query parameters."""

    def to_params(self) -> list[tuple[str, str]]: ...


__all__ = [
    "ListOptions",
    "PullRequestListCommentsOptions",
    "QueryOptions",
    "UserListOptions",
]
