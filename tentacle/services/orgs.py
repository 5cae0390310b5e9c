"""Organisation, membership and team operations.

GitHub API docs: https://docs.github.com/rest/orgs
"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

from tentacle.models.orgs import Organization, Team
from tentacle.models.users import User
from tentacle.rest.errors import GitHubAPIError

from ._base import Service

if typ.TYPE_CHECKING:
    from tentacle.rest.options import ListOptions
    from tentacle.rest.response import GitHubResponse


class OrganizationsService(Service):
    """Operations on organisations and their members and teams."""

    async def list_for_user(
        self, user: str | None = None, options: ListOptions | None = None
    ) -> tuple[list[Organization], GitHubResponse]:
        """List organisations ``user`` belongs to.

        ``None`` lists the organisations of the authenticated user.
        """
        path = f"users/{user}/orgs" if user is not None else "user/orgs"
        request = self._client.new_request("GET", path, params=options)
        orgs, response = await self._client.do(request, list[Organization])
        return orgs or [], response

    async def get(self, org: str) -> tuple[Organization, GitHubResponse]:
        """Fetch an organisation by login."""
        request = self._client.new_request("GET", f"orgs/{org}")
        return await self._client.do(request, Organization)

    async def edit(
        self, org: str, organization: Organization
    ) -> tuple[Organization, GitHubResponse]:
        """Update an organisation's profile with the fields set."""
        request = self._client.new_request("PATCH", f"orgs/{org}", organization)
        return await self._client.do(request, Organization)

    async def list_members(
        self, org: str, options: ListOptions | None = None
    ) -> tuple[list[User], GitHubResponse]:
        """List members of ``org``.

        Concealed members are included only when the authenticated user is an
        owner of the organisation.
        """
        request = self._client.new_request(
            "GET", f"orgs/{org}/members", params=options
        )
        members, response = await self._client.do(request, list[User])
        return members or [], response

    async def list_public_members(
        self, org: str, options: ListOptions | None = None
    ) -> tuple[list[User], GitHubResponse]:
        """List members who have publicised their membership of ``org``."""
        request = self._client.new_request(
            "GET", f"orgs/{org}/public_members", params=options
        )
        members, response = await self._client.do(request, list[User])
        return members or [], response

    async def _check(self, path: str) -> tuple[bool, GitHubResponse | None]:
        request = self._client.new_request("GET", path)
        try:
            _, response = await self._client.do(request)
        except GitHubAPIError as exc:
            if exc.status_code == HTTPStatus.NOT_FOUND:
                return False, exc.response
            raise
        return True, response

    async def is_member(
        self, org: str, user: str
    ) -> tuple[bool, GitHubResponse | None]:
        """Report whether ``user`` is a member of ``org``.

        GitHub answers 204 for members and 404 for non-members; only the 404
        is translated, any other error propagates.
        """
        return await self._check(f"orgs/{org}/members/{user}")

    async def is_public_member(
        self, org: str, user: str
    ) -> tuple[bool, GitHubResponse | None]:
        """Report whether ``user`` is a public member of ``org``."""
        return await self._check(f"orgs/{org}/public_members/{user}")

    async def remove_member(self, org: str, user: str) -> GitHubResponse:
        """Remove ``user`` from every team and from ``org``."""
        request = self._client.new_request("DELETE", f"orgs/{org}/members/{user}")
        _, response = await self._client.do(request)
        return response

    async def publicize_membership(self, org: str, user: str) -> GitHubResponse:
        """Make ``user``'s membership of ``org`` public."""
        request = self._client.new_request(
            "PUT", f"orgs/{org}/public_members/{user}"
        )
        _, response = await self._client.do(request)
        return response

    async def conceal_membership(self, org: str, user: str) -> GitHubResponse:
        """Hide ``user``'s membership of ``org``."""
        request = self._client.new_request(
            "DELETE", f"orgs/{org}/public_members/{user}"
        )
        _, response = await self._client.do(request)
        return response

    async def list_teams(
        self, org: str, options: ListOptions | None = None
    ) -> tuple[list[Team], GitHubResponse]:
        """List teams in ``org``."""
        request = self._client.new_request("GET", f"orgs/{org}/teams", params=options)
        teams, response = await self._client.do(request, list[Team])
        return teams or [], response

    async def add_team_member(self, team_id: int, user: str) -> GitHubResponse:
        """Add ``user`` to the team with ID ``team_id``."""
        request = self._client.new_request("PUT", f"teams/{team_id}/members/{user}")
        _, response = await self._client.do(request)
        return response

    async def remove_team_member(self, team_id: int, user: str) -> GitHubResponse:
        """Remove ``user`` from the team with ID ``team_id``."""
        request = self._client.new_request(
            "DELETE", f"teams/{team_id}/members/{user}"
        )
        _, response = await self._client.do(request)
        return response
