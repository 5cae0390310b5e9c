"""User account operations.

GitHub API docs: https://docs.github.com/rest/users
"""

from __future__ import annotations

import typing as typ

from tentacle.models.users import User

from ._base import Service

if typ.TYPE_CHECKING:
    from tentacle.rest.options import UserListOptions
    from tentacle.rest.response import GitHubResponse


class UsersService(Service):
    """Operations on GitHub user accounts."""

    async def get(self, user: str | None = None) -> tuple[User, GitHubResponse]:
        """Fetch ``user``, or the authenticated user when ``user`` is ``None``."""
        path = f"users/{user}" if user is not None else "user"
        request = self._client.new_request("GET", path)
        return await self._client.do(request, User)

    async def edit(self, user: User) -> tuple[User, GitHubResponse]:
        """Update the authenticated user's profile with the fields set."""
        request = self._client.new_request("PATCH", "user", user)
        return await self._client.do(request, User)

    async def list_all(
        self, options: UserListOptions | None = None
    ) -> tuple[list[User], GitHubResponse]:
        """List every account in sign-up order.

        Pages are keyed by user ID: pass the ID of the last user seen as
        ``options.since`` to continue.
        """
        request = self._client.new_request("GET", "users", params=options)
        users, response = await self._client.do(request, list[User])
        return users or [], response
