"""Users API: profiles and blocking."""

from gh_rest.core.errors import APIError
from gh_rest.core.http import Response
from gh_rest.core.options import ListOptions
from gh_rest.models.common import User
from gh_rest.models.users import UserListOptions
from gh_rest.services.base import Service, parse_bool_response

BLOCKING_MEDIA_TYPE = "application/vnd.github.giant-sentry-fist-preview+json"


class UsersService(Service):
    """Endpoints under ``/user`` and ``/users``."""

    async def get(self, user: str = "") -> Response[User]:
        """Fetch a user. An empty name fetches the authenticated user."""
        path = f"users/{user}" if user else "user"
        return await self._client.request("GET", path, User)

    async def edit(self, user: User) -> Response[User]:
        """Update the authenticated user's profile."""
        return await self._client.request("PATCH", "user", User, body=user)

    async def list_all(self, options: UserListOptions | None = None) -> Response[list[User]]:
        """List all users in sign-up order.

        Pass the last seen user ID as ``since`` to get the next page.
        """
        return await self._client.request("GET", "users", list[User], options=options)

    async def list_blocked(self, options: ListOptions | None = None) -> Response[list[User]]:
        """List users blocked by the authenticated user."""
        return await self._client.request(
            "GET", "user/blocks", list[User], options=options, media_type=BLOCKING_MEDIA_TYPE
        )

    async def is_blocked(self, user: str) -> tuple[bool, Response[None]]:
        """Check whether the authenticated user blocked ``user``.

        Returns:
            The answer and the response it was read from.
        """
        try:
            response = await self._client.request(
                "GET", f"user/blocks/{user}", media_type=BLOCKING_MEDIA_TYPE
            )
        except APIError as e:
            return parse_bool_response(e), e.response
        return parse_bool_response(None), response

    async def block(self, user: str) -> Response[None]:
        return await self._client.request(
            "PUT", f"user/blocks/{user}", media_type=BLOCKING_MEDIA_TYPE
        )

    async def unblock(self, user: str) -> Response[None]:
        return await self._client.request(
            "DELETE", f"user/blocks/{user}", media_type=BLOCKING_MEDIA_TYPE
        )
