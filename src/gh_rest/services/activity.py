"""Activity API: stars and event feeds."""

from gh_rest.core.http import Response
from gh_rest.core.options import ListOptions
from gh_rest.models.activity import ActivityListStarredOptions, Event, StarredRepository
from gh_rest.services.base import Service

STARRING_MEDIA_TYPE = "application/vnd.github.star+json"


class ActivityService(Service):
    async def list_starred(
        self, user: str = "", options: ActivityListStarredOptions | None = None
    ) -> Response[list[StarredRepository]]:
        """List repositories starred by a user, with the time they were starred.

        An empty name lists the authenticated user's stars.
        """
        path = f"users/{user}/starred" if user else "user/starred"
        return await self._client.request(
            "GET",
            path,
            list[StarredRepository],
            options=options,
            media_type=STARRING_MEDIA_TYPE,
        )

    async def list_events_performed_by_user(
        self, user: str, public_only: bool = False, options: ListOptions | None = None
    ) -> Response[list[Event]]:
        """List events performed by a user, newest first."""
        path = f"users/{user}/events/public" if public_only else f"users/{user}/events"
        return await self._client.request("GET", path, list[Event], options=options)
