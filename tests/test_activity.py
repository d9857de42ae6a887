"""Tests for the activity service."""

import httpx
import pytest
import respx

from gh_rest.core.http import GitHubClient
from gh_rest.core.options import ListOptions
from gh_rest.models.activity import ActivityListStarredOptions, PushEvent
from gh_rest.services.activity import STARRING_MEDIA_TYPE

API = "https://api.github.com"


class TestActivityService:
    """Tests for ActivityService."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_starred_authenticated(self, client: GitHubClient) -> None:
        route = respx.get(f"{API}/user/starred").mock(
            return_value=httpx.Response(
                200,
                json=[{"starred_at": "2024-03-01T10:00:00Z", "repo": {"full_name": "o/r"}}],
            )
        )

        async with client:
            response = await client.activity.list_starred(
                options=ActivityListStarredOptions(sort="created", direction="asc")
            )

        request = route.calls.last.request
        assert request.headers["Accept"] == STARRING_MEDIA_TYPE
        assert request.url.params["sort"] == "created"
        assert response.data[0].repo.full_name == "o/r"
        assert response.data[0].starred_at.month == 3

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_starred_for_user(self, client: GitHubClient) -> None:
        respx.get(f"{API}/users/octocat/starred").mock(return_value=httpx.Response(200, json=[]))

        async with client:
            response = await client.activity.list_starred("octocat")

        assert response.data == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_list_events_performed_by_user(self, client: GitHubClient) -> None:
        respx.get(f"{API}/users/octocat/events").mock(
            return_value=httpx.Response(
                200,
                json=[
                    {
                        "id": "22249084947",
                        "type": "PushEvent",
                        "actor": {"login": "octocat"},
                        "repo": {"name": "octocat/hello-world"},
                        "payload": {"ref": "refs/heads/main", "size": 1, "commits": []},
                        "public": True,
                        "created_at": "2022-06-09T12:47:28Z",
                    },
                    {"id": "2", "type": "WatchEvent", "payload": {"action": "started"}},
                ],
            )
        )

        async with client:
            response = await client.activity.list_events_performed_by_user("octocat")

        push, watch = response.data
        assert push.id == 22249084947
        assert isinstance(push.parsed_payload(), PushEvent)
        assert push.parsed_payload().ref == "refs/heads/main"
        assert watch.parsed_payload() == {"action": "started"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_public_events(self, client: GitHubClient) -> None:
        route = respx.get(f"{API}/users/octocat/events/public").mock(
            return_value=httpx.Response(200, json=[])
        )

        async with client:
            await client.activity.list_events_performed_by_user(
                "octocat", public_only=True, options=ListOptions(page=2)
            )

        assert route.calls.last.request.url.params["page"] == "2"
