"""Tests for the pull requests service."""

import json

import httpx
import pytest
import respx

from gh_rest.core.errors import ValidationError
from gh_rest.core.http import GitHubClient
from gh_rest.models.pulls import NewPullRequest, PullRequest, PullRequestBranch, PullRequestListOptions

API = "https://api.github.com"

PULL = {
    "number": 1347,
    "state": "open",
    "title": "Amazing new feature",
    "user": {"login": "octocat"},
    "head": {"ref": "new-topic", "sha": "6dcb09b"},
    "base": {"ref": "main", "sha": "6dcb09b"},
    "created_at": "2011-01-26T19:01:12Z",
    "merged_at": None,
}


class TestPullRequestsService:
    """Tests for PullRequestsService."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_list(self, client: GitHubClient) -> None:
        route = respx.get(f"{API}/repos/o/r/pulls").mock(
            return_value=httpx.Response(
                200,
                json=[PULL],
                headers={
                    "Link": (
                        '<https://api.github.com/repos/o/r/pulls?state=closed&page=2>; rel="next", '
                        '<https://api.github.com/repos/o/r/pulls?state=closed&page=4>; rel="last"'
                    )
                },
            )
        )

        async with client:
            response = await client.pull_requests.list(
                "o", "r", PullRequestListOptions(state="closed", sort="updated")
            )

        params = route.calls.last.request.url.params
        assert params["state"] == "closed"
        assert params["sort"] == "updated"
        assert response.data[0].number == 1347
        assert response.data[0].merged_at is None
        assert response.next_page == 2
        assert response.last_page == 4

    @pytest.mark.asyncio
    @respx.mock
    async def test_get(self, client: GitHubClient) -> None:
        respx.get(f"{API}/repos/o/r/pulls/1347").mock(return_value=httpx.Response(200, json=PULL))

        async with client:
            response = await client.pull_requests.get("o", "r", 1347)

        assert response.data.head.ref == "new-topic"
        assert response.data.user.login == "octocat"

    @pytest.mark.asyncio
    @respx.mock
    async def test_create(self, client: GitHubClient) -> None:
        route = respx.post(f"{API}/repos/o/r/pulls").mock(return_value=httpx.Response(201, json=PULL))

        async with client:
            response = await client.pull_requests.create(
                "o", "r", NewPullRequest(title="Amazing new feature", head="new-topic", base="main", draft=True)
            )

        assert json.loads(route.calls.last.request.content) == {
            "title": "Amazing new feature",
            "head": "new-topic",
            "base": "main",
            "draft": True,
        }
        assert response.status_code == 201

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_validation_error(self, client: GitHubClient) -> None:
        respx.post(f"{API}/repos/o/r/pulls").mock(
            return_value=httpx.Response(
                422,
                json={
                    "message": "Validation Failed",
                    "errors": [
                        {
                            "resource": "PullRequest",
                            "code": "custom",
                            "message": "No commits between main and new-topic",
                        }
                    ],
                },
            )
        )

        async with client:
            with pytest.raises(ValidationError) as exc_info:
                await client.pull_requests.create(
                    "o", "r", NewPullRequest(head="new-topic", base="main")
                )

        assert exc_info.value.message == "Validation Failed"
        assert exc_info.value.errors[0].message == "No commits between main and new-topic"

    @pytest.mark.asyncio
    @respx.mock
    async def test_edit_sends_only_editable_fields(self, client: GitHubClient) -> None:
        """Test that edit sends the base ref name, not the whole branch object."""
        route = respx.patch(f"{API}/repos/o/r/pulls/1347").mock(
            return_value=httpx.Response(200, json=dict(PULL, state="closed"))
        )
        pull = PullRequest(
            number=1347,
            title="Renamed",
            state="closed",
            comments=4,
            base=PullRequestBranch(ref="develop", sha="abc"),
        )

        async with client:
            response = await client.pull_requests.edit("o", "r", 1347, pull)

        assert json.loads(route.calls.last.request.content) == {
            "title": "Renamed",
            "state": "closed",
            "base": "develop",
        }
        assert response.data.state == "closed"
