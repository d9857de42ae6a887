"""Pull requests API."""

from __future__ import annotations

from gh_rest.core.http import Response
from gh_rest.models.pulls import (
    NewPullRequest,
    PullRequest,
    PullRequestListOptions,
    PullRequestUpdate,
)
from gh_rest.services.base import Service


class PullRequestsService(Service):
    """Endpoints under ``/repos/{owner}/{repo}/pulls``."""

    async def list(
        self, owner: str, repo: str, options: PullRequestListOptions | None = None
    ) -> Response[list[PullRequest]]:
        return await self._client.request(
            "GET", f"repos/{owner}/{repo}/pulls", list[PullRequest], options=options
        )

    async def get(self, owner: str, repo: str, number: int) -> Response[PullRequest]:
        return await self._client.request(
            "GET", f"repos/{owner}/{repo}/pulls/{number}", PullRequest
        )

    async def create(
        self, owner: str, repo: str, pull: NewPullRequest
    ) -> Response[PullRequest]:
        return await self._client.request(
            "POST", f"repos/{owner}/{repo}/pulls", PullRequest, body=pull
        )

    async def edit(
        self, owner: str, repo: str, number: int, pull: PullRequest
    ) -> Response[PullRequest]:
        """Update a pull request.

        Only the title, body, state, base branch and ``maintainer_can_modify``
        can be changed; other fields of ``pull`` are ignored.
        """
        update = PullRequestUpdate(
            title=pull.title,
            body=pull.body,
            state=pull.state,
            base=pull.base.ref if pull.base is not None else None,
            maintainer_can_modify=pull.maintainer_can_modify,
        )
        return await self._client.request(
            "PATCH", f"repos/{owner}/{repo}/pulls/{number}", PullRequest, body=update
        )
