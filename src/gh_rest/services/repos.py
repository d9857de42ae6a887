"""Repositories API: listing, statistics and rulesets."""

from __future__ import annotations

import logging

from gh_rest.core.http import Response
from gh_rest.models.common import Repository
from gh_rest.models.repos import (
    ContributorStats,
    RepositoryListByOrgOptions,
    RepositoryListOptions,
    RepositoryParticipation,
    WeeklyCommitActivity,
)
from gh_rest.models.rulesets import Ruleset
from gh_rest.services.base import Service

logger = logging.getLogger(__name__)


def _ruleset_options(include_parents: bool) -> dict[str, str] | None:
    return {"includes_parents": "true"} if include_parents else None


class RepositoriesService(Service):
    """Endpoints under ``/repos`` plus user and organization repository lists."""

    async def list(
        self, user: str = "", options: RepositoryListOptions | None = None
    ) -> Response[list[Repository]]:
        """List repositories of a user. An empty name lists the authenticated user's."""
        path = f"users/{user}/repos" if user else "user/repos"
        return await self._client.request("GET", path, list[Repository], options=options)

    async def list_by_org(
        self, org: str, options: RepositoryListByOrgOptions | None = None
    ) -> Response[list[Repository]]:
        return await self._client.request(
            "GET", f"orgs/{org}/repos", list[Repository], options=options
        )

    async def get(self, owner: str, repo: str) -> Response[Repository]:
        return await self._client.request("GET", f"repos/{owner}/{repo}", Repository)

    async def edit(self, owner: str, repo: str, repository: Repository) -> Response[Repository]:
        """Update repository settings. Read-only fields such as ``permissions`` are not sent."""
        return await self._client.request(
            "PATCH", f"repos/{owner}/{repo}", Repository, body=repository
        )

    # Statistics endpoints answer 202 while GitHub computes the data in the
    # background; ``response.accepted`` is True and ``data`` is None until then.

    async def list_contributors_stats(
        self, owner: str, repo: str
    ) -> Response[list[ContributorStats]]:
        """Weekly additions, deletions and commits per contributor."""
        response = await self._client.request(
            "GET", f"repos/{owner}/{repo}/stats/contributors", list[ContributorStats]
        )
        if response.accepted:
            logger.debug("Contributor stats for %s/%s are still being computed", owner, repo)
        return response

    async def list_commit_activity(
        self, owner: str, repo: str
    ) -> Response[list[WeeklyCommitActivity]]:
        """Commit counts per day for the last year, grouped by week."""
        return await self._client.request(
            "GET", f"repos/{owner}/{repo}/stats/commit_activity", list[WeeklyCommitActivity]
        )

    async def list_participation(
        self, owner: str, repo: str
    ) -> Response[RepositoryParticipation]:
        """Weekly commit counts for the owner and everyone else."""
        return await self._client.request(
            "GET", f"repos/{owner}/{repo}/stats/participation", RepositoryParticipation
        )

    async def get_all_rulesets(
        self, owner: str, repo: str, include_parents: bool = False
    ) -> Response[list[Ruleset]]:
        """List rulesets of a repository.

        Args:
            owner: Repository owner.
            repo: Repository name.
            include_parents: Also return rulesets configured at higher levels
                (organization) that apply to this repository.
        """
        return await self._client.request(
            "GET",
            f"repos/{owner}/{repo}/rulesets",
            list[Ruleset],
            options=_ruleset_options(include_parents),
        )

    async def get_ruleset(
        self, owner: str, repo: str, ruleset_id: int, include_parents: bool = False
    ) -> Response[Ruleset]:
        return await self._client.request(
            "GET",
            f"repos/{owner}/{repo}/rulesets/{ruleset_id}",
            Ruleset,
            options=_ruleset_options(include_parents),
        )

    async def create_ruleset(self, owner: str, repo: str, ruleset: Ruleset) -> Response[Ruleset]:
        return await self._client.request(
            "POST", f"repos/{owner}/{repo}/rulesets", Ruleset, body=ruleset
        )
