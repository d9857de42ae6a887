"""Repository listing options and statistics payloads."""

from pydantic import Field

from gh_rest.core.options import QueryOptions
from gh_rest.core.timestamp import Timestamp
from gh_rest.models.base import GitHubModel
from gh_rest.models.common import User


class RepositoryListOptions(QueryOptions):
    """Options for listing a user's repositories."""

    repo_type: str | None = Field(default=None, alias="type")
    visibility: str | None = None
    affiliation: list[str] = Field(default_factory=list)
    sort: str | None = None
    direction: str | None = None
    page: int | None = None
    per_page: int | None = None


class RepositoryListByOrgOptions(QueryOptions):
    """Options for listing an organization's repositories."""

    repo_type: str | None = Field(default=None, alias="type")
    sort: str | None = None
    direction: str | None = None
    page: int | None = None
    per_page: int | None = None


class WeeklyStats(GitHubModel):
    """Additions, deletions and commits of one contributor in one week."""

    week: Timestamp | None = Field(default=None, alias="w")
    additions: int | None = Field(default=None, alias="a")
    deletions: int | None = Field(default=None, alias="d")
    commits: int | None = Field(default=None, alias="c")


class ContributorStats(GitHubModel):
    """A contributor's weekly contributions to a repository."""

    author: User | None = None
    total: int | None = None
    weeks: list[WeeklyStats] = Field(default_factory=list)


class WeeklyCommitActivity(GitHubModel):
    """Commit counts of one week; ``days`` starts on Sunday."""

    days: list[int] = Field(default_factory=list)
    total: int | None = None
    week: Timestamp | None = None


class RepositoryParticipation(GitHubModel):
    """Weekly commit counts over the last 52 weeks, oldest first."""

    all: list[int] = Field(default_factory=list)
    owner: list[int] = Field(default_factory=list)
