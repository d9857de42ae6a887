"""Search options and results."""

from pydantic import Field

from gh_rest.core.options import QueryOptions
from gh_rest.models.base import GitHubModel
from gh_rest.models.common import Issue, Repository, User

TEXT_MATCH_MEDIA_TYPE = "application/vnd.github.text-match+json"


class SearchOptions(QueryOptions):
    """Options shared by search endpoints."""

    query: str | None = Field(default=None, alias="q")
    # Depends on the endpoint (stars, forks, updated, comments...); best match when unset
    sort: str | None = None
    # asc or desc
    order: str | None = None
    page: int | None = None
    per_page: int | None = None
    # Sent as a media type, not a query parameter
    text_match: bool = Field(default=False, exclude=True)


class TextMatch(GitHubModel):
    object_url: str | None = None
    object_type: str | None = None
    property: str | None = None
    fragment: str | None = None


class CodeResult(GitHubModel):
    name: str | None = None
    path: str | None = None
    sha: str | None = None
    html_url: str | None = None
    repository: Repository | None = None
    text_matches: list[TextMatch] | None = None


class RepositoriesSearchResult(GitHubModel):
    total_count: int = 0
    incomplete_results: bool = False
    items: list[Repository] = Field(default_factory=list)


class IssuesSearchResult(GitHubModel):
    total_count: int = 0
    incomplete_results: bool = False
    items: list[Issue] = Field(default_factory=list)


class UsersSearchResult(GitHubModel):
    total_count: int = 0
    incomplete_results: bool = False
    items: list[User] = Field(default_factory=list)


class CodeSearchResult(GitHubModel):
    total_count: int = 0
    incomplete_results: bool = False
    items: list[CodeResult] = Field(default_factory=list)
