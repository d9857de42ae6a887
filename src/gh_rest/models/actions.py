"""GitHub Actions variable payloads."""

from pydantic import Field

from gh_rest.core.timestamp import Timestamp
from gh_rest.models.base import GitHubModel


class Variable(GitHubModel):
    """A repository, organization or environment variable."""

    name: str
    value: str
    created_at: Timestamp | None = Field(default=None, exclude=True)
    updated_at: Timestamp | None = Field(default=None, exclude=True)
    # all, private or selected; organization variables only
    visibility: str | None = None
    selected_repositories_url: str | None = Field(default=None, exclude=True)
    selected_repository_ids: list[int] | None = None


class Variables(GitHubModel):
    """A page of variables."""

    total_count: int = 0
    variables: list[Variable] = Field(default_factory=list)
