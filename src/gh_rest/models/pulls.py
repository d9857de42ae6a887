"""Pull request payloads."""

from gh_rest.core.options import QueryOptions
from gh_rest.core.timestamp import Timestamp
from gh_rest.models.base import GitHubModel
from gh_rest.models.common import Repository, User


class PullRequestBranch(GitHubModel):
    """Head or base of a pull request."""

    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    repo: Repository | None = None
    user: User | None = None


class PullRequest(GitHubModel):
    """A pull request on a repository."""

    id: int | None = None
    number: int | None = None
    state: str | None = None
    title: str | None = None
    body: str | None = None
    draft: bool | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    closed_at: Timestamp | None = None
    merged_at: Timestamp | None = None
    user: User | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    merged_by: User | None = None
    maintainer_can_modify: bool | None = None
    comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    html_url: str | None = None
    head: PullRequestBranch | None = None
    base: PullRequestBranch | None = None


class NewPullRequest(GitHubModel):
    """Body for creating a pull request."""

    title: str | None = None
    head: str
    base: str
    body: str | None = None
    issue: int | None = None
    draft: bool | None = None
    maintainer_can_modify: bool | None = None


class PullRequestListOptions(QueryOptions):
    """Options for listing pull requests."""

    # open, closed or all; GitHub defaults to open
    state: str | None = None
    # "user:ref-name"
    head: str | None = None
    base: str | None = None
    sort: str | None = None
    direction: str | None = None
    page: int | None = None
    per_page: int | None = None


class PullRequestUpdate(GitHubModel):
    """Fields GitHub accepts when editing a pull request."""

    title: str | None = None
    body: str | None = None
    state: str | None = None
    base: str | None = None
    maintainer_can_modify: bool | None = None
