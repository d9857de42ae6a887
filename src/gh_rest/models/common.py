"""Accounts and repositories shared across services."""

from pydantic import Field

from gh_rest.core.timestamp import Timestamp
from gh_rest.models.base import GitHubModel


class User(GitHubModel):
    """A GitHub user (or the owner part of many payloads)."""

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    url: str | None = None
    type: str | None = None
    site_admin: bool | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    public_repos: int | None = None
    followers: int | None = None
    following: int | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None


class Organization(GitHubModel):
    """A GitHub organization."""

    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    description: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    html_url: str | None = None
    url: str | None = None
    avatar_url: str | None = None
    type: str | None = None
    public_repos: int | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None


class Team(GitHubModel):
    """A team within an organization."""

    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    privacy: str | None = None
    permission: str | None = None
    url: str | None = None
    html_url: str | None = None
    members_count: int | None = None
    repos_count: int | None = None
    parent: "Team | None" = None


class Repository(GitHubModel):
    """A GitHub repository."""

    id: int | None = None
    node_id: str | None = None
    owner: User | None = None
    name: str | None = None
    full_name: str | None = None
    description: str | None = None
    private: bool | None = None
    fork: bool | None = None
    archived: bool | None = None
    html_url: str | None = None
    url: str | None = None
    default_branch: str | None = None
    language: str | None = None
    topics: list[str] | None = None
    visibility: str | None = None
    stargazers_count: int | None = None
    forks_count: int | None = None
    open_issues_count: int | None = None
    size: int | None = None
    created_at: Timestamp | None = None
    pushed_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_projects: bool | None = None
    # Only meaningful in responses; never sent when editing
    permissions: dict[str, bool] | None = Field(default=None, exclude=True)


class Label(GitHubModel):
    id: int | None = None
    name: str | None = None
    color: str | None = None
    description: str | None = None


class Issue(GitHubModel):
    """An issue (search results also return pull requests as issues)."""

    id: int | None = None
    number: int | None = None
    state: str | None = None
    title: str | None = None
    body: str | None = None
    user: User | None = None
    labels: list[Label] | None = None
    assignees: list[User] | None = None
    comments: int | None = None
    html_url: str | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    closed_at: Timestamp | None = None
    pull_request: dict[str, str | None] | None = None

    @property
    def is_pull_request(self) -> bool:
        return self.pull_request is not None
