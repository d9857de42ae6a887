"""Activity payloads: events and starring."""

from typing import Any

from gh_rest.core.options import QueryOptions
from gh_rest.core.timestamp import IntOrString, Timestamp
from gh_rest.core.variants import decode_variant
from gh_rest.models.base import GitHubModel
from gh_rest.models.common import Organization, Repository, User


class CommitAuthor(GitHubModel):
    name: str | None = None
    email: str | None = None


class PushEventCommit(GitHubModel):
    sha: str | None = None
    message: str | None = None
    author: CommitAuthor | None = None
    url: str | None = None
    distinct: bool | None = None


class PushEvent(GitHubModel):
    """Payload of a PushEvent."""

    push_id: int | None = None
    head: str | None = None
    ref: str | None = None
    size: int | None = None
    before: str | None = None
    commits: list[PushEventCommit] = []


EVENT_PAYLOADS: dict[str, type[GitHubModel] | None] = {
    "PushEvent": PushEvent,
}


class Event(GitHubModel):
    """An entry of an activity feed."""

    id: IntOrString | None = None
    type: str | None = None
    public: bool | None = None
    payload: dict[str, Any] | None = None
    repo: Repository | None = None
    actor: User | None = None
    org: Organization | None = None
    created_at: Timestamp | None = None

    def parsed_payload(self) -> GitHubModel | dict[str, Any] | None:
        """Decode the payload for known event types.

        Returns:
            A typed payload for known event types, otherwise the raw mapping.
        """
        if self.type not in EVENT_PAYLOADS:
            return self.payload
        return decode_variant(self.type, self.payload, EVENT_PAYLOADS, what="event")


class ActivityListStarredOptions(QueryOptions):
    """Options for listing starred repositories."""

    # created or updated
    sort: str | None = None
    direction: str | None = None
    page: int | None = None
    per_page: int | None = None


class StarredRepository(GitHubModel):
    """A starred repository and when it was starred."""

    starred_at: Timestamp | None = None
    repo: Repository | None = None
