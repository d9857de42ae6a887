"""User listing options."""

from gh_rest.core.options import QueryOptions


class UserListOptions(QueryOptions):
    """Options for listing all users."""

    # ID of the last user seen
    since: int | None = None
    per_page: int | None = None
