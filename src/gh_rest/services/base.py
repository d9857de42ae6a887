"""Shared plumbing for API services."""

from typing import TYPE_CHECKING

from gh_rest.core.errors import APIError, GitHubError

if TYPE_CHECKING:
    from gh_rest.core.http import GitHubClient


def parse_bool_response(error: GitHubError | None) -> bool:
    """Interpret the outcome of a check endpoint (204 = true, 404 = false).

    Args:
        error: Error raised by the call, or None if it succeeded.

    Returns:
        True on success, False when GitHub answered 404.

    Raises:
        GitHubError: Any other error is re-raised unchanged.
    """
    if error is None:
        return True
    if isinstance(error, APIError) and error.status_code == 404:
        return False
    raise error


class Service:
    """Base class for a group of related endpoints."""

    def __init__(self, client: "GitHubClient") -> None:
        self._client = client
