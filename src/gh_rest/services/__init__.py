"""Services grouping GitHub REST endpoints by resource."""

from gh_rest.services.actions import ActionsService
from gh_rest.services.activity import ActivityService
from gh_rest.services.base import Service, parse_bool_response
from gh_rest.services.copilot import CopilotService
from gh_rest.services.pulls import PullRequestsService
from gh_rest.services.repos import RepositoriesService
from gh_rest.services.search import SearchService
from gh_rest.services.users import UsersService

__all__ = [
    "ActionsService",
    "ActivityService",
    "CopilotService",
    "PullRequestsService",
    "RepositoriesService",
    "SearchService",
    "Service",
    "UsersService",
    "parse_bool_response",
]
