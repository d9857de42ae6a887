"""GitHub REST client core: requests, responses, errors and rate limits."""

from gh_rest.core.auth import AuthenticationError, GitHubAuth
from gh_rest.core.errors import (
    AbuseDetectedError,
    APIError,
    DecodeError,
    EncodeError,
    ErrorDetail,
    GitHubError,
    InvalidPathError,
    RateLimitedError,
    RedirectError,
    RequestError,
    ServerError,
    TransportError,
    ValidationError,
    classify,
)
from gh_rest.core.http import GitHubClient, Response
from gh_rest.core.options import ListCursorOptions, ListOptions, QueryOptions
from gh_rest.core.pagination import Cursors, extract_cursors, next_options, parse_link_header
from gh_rest.core.ratelimit import (
    Rate,
    RateLimitCategory,
    RateLimits,
    RateLimitTracker,
    category_for_path,
)
from gh_rest.core.timestamp import IntOrString, Timestamp

__all__ = [
    "APIError",
    "AbuseDetectedError",
    "AuthenticationError",
    "Cursors",
    "DecodeError",
    "EncodeError",
    "ErrorDetail",
    "GitHubAuth",
    "GitHubClient",
    "GitHubError",
    "IntOrString",
    "InvalidPathError",
    "ListCursorOptions",
    "ListOptions",
    "QueryOptions",
    "Rate",
    "RateLimitCategory",
    "RateLimitTracker",
    "RateLimitedError",
    "RedirectError",
    "RateLimits",
    "RequestError",
    "Response",
    "ServerError",
    "Timestamp",
    "TransportError",
    "ValidationError",
    "category_for_path",
    "classify",
    "extract_cursors",
    "next_options",
    "parse_link_header",
]
