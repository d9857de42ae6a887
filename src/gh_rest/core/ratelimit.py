"""Per-category GitHub rate limit tracking.

Every response carries ``X-RateLimit-*`` headers for the bucket the request was
charged against. The tracker keeps the latest record per bucket so callers can
check their remaining quota before issuing a request. It never blocks requests
on its own.
"""

import asyncio
import logging
import threading
from collections.abc import Mapping
from datetime import UTC, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from gh_rest.core.timestamp import Timestamp

logger = logging.getLogger(__name__)


class RateLimitCategory(str, Enum):
    """Rate limit buckets reported by GitHub."""

    CORE = "core"
    SEARCH = "search"
    GRAPHQL = "graphql"
    INTEGRATION_MANIFEST = "integration_manifest"
    SOURCE_IMPORT = "source_import"
    CODE_SCANNING_UPLOAD = "code_scanning_upload"
    ACTIONS_RUNNER_REGISTRATION = "actions_runner_registration"
    SCIM = "scim"
    DEPENDENCY_SNAPSHOTS = "dependency_snapshots"
    CODE_SEARCH = "code_search"
    AUDIT_LOG = "audit_log"


def _normalize(headers: Mapping[str, str]) -> Mapping[str, str]:
    # httpx.Headers is already case-insensitive; plain dicts are not
    if hasattr(headers, "get_list"):
        return headers
    return {k.lower(): v for k, v in headers.items()}


class Rate(BaseModel):
    """Rate limit record for one category."""

    model_config = ConfigDict(frozen=True)

    limit: int
    remaining: int
    used: int = 0
    reset: Timestamp
    resource: str = RateLimitCategory.CORE.value

    @classmethod
    def from_headers(
        cls,
        headers: Mapping[str, str],
        resource: str | None = None,
    ) -> Optional["Rate"]:
        """Extract a rate record from response headers.

        Limit, remaining and reset must all be present; a partial set of
        headers yields None rather than a record mixing defaults with data.

        Args:
            headers: HTTP response headers.
            resource: Category to use when ``x-ratelimit-resource`` is absent.

        Returns:
            Rate if the headers are present and valid, None otherwise.
        """
        normalized = _normalize(headers)
        limit = normalized.get("x-ratelimit-limit")
        remaining = normalized.get("x-ratelimit-remaining")
        reset = normalized.get("x-ratelimit-reset")
        if limit is None or remaining is None or reset is None:
            return None

        try:
            limit_value = int(limit)
            remaining_value = int(remaining)
            used_header = normalized.get("x-ratelimit-used")
            used_value = int(used_header) if used_header else limit_value - remaining_value
            return cls(
                limit=limit_value,
                remaining=remaining_value,
                used=used_value,
                reset=int(reset),
                resource=normalized.get("x-ratelimit-resource")
                or resource
                or RateLimitCategory.CORE.value,
            )
        except (ValueError, OverflowError, OSError):
            # Out-of-range resets fail validation as ValueError
            logger.debug(
                "Ignoring malformed rate limit headers: %s/%s reset %s", limit, remaining, reset
            )
            return None

    @property
    def seconds_until_reset(self) -> float:
        """Seconds until the window resets, never negative."""
        return max(0.0, (self.reset - datetime.now(UTC)).total_seconds())

    def is_exhausted(self) -> bool:
        """Check whether no requests remain in the current window."""
        return self.remaining <= 0 and self.seconds_until_reset > 0


class RateLimits(BaseModel):
    """Body of ``GET /rate_limit``."""

    resources: dict[str, Rate]


def category_for_path(method: str, path: str) -> RateLimitCategory:
    """Infer the rate limit category a request is charged against.

    Args:
        method: HTTP method.
        path: Request path relative to the API root, with or without a leading
            slash and without the query string.

    Returns:
        The matching category, ``CORE`` for anything not special-cased.
    """
    method = method.upper()
    path = "/" + path.lstrip("/")

    if path.startswith("/search/code") and method == "GET":
        return RateLimitCategory.CODE_SEARCH
    if path.startswith("/search/"):
        return RateLimitCategory.SEARCH
    if path == "/graphql":
        return RateLimitCategory.GRAPHQL
    if (
        path.startswith("/app-manifests/")
        and path.endswith("/conversions")
        and method == "POST"
    ):
        return RateLimitCategory.INTEGRATION_MANIFEST
    if path.startswith("/repos/") and path.endswith("/import") and method == "PUT":
        return RateLimitCategory.SOURCE_IMPORT
    if path.endswith("/code-scanning/sarifs"):
        return RateLimitCategory.CODE_SCANNING_UPLOAD
    if path.endswith("/actions/runners/registration-token") and method == "POST":
        return RateLimitCategory.ACTIONS_RUNNER_REGISTRATION
    if path.startswith("/scim/"):
        return RateLimitCategory.SCIM
    if (
        path.startswith("/repos/")
        and path.endswith("/dependency-graph/snapshots")
        and method == "POST"
    ):
        return RateLimitCategory.DEPENDENCY_SNAPSHOTS
    if path.endswith("/audit-log"):
        return RateLimitCategory.AUDIT_LOG
    return RateLimitCategory.CORE


def _key(category: RateLimitCategory | str) -> str:
    return category.value if isinstance(category, RateLimitCategory) else category


class RateLimitTracker:
    """Latest known rate limit record per category.

    Records are immutable and swapped in whole under a lock, so a reader never
    sees the limit of one response paired with the remaining count of another.
    Safe to share between threads and between tasks on one event loop.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rates: dict[str, Rate] = {}

    def observe(
        self,
        headers: Mapping[str, str],
        *,
        category: RateLimitCategory | str | None = None,
    ) -> Rate | None:
        """Record the rate limit carried by a response.

        Args:
            headers: Response headers.
            category: Category inferred from the request, used when the
                response does not name its resource.

        Returns:
            The stored record, or None if the headers carried no rate limit.
        """
        rate = Rate.from_headers(headers, resource=_key(category) if category else None)
        if rate is None:
            return None
        self.replace(rate)
        return rate

    def replace(self, rate: Rate) -> None:
        """Store ``rate`` as the current record for its category."""
        with self._lock:
            self._rates[rate.resource] = rate

        if rate.remaining <= 0:
            logger.warning(
                "Rate limit reached for %s. Limit: %d, Reset: %s",
                rate.resource,
                rate.limit,
                rate.reset.isoformat(),
            )
        else:
            logger.debug(
                "Rate limit updated: %s %d/%d",
                rate.resource,
                rate.remaining,
                rate.limit,
            )

    def update_from(self, limits: RateLimits) -> None:
        """Replace every category reported by ``GET /rate_limit``."""
        for name, rate in limits.resources.items():
            self.replace(rate.model_copy(update={"resource": name}))

    def snapshot(self, category: RateLimitCategory | str = RateLimitCategory.CORE) -> Rate | None:
        """Return the latest record for ``category`` without blocking."""
        with self._lock:
            return self._rates.get(_key(category))

    def snapshots(self) -> dict[str, Rate]:
        """Return a copy of all known records keyed by category."""
        with self._lock:
            return dict(self._rates)

    def is_exhausted(self, category: RateLimitCategory | str = RateLimitCategory.CORE) -> bool:
        """Check whether the last known record for ``category`` is used up."""
        rate = self.snapshot(category)
        return rate is not None and rate.is_exhausted()

    def seconds_until_reset(
        self, category: RateLimitCategory | str = RateLimitCategory.CORE
    ) -> float:
        """Seconds until ``category`` resets, 0.0 when unknown."""
        rate = self.snapshot(category)
        return rate.seconds_until_reset if rate else 0.0

    async def wait_if_exhausted(
        self, category: RateLimitCategory | str = RateLimitCategory.CORE
    ) -> float:
        """Sleep until ``category`` resets if its quota is used up.

        Hook for callers that want to avoid sending requests that would be
        rejected. The client never calls it by itself.

        Returns:
            Seconds slept.
        """
        if not self.is_exhausted(category):
            return 0.0

        wait_seconds = self.seconds_until_reset(category)
        logger.warning(
            "Rate limit exhausted for %s. Sleeping %.1f seconds until reset.",
            _key(category),
            wait_seconds,
        )
        await asyncio.sleep(wait_seconds)
        return wait_seconds
