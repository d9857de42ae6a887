"""GitHub HTTP client.

``GitHubClient`` is the single pipeline every API operation goes through:
build a request, send it once through the injected httpx transport, record
rate limit headers, classify the status and decode the body.
"""

import asyncio
import functools
import logging
from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import httpx
import pydantic
from pydantic import BaseModel, TypeAdapter

from gh_rest.config import ClientConfig
from gh_rest.core.auth import GitHubAuth
from gh_rest.core.errors import DecodeError, TransportError, classify
from gh_rest.core.pagination import (
    Cursors,
    extract_cursors,
    next_options,
    page_number,
    page_token,
)
from gh_rest.core.ratelimit import Rate, RateLimits, RateLimitTracker, category_for_path
from gh_rest.core.request import RequestBuilder

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Statuses whose body is never decoded into the target
NO_DECODE_STATUSES = frozenset({202, 204, 304})


@functools.lru_cache(maxsize=256)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


@dataclass
class Response(Generic[T]):
    """Response metadata plus the decoded body."""

    status_code: int
    headers: httpx.Headers
    content: bytes = b""
    data: T | None = None
    url: str = ""
    request: httpx.Request | None = None
    rate: Rate | None = None
    cursors: Cursors = field(default_factory=Cursors)

    @classmethod
    def from_httpx(cls, response: httpx.Response, rate: Rate | None = None) -> "Response[Any]":
        """Build response metadata from a received httpx response."""
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            content=response.content,
            url=str(response.url),
            request=response.request,
            rate=rate,
            cursors=extract_cursors(response.headers),
        )

    @property
    def is_success(self) -> bool:
        """Check if response was successful (2xx status code)."""
        return 200 <= self.status_code < 300

    @property
    def accepted(self) -> bool:
        """True for 202: GitHub queued the work and has no result yet."""
        return self.status_code == 202

    @property
    def text(self) -> str:
        """Raw body decoded as UTF-8."""
        return self.content.decode("utf-8", errors="replace")

    @property
    def reason_phrase(self) -> str:
        """Standard reason phrase for the status code."""
        return httpx.codes.get_reason_phrase(self.status_code)

    @property
    def next_page(self) -> int | None:
        return page_number(self.cursors.next)

    @property
    def prev_page(self) -> int | None:
        return page_number(self.cursors.prev)

    @property
    def first_page(self) -> int | None:
        return page_number(self.cursors.first)

    @property
    def last_page(self) -> int | None:
        return page_number(self.cursors.last)

    @property
    def next_page_token(self) -> str | None:
        """Opaque token for the next page on cursor-paginated endpoints."""
        return page_token(self.cursors.next)

    @property
    def after(self) -> str | None:
        return _query_value(self.cursors.next, "after")

    @property
    def before(self) -> str | None:
        return _query_value(self.cursors.prev, "before")


def _query_value(url: str | None, key: str) -> str | None:
    if not url:
        return None
    return httpx.URL(url).params.get(key)


class GitHubClient:
    """Async client for the GitHub REST API.

    Features:
    - Pluggable authentication (any ``httpx.Auth``) and transport
    - One request per call; retry policy is left to the caller
    - Per-category rate limit tracking from response headers
    - Typed errors carrying the response they came from
    - Link header pagination
    """

    def __init__(
        self,
        auth: httpx.Auth | None = None,
        *,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
        rate_limits: RateLimitTracker | None = None,
    ) -> None:
        """Initialize GitHub client.

        Args:
            auth: Authentication applied to every request. If None, a token
                is read from the environment variable named in the config;
                without one, requests are unauthenticated.
            config: Client configuration. Defaults to api.github.com.
            transport: httpx transport to send requests through.
            http_client: Complete httpx client to use instead of creating one.
                The caller owns its lifecycle.
            rate_limits: Rate limit tracker to share between clients.
        """
        self._config = config or ClientConfig()
        self._auth = auth if auth is not None else GitHubAuth.from_env(self._config.token_env)
        self._transport = transport
        self._client = http_client
        self._owns_client = http_client is None
        self._builder = RequestBuilder(self._config)
        self._rate_limits = rate_limits or RateLimitTracker()

        # Imported here: services depend on this module for type hints
        from gh_rest.services import (
            ActionsService,
            ActivityService,
            CopilotService,
            PullRequestsService,
            RepositoriesService,
            SearchService,
            UsersService,
        )

        self.actions = ActionsService(self)
        self.activity = ActivityService(self)
        self.copilot = CopilotService(self)
        self.pull_requests = PullRequestsService(self)
        self.repositories = RepositoriesService(self)
        self.search = SearchService(self)
        self.users = UsersService(self)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> httpx.URL:
        return self._builder.base_url

    @property
    def rate_limits(self) -> RateLimitTracker:
        """Shared rate limit state. Inspect before calling ``do`` to pace requests."""
        return self._rate_limits

    def with_auth_token(self, token: str) -> "GitHubClient":
        """Return a client using ``token`` that shares config and rate limit state."""
        return GitHubClient(
            GitHubAuth(token=token, token_env=self._config.token_env),
            config=self._config,
            transport=self._transport,
            rate_limits=self._rate_limits,
        )

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                auth=self._auth,
                transport=self._transport,
                timeout=self._config.timeout,
                follow_redirects=self._config.follow_redirects,
            )
        return self._client

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        options: BaseModel | Mapping[str, Any] | None = None,
        media_type: str | None = None,
    ) -> httpx.Request:
        """Build a request for ``path`` relative to the base URL.

        Raises:
            InvalidPathError: If the path is not a valid relative URL.
            EncodeError: If the body or options cannot be serialized.
        """
        return self._builder.build(method, path, body, options=options, media_type=media_type)

    def new_upload_request(
        self,
        path: str,
        content: bytes,
        media_type: str,
        *,
        options: BaseModel | Mapping[str, Any] | None = None,
    ) -> httpx.Request:
        """Build a raw upload request relative to the upload URL."""
        return self._builder.build_upload(path, content, media_type, options=options)

    def _relative_path(self, url: httpx.URL) -> str:
        base_path = self._builder.base_url.path
        if url.host == self._builder.base_url.host and url.path.startswith(base_path):
            return url.path[len(base_path) :]
        return url.path

    async def _send(self, request: httpx.Request, timeout: float | None) -> httpx.Response:
        client = self._ensure_client()
        logger.debug("%s %s", request.method, request.url)
        try:
            async with asyncio.timeout(timeout):
                return await client.send(request)
        except TimeoutError as e:
            logger.warning("Deadline of %.1fs exceeded for %s %s", timeout, request.method, request.url)
            raise TransportError(
                f"Request cancelled after {timeout}s deadline", request=request, cancelled=True
            ) from e
        except httpx.TimeoutException as e:
            logger.warning("Timeout for %s %s", request.method, request.url)
            raise TransportError(f"Request timeout: {e}", request=request, cancelled=True) from e
        except httpx.TransportError as e:
            logger.warning("Network error for %s %s: %s", request.method, request.url, e)
            raise TransportError(f"Network error: {e}", request=request) from e
        except httpx.DecodingError as e:
            logger.warning("Undecodable body for %s %s: %s", request.method, request.url, e)
            raise TransportError(f"Response body could not be read: {e}", request=request) from e
        except httpx.RequestError as e:
            # TooManyRedirects and other request failures
            logger.warning("Request failed for %s %s: %s", request.method, request.url, e)
            raise TransportError(f"Request failed: {e}", request=request) from e

    async def do(
        self,
        request: httpx.Request,
        response_type: Any = None,
        *,
        timeout: float | None = None,
    ) -> Response[Any]:
        """Send a request and decode its response.

        Args:
            request: Request from ``new_request``.
            response_type: Type to validate the JSON body into (a pydantic
                model, ``list[Model]``, ``dict[str, Any]``...). When None the
                body is not decoded.
            timeout: Deadline in seconds for the whole call.

        Returns:
            Response with ``data`` set to the decoded body, or None for empty
            bodies, 202/204/304 responses, or when no type was given.

        Raises:
            TransportError: No response was received (``response`` is None).
            APIError: Non-2xx response; see subclasses for rate limits,
                abuse detection, validation and server errors.
            DecodeError: 2xx body does not match ``response_type``.
        """
        http_response = await self._send(request, timeout)

        category = category_for_path(request.method, self._relative_path(request.url))
        rate = self._rate_limits.observe(http_response.headers, category=category)
        response = Response.from_httpx(http_response, rate)

        error = classify(response)
        if error is not None:
            logger.debug("%s %s failed: %s", request.method, request.url, error)
            raise error

        if (
            response_type is None
            or response.status_code in NO_DECODE_STATUSES
            or not response.content.strip()
        ):
            if response.accepted:
                logger.info("%s %s accepted, result not ready yet", request.method, request.url)
            return response

        try:
            response.data = _adapter(response_type).validate_json(response.content)
        except pydantic.ValidationError as e:
            raise DecodeError(response, e) from e
        return response

    async def request(
        self,
        method: str,
        path: str,
        response_type: Any = None,
        *,
        body: Any = None,
        options: BaseModel | Mapping[str, Any] | None = None,
        media_type: str | None = None,
        timeout: float | None = None,
    ) -> Response[Any]:
        """Build and send a request in one call."""
        req = self.new_request(method, path, body, options=options, media_type=media_type)
        return await self.do(req, response_type, timeout=timeout)

    async def paginate(
        self,
        path: str,
        response_type: Any,
        *,
        options: BaseModel | Mapping[str, Any] | None = None,
        media_type: str | None = None,
        max_pages: int | None = None,
    ) -> AsyncIterator[Response[Any]]:
        """Iterate pages of a list endpoint by following ``next`` links.

        Yields:
            One Response per page.

        Raises:
            EncodeError: If a ``next`` link carries a cursor the options model
                cannot hold.
        """
        current = options
        pages = 0
        while True:
            response = await self.request(
                "GET", path, response_type, options=current, media_type=media_type
            )
            yield response
            pages += 1

            if response.cursors.next is None:
                return
            if max_pages is not None and pages >= max_pages:
                logger.debug("Stopping pagination of %s after %d pages", path, pages)
                return

            current = next_options(current, response.cursors.next)
            logger.debug("Following pagination to page %d", pages + 1)

    async def get_rate_limits(self) -> Response[RateLimits]:
        """Fetch all rate limit categories and refresh the tracker.

        ``GET /rate_limit`` does not count against the core quota.
        """
        response = await self.request("GET", "rate_limit", RateLimits)
        if response.data is not None:
            self._rate_limits.update_from(response.data)
        return response

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GitHubClient":
        """Async context manager entry."""
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
