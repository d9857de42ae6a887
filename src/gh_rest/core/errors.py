"""Error taxonomy and response classification.

Every failure is raised as a subclass of GitHubError. Errors raised after a
response arrived keep that response (status, headers, raw body) on
``error.response``; errors raised before anything was received have
``response`` set to None.
"""

import json
import logging
import re
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
from pydantic import BaseModel, Field, model_validator

from gh_rest.core.ratelimit import Rate

if TYPE_CHECKING:
    from gh_rest.core.http import Response

logger = logging.getLogger(__name__)

# Query parameters scrubbed from URLs shown in error messages
SENSITIVE_PARAMS = frozenset({"client_secret", "access_token", "token"})

SECONDARY_LIMIT_PATTERN = re.compile(r"secondary rate limit|abuse", re.IGNORECASE)


def sanitize_url(url: str | httpx.URL) -> str:
    """Redact credentials passed as query parameters."""
    parts = urlsplit(str(url))
    if not parts.query:
        return str(url)
    query = [
        (key, "REDACTED" if key in SENSITIVE_PARAMS else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query)))


class GitHubError(Exception):
    """Base exception for all client errors."""

    response: "Response | None" = None


class RequestError(GitHubError):
    """Raised when a request cannot be built. Nothing was sent."""


class InvalidPathError(RequestError):
    """Raised when a request path is not a valid relative URL."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid request path {path!r}: {reason}")


class EncodeError(RequestError):
    """Raised when a body or query options value cannot be serialized."""


class TransportError(GitHubError):
    """Raised when no response was received.

    ``response`` is always None. ``cancelled`` is True when the call was cut
    short by a timeout or deadline.
    """

    def __init__(
        self,
        message: str,
        *,
        request: httpx.Request | None = None,
        cancelled: bool = False,
    ) -> None:
        self.request = request
        self.cancelled = cancelled
        self.response = None
        super().__init__(message)


class DecodeError(GitHubError):
    """Raised when a successful response body does not match the target type."""

    def __init__(self, response: "Response", cause: Exception) -> None:
        self.response = response
        self.cause = cause
        super().__init__(
            f"Failed to decode {response.status_code} response from "
            f"{sanitize_url(response.url)}: {cause}"
        )


class ErrorDetail(BaseModel):
    """One entry of the ``errors`` list in a GitHub error body."""

    resource: str | None = None
    field: str | None = None
    code: str | None = None
    message: str | None = None

    @model_validator(mode="before")
    @classmethod
    def accept_plain_string(cls, data: Any) -> Any:
        """Some endpoints report errors as bare strings."""
        if isinstance(data, str):
            return {"message": data}
        return data

    def __str__(self) -> str:
        if self.message and not (self.resource or self.field or self.code):
            return self.message
        return f"{self.code} error caused by {self.field} field on {self.resource} resource"


class ErrorBody(BaseModel):
    """Structured error body returned by GitHub."""

    message: str
    errors: list[ErrorDetail] = Field(default_factory=list)
    documentation_url: str | None = None


def parse_error_body(content: bytes) -> ErrorBody | None:
    """Parse a GitHub error body.

    Returns:
        ErrorBody, or None if the body is not a JSON object with a message.
    """
    if not content.strip():
        return None
    try:
        raw = json.loads(content)
    except ValueError:
        return None
    if not isinstance(raw, dict) or not isinstance(raw.get("message"), str):
        return None
    try:
        return ErrorBody.model_validate(raw)
    except ValueError:
        # Keep the message even if the errors list is malformed
        return ErrorBody(message=raw["message"], documentation_url=raw.get("documentation_url"))


class APIError(GitHubError):
    """Raised for a non-2xx response."""

    def __init__(
        self,
        response: "Response",
        message: str,
        errors: list[ErrorDetail] | None = None,
        documentation_url: str | None = None,
    ) -> None:
        self.response = response
        self.message = message
        self.errors = errors or []
        self.documentation_url = documentation_url
        super().__init__(self._format())

    @property
    def status_code(self) -> int:
        """HTTP status code of the response."""
        return self.response.status_code

    @property
    def body(self) -> str:
        """Raw response body text."""
        return self.response.text

    def _format(self) -> str:
        request = self.response.request
        where = f"{request.method} {sanitize_url(request.url)}: " if request is not None else ""
        text = f"{where}{self.status_code} {self.message}"
        if self.errors:
            text += " [" + "; ".join(str(e) for e in self.errors) + "]"
        return text


class RedirectError(APIError):
    """Raised for a 3xx response that was not followed."""

    @property
    def location(self) -> str | None:
        """Target of the redirect from the ``Location`` header."""
        return self.response.headers.get("location")


class ValidationError(APIError):
    """Raised for a 4xx response that lists per-field errors."""


class ServerError(APIError):
    """Raised for a 5xx response without a structured error body."""


class RateLimitedError(APIError):
    """Raised when the primary rate limit is exhausted (or on a bare 429)."""

    def __init__(
        self,
        response: "Response",
        message: str,
        *,
        rate: Rate | None = None,
        retry_after: timedelta | None = None,
        errors: list[ErrorDetail] | None = None,
        documentation_url: str | None = None,
    ) -> None:
        self.rate = rate
        self.retry_after = retry_after
        super().__init__(response, message, errors, documentation_url)


class AbuseDetectedError(APIError):
    """Raised when GitHub's secondary rate limit (abuse detection) triggers."""

    def __init__(
        self,
        response: "Response",
        message: str,
        *,
        retry_after: timedelta | None = None,
        errors: list[ErrorDetail] | None = None,
        documentation_url: str | None = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(response, message, errors, documentation_url)


def compute_retry_after(
    headers: httpx.Headers,
    rate: Rate | None = None,
    now: datetime | None = None,
) -> timedelta | None:
    """Compute how long to wait before retrying.

    ``Retry-After`` (seconds) wins; otherwise the time until the rate limit
    reset, floored at zero.

    Returns:
        Wait duration, or None if the response gives no hint.
    """
    retry_after = headers.get("retry-after")
    if retry_after is not None:
        try:
            return timedelta(seconds=max(0, int(retry_after)))
        except (ValueError, OverflowError):
            logger.debug("Ignoring malformed Retry-After header: %s", retry_after)

    if rate is not None:
        now = now or datetime.now(UTC)
        return max(timedelta(0), rate.reset - now)
    return None


def _is_secondary_limit(body: ErrorBody | None, headers: httpx.Headers, status_code: int) -> bool:
    if body is not None:
        doc_url = body.documentation_url or ""
        if doc_url.endswith("#abuse-rate-limits") or doc_url.endswith("secondary-rate-limits"):
            return True
        if SECONDARY_LIMIT_PATTERN.search(body.message):
            return True
    return status_code == 403 and "retry-after" in headers


def classify(response: "Response") -> APIError | None:
    """Classify a received response.

    Args:
        response: Response metadata with raw content.

    Returns:
        None for 2xx and 304 responses, otherwise the matching APIError
        subclass. Redirects only reach here when the client does not
        follow them.
    """
    status = response.status_code
    if 200 <= status < 300 or status == 304:
        return None

    body = parse_error_body(response.content)
    if body is not None:
        message = body.message
        errors = body.errors
        doc_url = body.documentation_url
    else:
        message = response.text.strip() or response.reason_phrase
        errors = []
        doc_url = None

    if 300 <= status < 400:
        return RedirectError(response, message, errors, doc_url)

    headers = response.headers
    rate = response.rate or Rate.from_headers(headers)

    if status in (403, 429) and headers.get("x-ratelimit-remaining") == "0":
        return RateLimitedError(
            response,
            message,
            rate=rate,
            retry_after=compute_retry_after(headers, rate),
            errors=errors,
            documentation_url=doc_url,
        )

    if status in (403, 429) and _is_secondary_limit(body, headers, status):
        return AbuseDetectedError(
            response,
            message,
            retry_after=compute_retry_after(headers, rate),
            errors=errors,
            documentation_url=doc_url,
        )

    if status == 429:
        return RateLimitedError(
            response,
            message,
            rate=rate,
            retry_after=compute_retry_after(headers, rate),
            errors=errors,
            documentation_url=doc_url,
        )

    if status < 500 and errors:
        return ValidationError(response, message, errors, doc_url)

    if status >= 500 and body is None:
        return ServerError(response, message)

    return APIError(response, message, errors, doc_url)
