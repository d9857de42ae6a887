"""Request construction.

Turns a relative path, optional query options and optional body into a fully
formed ``httpx.Request`` carrying GitHub's standard headers.
"""

import json
import logging
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel

from gh_rest.config import ClientConfig
from gh_rest.core.errors import EncodeError, InvalidPathError
from gh_rest.core.options import add_options
from gh_rest.core.timestamp import format_timestamp

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, datetime):
        return format_timestamp(value)
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def encode_body(body: Any) -> bytes:
    """Serialize a request body as compact JSON.

    pydantic models are dumped by alias without None fields; fields declared
    with ``Field(exclude=True)`` are never sent.

    Raises:
        EncodeError: If the body cannot be serialized.
    """
    try:
        if isinstance(body, BaseModel):
            payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
        else:
            payload = body
        return json.dumps(payload, separators=(",", ":"), default=_json_default).encode()
    except (TypeError, ValueError) as e:
        msg = f"Cannot encode request body of type {type(body).__name__}: {e}"
        raise EncodeError(msg) from e


class RequestBuilder:
    """Builds requests against a base URL with standard GitHub headers."""

    def __init__(self, config: ClientConfig) -> None:
        """Initialize request builder.

        Args:
            config: Client configuration providing URLs and header values.
        """
        self._config = config
        self.base_url = httpx.URL(config.base_url)
        self.upload_url = httpx.URL(config.upload_url)

    def default_headers(self, media_type: str | None = None) -> dict[str, str]:
        """Headers sent with every request."""
        headers = {
            "Accept": media_type or self._config.media_type,
            "User-Agent": self._config.user_agent,
        }
        if self._config.api_version:
            headers["X-GitHub-Api-Version"] = self._config.api_version
        return headers

    def resolve(self, path: str, base: httpx.URL | None = None) -> httpx.URL:
        """Resolve a relative path against the base URL.

        A leading slash is ignored so ``/user`` and ``user`` both resolve under
        the base URL's path (which matters for Enterprise ``/api/v3/`` hosts).

        Raises:
            InvalidPathError: If the path is absolute or not a valid URL.
        """
        if _BAD_ESCAPE.search(path):
            raise InvalidPathError(path, "invalid percent-escape")
        if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in path):
            raise InvalidPathError(path, "whitespace or control character")
        try:
            parts = urlsplit(path)
        except ValueError as e:
            raise InvalidPathError(path, str(e)) from e
        if parts.scheme or parts.netloc:
            raise InvalidPathError(path, "path must be relative to the base URL")

        try:
            return (base or self.base_url).join(path.lstrip("/"))
        except httpx.InvalidURL as e:
            raise InvalidPathError(path, str(e)) from e

    def build(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        options: BaseModel | Mapping[str, Any] | None = None,
        media_type: str | None = None,
    ) -> httpx.Request:
        """Build a request.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            body: Value sent as JSON, or None for no body.
            options: Query options appended to the path.
            media_type: Accept header override (preview media types).

        Returns:
            Request ready to send.

        Raises:
            InvalidPathError: If the path is not a valid relative URL.
            EncodeError: If the body or options cannot be serialized.
        """
        url = self.resolve(add_options(path, options))
        headers = self.default_headers(media_type)

        content: bytes | None = None
        if body is not None:
            content = encode_body(body)
            headers["Content-Type"] = JSON_CONTENT_TYPE

        logger.debug("Built request %s %s", method.upper(), url)
        return httpx.Request(method.upper(), url, headers=headers, content=content)

    def build_upload(
        self,
        path: str,
        content: bytes,
        media_type: str,
        *,
        options: BaseModel | Mapping[str, Any] | None = None,
    ) -> httpx.Request:
        """Build a raw upload request against the upload URL.

        Args:
            path: Path relative to the upload URL.
            content: Bytes to upload.
            media_type: Content-Type of the upload.
            options: Query options (e.g. ``name`` and ``label`` for release assets).
        """
        url = self.resolve(add_options(path, options), base=self.upload_url)
        headers = self.default_headers()
        headers["Content-Type"] = media_type
        return httpx.Request("POST", url, headers=headers, content=content)
