"""Pagination cursors from the ``Link`` response header.

GitHub paginates with a header such as::

    Link: <https://api.github.com/user/repos?page=3>; rel="next",
          <https://api.github.com/user/repos?page=50>; rel="last"

This module only parses headers that were already received.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar
from urllib.parse import parse_qsl, urlsplit

from pydantic import BaseModel, ValidationError

from gh_rest.core.errors import EncodeError

RELATIONS = ("first", "prev", "next", "last")

# Query parameters that identify a page rather than filter the listing
CURSOR_PARAMS = ("page", "cursor", "after", "before", "since")

_LINK_SEPARATOR = re.compile(r",\s*(?=<)")
_REL_PATTERN = re.compile(r'^\s*rel="?([^"]*)"?\s*$')

OptionsT = TypeVar("OptionsT", bound=BaseModel)


@dataclass(frozen=True)
class Cursors:
    """Page URLs named by a response's ``Link`` header."""

    first: str | None = None
    prev: str | None = None
    next: str | None = None
    last: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when the response carried no pagination links."""
        return not (self.first or self.prev or self.next or self.last)


def parse_link_header(value: str | None) -> Cursors:
    """Parse a ``Link`` header value into cursors.

    Unknown relations are ignored. A missing or empty header yields an empty
    Cursors.
    """
    if not value:
        return Cursors()

    found: dict[str, str] = {}
    for entry in _LINK_SEPARATOR.split(value.strip()):
        segments = entry.split(";")
        target = segments[0].strip()
        if not (target.startswith("<") and target.endswith(">")):
            continue
        url = target[1:-1]
        for segment in segments[1:]:
            match = _REL_PATTERN.match(segment)
            if not match:
                continue
            for rel in match.group(1).split():
                if rel in RELATIONS:
                    found[rel] = url

    return Cursors(**found)


def extract_cursors(headers: Mapping[str, str]) -> Cursors:
    """Parse cursors from response headers (case-insensitive lookup)."""
    link = headers.get("link")
    if link is None and not hasattr(headers, "get_list"):
        link = next((v for k, v in headers.items() if k.lower() == "link"), None)
    return parse_link_header(link)


def cursor_params(url: str | None) -> dict[str, str]:
    """Return the query parameters of a cursor URL."""
    if not url:
        return {}
    return dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))


def page_number(url: str | None) -> int | None:
    """Return the numeric ``page`` of a cursor URL, if any."""
    page = cursor_params(url).get("page")
    if page is not None and page.isdigit():
        return int(page)
    return None


def page_token(url: str | None) -> str | None:
    """Return a non-numeric page token (``page``, ``cursor`` or ``since``)."""
    params = cursor_params(url)
    page = params.get("page")
    if page and not page.isdigit():
        return page
    return params.get("cursor") or params.get("since")


def next_options(options: Any, cursor_url: str) -> Any:
    """Build the options for the page at ``cursor_url``.

    Page-identifying parameters come from the cursor. Every other option keeps
    the caller's value; ``per_page`` is only taken from the cursor when the
    caller did not set it.

    Args:
        options: Current options: a pydantic options model, a mapping, or None.
        cursor_url: Absolute URL from a Link relation.

    Returns:
        New options of the same kind as ``options`` (a dict when None).

    Raises:
        EncodeError: If an options model has no field for a cursor parameter.
        TypeError: If ``options`` is of an unsupported type.
    """
    params = cursor_params(cursor_url)
    update = {key: params[key] for key in CURSOR_PARAMS if key in params}

    if options is None:
        if "per_page" in params:
            update["per_page"] = params["per_page"]
        return update

    if isinstance(options, Mapping):
        merged = dict(options)
        merged.update(update)
        if merged.get("per_page") is None and "per_page" in params:
            merged["per_page"] = params["per_page"]
        return merged

    if isinstance(options, BaseModel):
        return _merge_model(options, update, params.get("per_page"))

    msg = f"Unsupported options type: {type(options).__name__}"
    raise TypeError(msg)


def _merge_model(options: OptionsT, update: dict[str, str], per_page: str | None) -> OptionsT:
    by_key = {field.alias or name: name for name, field in type(options).model_fields.items()}
    missing = sorted(key for key in update if key not in by_key)
    if missing:
        # Dropping the cursor would request the same page again
        msg = (
            f"{type(options).__name__} has no field for cursor parameter(s): "
            f"{', '.join(missing)}"
        )
        raise EncodeError(msg)

    data = {name: getattr(options, name) for name in type(options).model_fields}
    for key, value in update.items():
        data[by_key[key]] = value
    if per_page is not None and "per_page" in by_key and data.get(by_key["per_page"]) is None:
        data[by_key["per_page"]] = per_page
    try:
        return type(options).model_validate(data)
    except ValidationError as e:
        msg = f"Cursor does not fit {type(options).__name__}: {e}"
        raise EncodeError(msg) from e
