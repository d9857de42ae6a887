"""Query-string options.

Options are pydantic models whose field aliases are the query keys. Fields
left at their default are not sent. List fields are joined with commas unless
declared with ``json_schema_extra={"repeated": True}``, in which case the key
is repeated once per value.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict

from gh_rest.core.errors import EncodeError
from gh_rest.core.timestamp import format_timestamp

QueryParams = list[tuple[str, str]]


class QueryOptions(BaseModel):
    """Base class for query-string option models."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class ListOptions(QueryOptions):
    """Page-number pagination options shared by most list endpoints."""

    page: int | None = None
    per_page: int | None = None


class ListCursorOptions(QueryOptions):
    """Cursor pagination options used by newer list endpoints."""

    page: str | None = None
    per_page: int | None = None
    after: str | None = None
    before: str | None = None
    cursor: str | None = None


def _encode_scalar(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _encode_scalar(key, value.value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, str | int | float):
        return str(value)
    msg = f"Cannot encode query parameter {key!r} of type {type(value).__name__}"
    raise EncodeError(msg)


def _encode_value(key: str, value: Any, repeated: bool) -> QueryParams:
    if isinstance(value, list | tuple | set | frozenset):
        items = [_encode_scalar(key, item) for item in value]
        if not items:
            return []
        if repeated:
            return [(key, item) for item in items]
        return [(key, ",".join(items))]
    return [(key, _encode_scalar(key, value))]


def encode_query(options: BaseModel | Mapping[str, Any] | None) -> QueryParams:
    """Encode an options value as ordered query parameters.

    Args:
        options: Options model, plain mapping, or None.

    Returns:
        List of (key, value) pairs, empty when nothing is set.

    Raises:
        EncodeError: If a value has no query-string representation.
    """
    if options is None:
        return []

    params: QueryParams = []

    if isinstance(options, Mapping):
        for key, value in options.items():
            if value is None:
                continue
            params.extend(_encode_value(str(key), value, repeated=False))
        return params

    if not isinstance(options, BaseModel):
        msg = f"Unsupported options type: {type(options).__name__}"
        raise EncodeError(msg)

    for name, field in type(options).model_fields.items():
        if field.exclude:
            continue
        value = getattr(options, name)
        if value is None:
            continue
        if not field.is_required() and value == field.get_default(call_default_factory=True):
            continue
        extra = field.json_schema_extra
        repeated = isinstance(extra, dict) and bool(extra.get("repeated"))
        params.extend(_encode_value(field.alias or name, value, repeated))

    return params


def add_options(path: str, options: BaseModel | Mapping[str, Any] | None) -> str:
    """Append encoded options to ``path``, keeping any query it already has."""
    params = encode_query(options)
    if not params:
        return path

    parts = urlsplit(path)
    existing = parse_qsl(parts.query, keep_blank_values=True)
    return urlunsplit(parts._replace(query=urlencode(existing + params)))
