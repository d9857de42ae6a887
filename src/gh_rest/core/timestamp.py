"""Codecs for GitHub's scalar conventions.

GitHub sends timestamps either as RFC 3339 strings or as Unix epoch seconds,
depending on the endpoint. Some identifiers arrive as integers in one payload
and as strings in another.
"""

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer


def _from_epoch(seconds: int | float) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, tz=UTC)
    except (OverflowError, OSError, ValueError) as e:
        msg = f"Epoch timestamp out of range: {seconds!r}"
        raise ValueError(msg) from e


def parse_timestamp(value: Any) -> datetime:
    """Parse a GitHub timestamp into an aware UTC datetime.

    Args:
        value: RFC 3339 string, Unix epoch seconds (int, float or numeric
            string), or a datetime.

    Returns:
        Timezone-aware datetime in UTC.

    Raises:
        ValueError: If the value is not a recognised timestamp.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    # bool is an int subclass; true/false are never timestamps
    if isinstance(value, bool):
        msg = f"Invalid timestamp: {value!r}"
        raise ValueError(msg)

    if isinstance(value, int | float):
        return _from_epoch(value)

    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return _from_epoch(int(text))
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as e:
            msg = f"Invalid timestamp: {value!r}"
            raise ValueError(msg) from e
        return parse_timestamp(parsed)

    msg = f"Invalid timestamp type: {type(value).__name__}"
    raise ValueError(msg)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as RFC 3339 with a trailing Z."""
    return parse_timestamp(value).isoformat().replace("+00:00", "Z")


def _int_or_string(value: Any) -> int | str:
    if isinstance(value, bool):
        msg = f"Expected int or string, got {value!r}"
        raise ValueError(msg)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value) if value.isdigit() else value
    msg = f"Expected int or string, got {type(value).__name__}"
    raise ValueError(msg)


Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]

IntOrString = Annotated[int | str, BeforeValidator(_int_or_string)]
