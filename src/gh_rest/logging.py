"""Logging setup with credential redaction."""

import json
import logging
import re
from typing import ClassVar

from gh_rest.core.auth import TOKEN_PREFIXES
from gh_rest.core.errors import SENSITIVE_PARAMS

_PREFIXES = "|".join(re.escape(prefix) for prefix in TOKEN_PREFIXES)
_PARAMS = "|".join(sorted(SENSITIVE_PARAMS))


class SecretRedactingFilter(logging.Filter):
    """Redacts GitHub tokens and credentials from log records.

    The record is rendered first so secrets hidden in arguments of any type
    (``httpx.URL``, headers, exceptions) are caught too.
    """

    SECRET_PATTERNS: ClassVar[list[tuple[re.Pattern[str], str]]] = [
        (re.compile(rf"(?:{_PREFIXES})[A-Za-z0-9_]{{16,}}"), "[REDACTED_GH_TOKEN]"),
        (re.compile(r"Bearer\s+[A-Za-z0-9_\-\.]+"), "Bearer [REDACTED]"),
        (re.compile(r"(?<![A-Za-z])(token\s+)[A-Za-z0-9_\-\.]{16,}"), r"\1[REDACTED]"),
        (
            re.compile(
                r"(Authorization['\"]?:\s*['\"]?)(?:(?:bearer|token|basic)\s+)?[^\s,'\"\]]+",
                re.IGNORECASE,
            ),
            r"\1[REDACTED]",
        ),
        (re.compile(rf"((?:{_PARAMS})=)[^&\s]+", re.IGNORECASE), r"\1[REDACTED]"),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact secrets from the rendered message. Never drops a record."""
        message = record.getMessage()
        redacted = self._redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True

    def _redact(self, text: str) -> str:
        for pattern, replacement in self.SECRET_PATTERNS:
            text = pattern.sub(replacement, text)
        return text


TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Formats each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(
    verbose: bool = False,
    json_format: bool = False,
) -> None:
    """Configure logging for the CLI.

    Installs a stderr handler when the root logger has none. Every root
    handler gets one ``SecretRedactingFilter``, so calling this twice is safe.

    Args:
        verbose: Enable debug level logging (includes every request URL).
        json_format: Emit one JSON object per line.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not root_logger.handlers:
        handler = logging.StreamHandler()
        if json_format:
            handler.setFormatter(JsonFormatter(datefmt=DATE_FORMAT))
        else:
            handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(handler)

    redaction_filter = SecretRedactingFilter()
    for handler in root_logger.handlers:
        if not any(isinstance(f, SecretRedactingFilter) for f in handler.filters):
            handler.addFilter(redaction_filter)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: Logger name, typically __name__ of the calling module.
    """
    return logging.getLogger(name)
