"""GitHub authentication.

Credentials are attached by an ``httpx.Auth`` so the client core never touches
them. ``GitHubAuth`` loads a token from an explicit argument, an environment
variable, or the GitHub CLI. Any other ``httpx.Auth`` (app installation
tokens, basic auth) can be injected in its place.
"""

import logging
import os
import re
import subprocess
from collections.abc import Generator
from typing import Optional

import httpx

from gh_rest.core.errors import GitHubError

logger = logging.getLogger(__name__)

# ghp_ classic PAT, gho_ OAuth, ghu_ user-to-server, ghs_ server-to-server,
# ghr_ refresh token, github_pat_ fine-grained PAT
TOKEN_PREFIXES = ("ghp_", "gho_", "ghu_", "ghs_", "ghr_", "github_pat_")

# Legacy tokens: 40 hex characters, no prefix
CLASSIC_TOKEN_PATTERN = re.compile(r"^[a-f0-9]{40}$")


class AuthenticationError(GitHubError):
    """Raised when no usable token can be found. Nothing was sent."""


def _get_gh_cli_token() -> str | None:
    """Try to get a token from ``gh auth token``."""
    try:
        result = subprocess.run(
            ["gh", "auth", "token"],
            capture_output=True,
            text=True,
            timeout=5,
            check=False,
        )
    except FileNotFoundError:
        logger.debug("gh CLI not found")
        return None
    except subprocess.TimeoutExpired:
        logger.debug("gh CLI command timed out after 5 seconds")
        return None

    if result.returncode != 0:
        logger.debug("gh CLI returned non-zero exit code (%d)", result.returncode)
        return None

    token = result.stdout.strip()
    if token:
        logger.info("Using GitHub token from gh CLI")
    return token or None


def validate_token(token: str) -> None:
    """Check a token's format.

    Raises:
        AuthenticationError: If the token is empty or malformed.
    """
    if not token:
        raise AuthenticationError("Token is empty")

    has_prefix = token.startswith(TOKEN_PREFIXES)
    if not has_prefix and not CLASSIC_TOKEN_PATTERN.match(token):
        raise AuthenticationError(
            f"Invalid token format. Expected prefix {TOKEN_PREFIXES} "
            "or 40-character hex string (classic token)"
        )
    if has_prefix and len(token) < 20:
        raise AuthenticationError("Token appears too short to be valid")


class GitHubAuth(httpx.Auth):
    """Bearer token authentication for the GitHub API.

    Token sources, in order:
    1. Explicit ``token`` argument
    2. Environment variable named by ``token_env``
    3. GitHub CLI (``gh auth token``)
    """

    def __init__(self, token: str | None = None, token_env: str = "GITHUB_TOKEN") -> None:
        """Initialize GitHub authentication.

        Raises:
            AuthenticationError: If no token is found or it is malformed.
        """
        if token:
            source = "explicit parameter"
        elif os.environ.get(token_env):
            token = os.environ[token_env]
            source = f"{token_env} environment variable"
        else:
            token = _get_gh_cli_token()
            source = "gh CLI"

        if not token:
            raise AuthenticationError(
                f"GitHub token not found. Set {token_env}, pass a token explicitly, "
                "or authenticate with `gh auth login`."
            )

        validate_token(token)
        if source != "gh CLI":
            logger.info("Using GitHub token from %s", source)
        self._token = token

    @classmethod
    def from_env(cls, token_env: str = "GITHUB_TOKEN") -> Optional["GitHubAuth"]:
        """Build auth from an environment variable only.

        Returns:
            GitHubAuth, or None when the variable is unset (unauthenticated use).
        """
        token = os.environ.get(token_env)
        if not token:
            logger.debug("%s not set, sending unauthenticated requests", token_env)
            return None
        return cls(token=token, token_env=token_env)

    @property
    def token(self) -> str:
        """The validated token."""
        return self._token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        """Attach the Authorization header."""
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request

    def __repr__(self) -> str:
        return f"GitHubAuth(token='{self._token[:4]}...')"
