"""Tests for GitHub authentication."""

import os
import subprocess
from unittest.mock import MagicMock, patch

import httpx
import pytest

from gh_rest.core.auth import (
    AuthenticationError,
    GitHubAuth,
    _get_gh_cli_token,
    validate_token,
)
from gh_rest.core.errors import GitHubError


def gh_result(returncode: int = 0, stdout: str = "") -> MagicMock:
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    return result


class TestValidateToken:
    """Tests for token format validation."""

    @pytest.mark.parametrize(
        "token",
        [
            "ghp_" + "a" * 36,
            "gho_" + "b" * 36,
            "ghu_" + "c" * 36,
            "ghs_" + "d" * 36,
            "ghr_" + "e" * 36,
            "github_pat_11ABCDEFG0" + "x" * 60,
            "abc123def456abc789def012abc345def6789abc",
        ],
    )
    def test_valid(self, token: str) -> None:
        validate_token(token)

    def test_empty(self) -> None:
        with pytest.raises(AuthenticationError, match="empty"):
            validate_token("")

    def test_invalid_prefix(self) -> None:
        with pytest.raises(AuthenticationError, match="Invalid token format"):
            validate_token("xyz_" + "a" * 36)

    def test_classic_token_wrong_length(self) -> None:
        with pytest.raises(AuthenticationError, match="Invalid token format"):
            validate_token("a" * 39)

    def test_too_short(self) -> None:
        with pytest.raises(AuthenticationError, match="too short"):
            validate_token("ghp_abc")


class TestGitHubAuthSources:
    """Tests for the token source order."""

    def test_explicit_token(self) -> None:
        token = "ghp_" + "a" * 36
        assert GitHubAuth(token=token).token == token

    def test_environment_variable(self) -> None:
        token = "ghp_" + "e" * 36
        with patch.dict(os.environ, {"GITHUB_TOKEN": token}, clear=True):
            assert GitHubAuth().token == token

    def test_custom_environment_variable(self) -> None:
        token = "ghp_" + "f" * 36
        with patch.dict(os.environ, {"GHE_TOKEN": token}, clear=True):
            assert GitHubAuth(token_env="GHE_TOKEN").token == token

    def test_explicit_token_overrides_env(self) -> None:
        explicit = "ghp_" + "a" * 36
        with patch.dict(os.environ, {"GITHUB_TOKEN": "ghp_" + "b" * 36}):
            assert GitHubAuth(token=explicit).token == explicit

    def test_falls_back_to_gh_cli(self) -> None:
        cli_token = "gho_" + "c" * 36
        with (
            patch.dict(os.environ, {}, clear=True),
            patch("gh_rest.core.auth.subprocess.run", return_value=gh_result(stdout=cli_token + "\n")),
        ):
            assert GitHubAuth().token == cli_token

    def test_env_takes_precedence_over_gh_cli(self) -> None:
        env_token = "ghp_" + "d" * 36
        with (
            patch.dict(os.environ, {"GITHUB_TOKEN": env_token}, clear=True),
            patch("gh_rest.core.auth.subprocess.run") as run,
        ):
            assert GitHubAuth().token == env_token
        run.assert_not_called()

    def test_no_token_anywhere(self) -> None:
        with (
            patch.dict(os.environ, {}, clear=True),
            patch("gh_rest.core.auth.subprocess.run", return_value=gh_result(returncode=1)),
            pytest.raises(AuthenticationError, match="GitHub token not found"),
        ):
            GitHubAuth()

    def test_from_env_unset_is_none(self) -> None:
        """Test that from_env allows unauthenticated use instead of raising."""
        with patch.dict(os.environ, {}, clear=True):
            assert GitHubAuth.from_env() is None

    def test_from_env_set(self) -> None:
        token = "ghp_" + "g" * 36
        with patch.dict(os.environ, {"GITHUB_TOKEN": token}, clear=True):
            auth = GitHubAuth.from_env()
        assert auth is not None
        assert auth.token == token

    def test_from_env_invalid(self) -> None:
        with (
            patch.dict(os.environ, {"GITHUB_TOKEN": "not-a-token"}, clear=True),
            pytest.raises(AuthenticationError),
        ):
            GitHubAuth.from_env()

    def test_is_client_error(self) -> None:
        """Test that token failures are caught alongside request failures."""
        assert issubclass(AuthenticationError, GitHubError)


class TestGhCli:
    """Tests for reading a token from the gh CLI."""

    def test_success(self) -> None:
        with patch("gh_rest.core.auth.subprocess.run", return_value=gh_result(stdout="gho_x\n")):
            assert _get_gh_cli_token() == "gho_x"

    def test_failure(self) -> None:
        with patch("gh_rest.core.auth.subprocess.run", return_value=gh_result(returncode=1)):
            assert _get_gh_cli_token() is None

    def test_not_installed(self) -> None:
        with patch("gh_rest.core.auth.subprocess.run", side_effect=FileNotFoundError):
            assert _get_gh_cli_token() is None

    def test_timeout(self) -> None:
        with patch(
            "gh_rest.core.auth.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="gh", timeout=5),
        ):
            assert _get_gh_cli_token() is None

    def test_empty_output(self) -> None:
        with patch("gh_rest.core.auth.subprocess.run", return_value=gh_result(stdout="  \n")):
            assert _get_gh_cli_token() is None


class TestAuthFlow:
    """Tests for header injection."""

    def test_sets_bearer_header(self) -> None:
        token = "ghp_" + "a" * 36
        request = httpx.Request("GET", "https://api.github.com/user")

        flow = GitHubAuth(token=token).auth_flow(request)
        sent = next(flow)

        assert sent.headers["Authorization"] == f"Bearer {token}"

    def test_repr_masks_token(self) -> None:
        auth = GitHubAuth(token="ghp_" + "a" * 36)
        assert "a" * 10 not in repr(auth)
        assert repr(auth) == "GitHubAuth(token='ghp_...')"
