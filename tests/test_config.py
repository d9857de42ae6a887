"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from gh_rest import __version__
from gh_rest.config import ClientConfig, Config, load_config

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestConfigLoading:
    """Tests for config loading."""

    def test_load_valid_config(self) -> None:
        """Test loading a configuration file."""
        config = load_config(FIXTURES_DIR / "client_config.yaml")

        assert config.client.base_url == "https://ghe.example.com/api/v3/"
        assert config.client.upload_url == "https://ghe.example.com/api/uploads/"
        assert config.client.user_agent == "release-bot/2.1"
        assert config.client.timeout == 10
        assert config.client.token_env == "GHE_TOKEN"
        assert config.client.api_version == "2022-11-28"
        assert config.logging.verbose is True

    def test_load_missing_file(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(Path("/nonexistent/config.yaml"))

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file gives the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path) == Config()

    def test_load_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("client:\n  timeout: -1\n")

        with pytest.raises(ValidationError):
            load_config(path)


class TestClientConfig:
    """Tests for ClientConfig validation."""

    def test_defaults(self) -> None:
        config = ClientConfig()

        assert config.base_url == "https://api.github.com/"
        assert config.upload_url == "https://uploads.github.com/"
        assert config.user_agent == f"gh-rest/{__version__}"
        assert config.media_type == "application/vnd.github+json"
        assert config.follow_redirects is True
        assert config.token_env == "GITHUB_TOKEN"

    def test_trailing_slash_added(self) -> None:
        assert ClientConfig(base_url="https://api.example.com").base_url == "https://api.example.com/"

    def test_relative_url_rejected(self) -> None:
        with pytest.raises(ValidationError, match="absolute"):
            ClientConfig(base_url="api.github.com")

    @pytest.mark.parametrize(
        ("base", "upload", "expected_base", "expected_upload"),
        [
            (
                "https://ghe.example.com",
                None,
                "https://ghe.example.com/api/v3/",
                "https://ghe.example.com/api/uploads/",
            ),
            (
                "https://ghe.example.com/api/v3/",
                None,
                "https://ghe.example.com/api/v3/",
                "https://ghe.example.com/api/uploads/",
            ),
            (
                "https://ghe.example.com/",
                "https://uploads.ghe.example.com",
                "https://ghe.example.com/api/v3/",
                "https://uploads.ghe.example.com/api/uploads/",
            ),
            (
                "https://api.ghe.example.com",
                "https://uploads.ghe.example.com/api/uploads/",
                "https://api.ghe.example.com/",
                "https://uploads.ghe.example.com/api/uploads/",
            ),
        ],
    )
    def test_for_enterprise(
        self, base: str, upload: str | None, expected_base: str, expected_upload: str
    ) -> None:
        """Test Enterprise Server URL derivation."""
        config = ClientConfig.for_enterprise(base, upload)
        assert config.base_url == expected_base
        assert config.upload_url == expected_upload
