"""Configuration loading and validation."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from gh_rest import __version__

DEFAULT_BASE_URL = "https://api.github.com/"
DEFAULT_UPLOAD_URL = "https://uploads.github.com/"
DEFAULT_MEDIA_TYPE = "application/vnd.github+json"
DEFAULT_API_VERSION = "2022-11-28"


class ClientConfig(BaseModel):
    """HTTP client configuration."""

    base_url: str = DEFAULT_BASE_URL
    upload_url: str = DEFAULT_UPLOAD_URL
    user_agent: str = f"gh-rest/{__version__}"
    api_version: str | None = DEFAULT_API_VERSION
    media_type: str = DEFAULT_MEDIA_TYPE
    timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")
    follow_redirects: bool = True
    token_env: str = "GITHUB_TOKEN"

    @field_validator("base_url", "upload_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Relative paths resolve under the URL only if it ends with a slash."""
        if not v.startswith(("http://", "https://")):
            msg = f"URL must be absolute http(s): {v}"
            raise ValueError(msg)
        return v if v.endswith("/") else v + "/"

    @classmethod
    def for_enterprise(cls, base_url: str, upload_url: str | None = None) -> "ClientConfig":
        """Build a config for a GitHub Enterprise Server host.

        Appends ``api/v3/`` and ``api/uploads/`` when the URLs do not already
        carry them.
        """
        base = base_url if base_url.endswith("/") else base_url + "/"
        if not base.endswith("/api/v3/") and not base.startswith("https://api."):
            base += "api/v3/"

        upload = upload_url or base_url
        upload = upload if upload.endswith("/") else upload + "/"
        if not upload.endswith("/api/uploads/") and not upload.startswith("https://api."):
            upload = upload.removesuffix("api/v3/") + "api/uploads/"

        return cls(base_url=base, upload_url=upload)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    verbose: bool = False
    json_format: bool = False


class Config(BaseModel):
    """Root configuration model."""

    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValidationError: If the config is invalid.
    """
    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open() as f:
        raw_config: dict[str, Any] = yaml.safe_load(f) or {}

    return Config.model_validate(raw_config)
