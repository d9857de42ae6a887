"""Base model for GitHub payloads."""

from pydantic import BaseModel, ConfigDict


class GitHubModel(BaseModel):
    """Base for API payloads.

    Unknown response fields are ignored; None fields are left out of request
    bodies.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
