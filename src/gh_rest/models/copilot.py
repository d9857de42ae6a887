"""Copilot seat management payloads."""

from typing import Any

from pydantic import field_validator

from gh_rest.core.timestamp import Timestamp
from gh_rest.core.variants import discriminate
from gh_rest.models.base import GitHubModel
from gh_rest.models.common import Organization, Team, User

ASSIGNEE_TYPES: dict[str, type[GitHubModel] | None] = {
    "User": User,
    "Team": Team,
    "Organization": Organization,
}


class CopilotSeatBreakdown(GitHubModel):
    total: int = 0
    added_this_cycle: int = 0
    pending_cancellation: int = 0
    pending_invitation: int = 0
    active_this_cycle: int = 0
    inactive_this_cycle: int = 0


class CopilotOrganizationDetails(GitHubModel):
    """Copilot subscription details and settings of an organization."""

    seat_breakdown: CopilotSeatBreakdown | None = None
    public_code_suggestions: str | None = None
    copilot_chat: str | None = None
    seat_management_setting: str | None = None


class CopilotSeatDetails(GitHubModel):
    """One Copilot seat. The assignee is a user, a team or an organization."""

    assignee: User | Team | Organization
    assigning_team: Team | None = None
    pending_cancellation_date: str | None = None
    last_activity_at: Timestamp | None = None
    last_activity_editor: str | None = None
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None

    @field_validator("assignee", mode="before")
    @classmethod
    def decode_assignee(cls, value: Any) -> Any:
        """Choose the assignee model from its ``type`` field."""
        return discriminate(value, ASSIGNEE_TYPES, what="assignee")

    @property
    def user(self) -> User | None:
        return self.assignee if isinstance(self.assignee, User) else None

    @property
    def team(self) -> Team | None:
        return self.assignee if isinstance(self.assignee, Team) else None

    @property
    def organization(self) -> Organization | None:
        return self.assignee if isinstance(self.assignee, Organization) else None


class CopilotSeats(GitHubModel):
    """A page of seat assignments."""

    total_seats: int = 0
    seats: list[CopilotSeatDetails] = []


class SeatAssignments(GitHubModel):
    seats_created: int = 0


class SeatCancellations(GitHubModel):
    seats_cancelled: int = 0
