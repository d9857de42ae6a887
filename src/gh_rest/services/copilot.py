"""Copilot for Business seat management API."""

from gh_rest.core.http import Response
from gh_rest.core.options import ListOptions
from gh_rest.models.copilot import (
    CopilotOrganizationDetails,
    CopilotSeats,
    SeatAssignments,
    SeatCancellations,
)
from gh_rest.services.base import Service


class CopilotService(Service):
    """Endpoints under ``/orgs/{org}/copilot``."""

    async def get_billing(self, org: str) -> Response[CopilotOrganizationDetails]:
        """Get seat breakdown and feature settings for an organization."""
        return await self._client.request(
            "GET", f"orgs/{org}/copilot/billing", CopilotOrganizationDetails
        )

    async def list_seats(
        self, org: str, options: ListOptions | None = None
    ) -> Response[CopilotSeats]:
        """List seats. Each seat's ``assignee`` is a User, Team or Organization."""
        return await self._client.request(
            "GET", f"orgs/{org}/copilot/billing/seats", CopilotSeats, options=options
        )

    async def add_teams(self, org: str, team_names: list[str]) -> Response[SeatAssignments]:
        return await self._client.request(
            "POST",
            f"orgs/{org}/copilot/billing/selected_teams",
            SeatAssignments,
            body={"selected_teams": team_names},
        )

    async def remove_teams(self, org: str, team_names: list[str]) -> Response[SeatCancellations]:
        return await self._client.request(
            "DELETE",
            f"orgs/{org}/copilot/billing/selected_teams",
            SeatCancellations,
            body={"selected_teams": team_names},
        )

    async def add_users(self, org: str, users: list[str]) -> Response[SeatAssignments]:
        return await self._client.request(
            "POST",
            f"orgs/{org}/copilot/billing/selected_users",
            SeatAssignments,
            body={"selected_usernames": users},
        )

    async def remove_users(self, org: str, users: list[str]) -> Response[SeatCancellations]:
        return await self._client.request(
            "DELETE",
            f"orgs/{org}/copilot/billing/selected_users",
            SeatCancellations,
            body={"selected_usernames": users},
        )
