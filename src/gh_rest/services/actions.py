"""GitHub Actions variables API."""

from gh_rest.core.http import Response
from gh_rest.core.options import ListOptions
from gh_rest.models.actions import Variable, Variables
from gh_rest.services.base import Service


class ActionsService(Service):
    """Repository and organization Actions variables."""

    async def _list(self, prefix: str, options: ListOptions | None) -> Response[Variables]:
        return await self._client.request(
            "GET", f"{prefix}/actions/variables", Variables, options=options
        )

    async def _get(self, prefix: str, name: str) -> Response[Variable]:
        return await self._client.request("GET", f"{prefix}/actions/variables/{name}", Variable)

    async def _create(self, prefix: str, variable: Variable) -> Response[None]:
        return await self._client.request("POST", f"{prefix}/actions/variables", body=variable)

    async def _update(self, prefix: str, variable: Variable) -> Response[None]:
        return await self._client.request(
            "PATCH", f"{prefix}/actions/variables/{variable.name}", body=variable
        )

    async def _delete(self, prefix: str, name: str) -> Response[None]:
        return await self._client.request("DELETE", f"{prefix}/actions/variables/{name}")

    async def list_repo_variables(
        self, owner: str, repo: str, options: ListOptions | None = None
    ) -> Response[Variables]:
        return await self._list(f"repos/{owner}/{repo}", options)

    async def get_repo_variable(self, owner: str, repo: str, name: str) -> Response[Variable]:
        return await self._get(f"repos/{owner}/{repo}", name)

    async def create_repo_variable(
        self, owner: str, repo: str, variable: Variable
    ) -> Response[None]:
        """Create a repository variable. GitHub answers 201 with an empty body."""
        return await self._create(f"repos/{owner}/{repo}", variable)

    async def update_repo_variable(
        self, owner: str, repo: str, variable: Variable
    ) -> Response[None]:
        return await self._update(f"repos/{owner}/{repo}", variable)

    async def delete_repo_variable(self, owner: str, repo: str, name: str) -> Response[None]:
        return await self._delete(f"repos/{owner}/{repo}", name)

    async def list_org_variables(
        self, org: str, options: ListOptions | None = None
    ) -> Response[Variables]:
        return await self._list(f"orgs/{org}", options)

    async def get_org_variable(self, org: str, name: str) -> Response[Variable]:
        return await self._get(f"orgs/{org}", name)

    async def create_org_variable(self, org: str, variable: Variable) -> Response[None]:
        """Create an organization variable.

        ``visibility`` must be set; ``selected_repository_ids`` applies when it
        is ``selected``.
        """
        return await self._create(f"orgs/{org}", variable)

    async def update_org_variable(self, org: str, variable: Variable) -> Response[None]:
        return await self._update(f"orgs/{org}", variable)

    async def delete_org_variable(self, org: str, name: str) -> Response[None]:
        return await self._delete(f"orgs/{org}", name)
