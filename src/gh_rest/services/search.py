"""Search API."""

from typing import Any

from gh_rest.core.http import Response
from gh_rest.models.search import (
    TEXT_MATCH_MEDIA_TYPE,
    CodeSearchResult,
    IssuesSearchResult,
    RepositoriesSearchResult,
    SearchOptions,
    UsersSearchResult,
)
from gh_rest.services.base import Service


class SearchService(Service):
    """Endpoints under ``/search``.

    ``query`` uses GitHub's search syntax, e.g. ``"language:go stars:>100"``.
    Set ``SearchOptions.text_match`` to receive highlighted fragments.
    """

    async def _search(
        self, kind: str, query: str, options: SearchOptions | None, response_type: Any
    ) -> Response[Any]:
        options = options or SearchOptions()
        params = options.model_copy(update={"query": query})
        media_type = TEXT_MATCH_MEDIA_TYPE if options.text_match else None
        return await self._client.request(
            "GET", f"search/{kind}", response_type, options=params, media_type=media_type
        )

    async def repositories(
        self, query: str, options: SearchOptions | None = None
    ) -> Response[RepositoriesSearchResult]:
        return await self._search("repositories", query, options, RepositoriesSearchResult)

    async def issues(
        self, query: str, options: SearchOptions | None = None
    ) -> Response[IssuesSearchResult]:
        """Search issues and pull requests."""
        return await self._search("issues", query, options, IssuesSearchResult)

    async def users(
        self, query: str, options: SearchOptions | None = None
    ) -> Response[UsersSearchResult]:
        return await self._search("users", query, options, UsersSearchResult)

    async def code(
        self, query: str, options: SearchOptions | None = None
    ) -> Response[CodeSearchResult]:
        return await self._search("code", query, options, CodeSearchResult)
