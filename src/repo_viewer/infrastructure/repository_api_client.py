"""Repositories API client — implements the RepositorySource port."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from repo_viewer.domain.entities import RepositoryPayload
from repo_viewer.domain.exceptions import RequestFailed

logger = logging.getLogger(__name__)


class RepositoryApiClient:
    """Concrete RepositorySource backed by the repositories HTTP API.

    Both calls go through :meth:`_get`, so the list and detail paths share one
    calling convention.  Response bodies are returned exactly as parsed.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": "repo-viewer/1.0",
        }

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_list(self) -> list[RepositoryPayload]:
        """GET /repositories → [repository]."""
        return await self._get("/repositories", "Failed to fetch repositories")

    async def fetch_one(self, repo_id: Any) -> RepositoryPayload | None:
        """GET /repositories/{id} → repository (or null)."""
        return await self._get(
            f"/repositories/{quote(str(repo_id), safe='')}",
            "Failed to fetch repository",
        )

    async def _get(self, endpoint: str, failure_message: str) -> Any:
        """Perform a GET and translate non-success statuses into RequestFailed.

        An empty success body (204, or 200 with no content) reads as ``None``.
        Transport errors (no response at all) propagate untouched.
        """
        url = f"{self._base_url}{endpoint}"
        logger.debug("GET %s", url)
        resp = await self._client.get(url, headers=self._headers)

        if resp.is_success:
            if not resp.content:
                return None
            return resp.json()

        logger.debug("GET %s returned HTTP %d", url, resp.status_code)
        raise RequestFailed(resp.status_code, failure_message)
