"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx
from fastapi import Depends

from repo_viewer.domain.ports.repository_source import RepositorySource
from repo_viewer.infrastructure.config import Settings, get_settings
from repo_viewer.infrastructure.repository_api_client import RepositoryApiClient
from repo_viewer.services.navigation import Navigator

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_repository_source(
    settings: Settings = Depends(get_settings),
) -> RepositorySource:
    """Build the API client over the shared HTTP connection pool."""
    assert _http_client is not None, "startup() was not called"
    return RepositoryApiClient(client=_http_client, base_url=settings.api_base_url)


def get_navigator(
    source: RepositorySource = Depends(get_repository_source),
    settings: Settings = Depends(get_settings),
) -> Navigator:
    """A fresh navigator per page request; views never share state."""
    return Navigator(source, list_heading=settings.list_heading)
