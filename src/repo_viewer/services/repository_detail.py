"""Repository detail view."""

from __future__ import annotations

import asyncio
import logging
from typing import Mapping

from repo_viewer.domain.entities import (
    ExternalLink,
    Failure,
    Metric,
    RepositoryDetail,
    RepositoryPayload,
    Screen,
    ScreenKind,
    Success,
)
from repo_viewer.domain.ports.repository_source import RepositorySource
from repo_viewer.services.formatting import display_metric, display_text
from repo_viewer.services.view_state import ViewStateMachine

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading repository details..."
FAILURE_MESSAGE = "Failed to fetch repository details. Please try again later."
NOT_FOUND_MESSAGE = "Repository not found"
NO_DESCRIPTION = "No description available"
# Differs from the list's "Unknown" on purpose.
MISSING_LANGUAGE = "N/A"
LINK_TEXT = "View on GitHub →"


def build_detail(repo: RepositoryPayload) -> RepositoryDetail:
    """Format a repository for the detail page, applying the detail fallbacks."""
    return RepositoryDetail(
        name=display_text(repo.get("name")),
        description=display_text(repo.get("description"), NO_DESCRIPTION),
        language=display_text(repo.get("language"), MISSING_LANGUAGE),
        metrics=(
            Metric("Forks", display_metric(repo.get("forks_count"))),
            Metric("Open Issues", display_metric(repo.get("open_issues_count"))),
            Metric("Watchers", display_metric(repo.get("watchers_count"))),
            Metric("Stars", display_metric(repo.get("stargazers_count"))),
        ),
        link=ExternalLink(href=display_text(repo.get("html_url")), text=LINK_TEXT),
    )


class RepositoryDetailView:
    """Fetches one repository and refetches whenever the route id changes."""

    def __init__(self, source: RepositorySource, repo_id: str) -> None:
        self._source = source
        self._repo_id = repo_id
        self._machine: ViewStateMachine[str] = ViewStateMachine(
            self._fetch, FAILURE_MESSAGE, name="repository detail"
        )

    @property
    def repo_id(self) -> str:
        return self._repo_id

    @property
    def machine(self) -> ViewStateMachine[str]:
        return self._machine

    def mount(self) -> asyncio.Task[None]:
        return self._machine.activate(self._repo_id)

    def unmount(self) -> None:
        self._machine.deactivate()

    def set_id(self, repo_id: str) -> asyncio.Task[None] | None:
        """Point the view at another repository; a no-op if the id is unchanged."""
        if repo_id != self._repo_id:
            logger.debug("Repository id changed from %s to %s", self._repo_id, repo_id)
        self._repo_id = repo_id
        return self._machine.rekey(repo_id)

    async def settled(self) -> Screen:
        await self._machine.settled()
        return self.render()

    def render(self) -> Screen:
        state = self._machine.state
        if isinstance(state, Failure):
            return Screen(kind=ScreenKind.ERROR, message=state.message)
        if isinstance(state, Success):
            if not state.payload or not isinstance(state.payload, Mapping):
                return Screen(kind=ScreenKind.NOT_FOUND, message=NOT_FOUND_MESSAGE)
            return Screen(kind=ScreenKind.DETAIL, detail=build_detail(state.payload))
        return Screen(kind=ScreenKind.LOADING, message=LOADING_MESSAGE)

    async def _fetch(self, repo_id: str) -> RepositoryPayload | None:
        return await self._source.fetch_one(repo_id)
