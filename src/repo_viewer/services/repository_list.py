"""Repository list view."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Iterator, Mapping
from urllib.parse import quote

from repo_viewer.domain.entities import (
    Failure,
    Metric,
    RepositoryCard,
    RepositoryPayload,
    Screen,
    ScreenKind,
    Success,
)
from repo_viewer.domain.ports.repository_source import RepositorySource
from repo_viewer.services.formatting import display_metric, display_text
from repo_viewer.services.view_state import ViewStateMachine

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading repositories..."
FAILURE_MESSAGE = "Failed to fetch repositories. Please try again later."
NO_DESCRIPTION = "No description available"
UNKNOWN_LANGUAGE = "Unknown"
DEFAULT_HEADING = "GoDaddy Repositories"

# The list has a single key; every mount is a new generation.
_ALL = "all"

Navigate = Callable[[str], object]


def detail_path(repo_id: Any) -> str:
    """Client-side path of a repository's detail page."""
    return f"/repository/{quote(str(repo_id), safe='')}"


def _entries(payload: Any) -> Iterator[RepositoryPayload]:
    """Yield the list entries that are objects; anything else is skipped."""
    if not isinstance(payload, list):
        if payload is not None:
            logger.debug(
                "Ignoring non-list repositories payload of type %s",
                type(payload).__name__,
            )
        return
    for entry in payload:
        if isinstance(entry, Mapping):
            yield entry
        else:
            logger.debug("Skipping non-object repository entry %r", entry)


def build_card(repo: RepositoryPayload) -> RepositoryCard:
    """Format one list entry, applying the list's fallbacks."""
    return RepositoryCard(
        key=str(repo.get("id")),
        name=display_text(repo.get("name")),
        description=display_text(repo.get("description"), NO_DESCRIPTION),
        language=display_text(repo.get("language"), UNKNOWN_LANGUAGE),
        metrics=(
            Metric("Stars", display_metric(repo.get("stargazers_count")), "⭐"),
            Metric("Forks", display_metric(repo.get("forks_count")), "🔧"),
            Metric("Watchers", display_metric(repo.get("watchers_count")), "👁️"),
            Metric("Open Issues", display_metric(repo.get("open_issues_count")), "🔍"),
        ),
        detail_path=detail_path(repo.get("id")),
    )


class RepositoryListView:
    """Fetches every repository on mount and presents them as selectable cards."""

    def __init__(
        self,
        source: RepositorySource,
        navigate: Navigate,
        *,
        heading: str = DEFAULT_HEADING,
    ) -> None:
        self._source = source
        self._navigate = navigate
        self._heading = heading
        self._machine: ViewStateMachine[str] = ViewStateMachine(
            self._fetch, FAILURE_MESSAGE, name="repository list"
        )

    @property
    def machine(self) -> ViewStateMachine[str]:
        return self._machine

    def mount(self) -> asyncio.Task[None]:
        return self._machine.activate(_ALL)

    def unmount(self) -> None:
        self._machine.deactivate()

    def select(self, repo_id: Any) -> None:
        """Handle a click on the card for *repo_id*."""
        logger.debug("Repository %s selected", repo_id)
        self._navigate(detail_path(repo_id))

    async def settled(self) -> Screen:
        await self._machine.settled()
        return self.render()

    def render(self) -> Screen:
        state = self._machine.state
        if isinstance(state, Failure):
            return Screen(kind=ScreenKind.ERROR, message=state.message)
        if isinstance(state, Success):
            return Screen(
                kind=ScreenKind.LIST,
                heading=self._heading,
                cards=tuple(build_card(repo) for repo in _entries(state.payload)),
            )
        return Screen(kind=ScreenKind.LOADING, message=LOADING_MESSAGE)

    async def _fetch(self, _key: str) -> list[RepositoryPayload]:
        return await self._source.fetch_list()
