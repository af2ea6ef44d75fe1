"""Client-side routing — maps paths to views and owns the mounted view.

Route table::

    /                   → repository list
    /repository/{id}    → repository detail (``id`` extracted)
    anything else       → repository list

Navigating between two detail paths reparametrizes the mounted detail view
instead of remounting it, so its state machine sees an id change.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Union
from urllib.parse import unquote, urlsplit

from starlette.routing import compile_path

from repo_viewer.domain.entities import Screen
from repo_viewer.domain.exceptions import NoActiveView
from repo_viewer.domain.ports.repository_source import RepositorySource
from repo_viewer.services.repository_detail import RepositoryDetailView
from repo_viewer.services.repository_list import DEFAULT_HEADING, RepositoryListView

logger = logging.getLogger(__name__)

LIST_ROUTE = "repository-list"
DETAIL_ROUTE = "repository-detail"

_ROUTES: list[tuple[str, str]] = [
    (LIST_ROUTE, "/"),
    (DETAIL_ROUTE, "/repository/{id}"),
]

View = Union[RepositoryListView, RepositoryDetailView]


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of resolving a path against the route table."""

    name: str
    params: dict[str, str] = field(default_factory=dict)


def _normalise(path: str) -> str:
    path = urlsplit(path).path or "/"
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


class Navigator:
    """Resolves paths, mounts views and exposes ``navigate(path)`` to them."""

    def __init__(
        self, source: RepositorySource, *, list_heading: str = DEFAULT_HEADING
    ) -> None:
        self._source = source
        self._list_heading = list_heading
        self._routes: list[tuple[str, re.Pattern[str]]] = [
            (name, compile_path(template)[0]) for name, template in _ROUTES
        ]
        self._view: View | None = None
        self._path: str | None = None
        self._history: list[str] = []

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def history(self) -> list[str]:
        return list(self._history)

    @property
    def view(self) -> View:
        if self._view is None:
            raise NoActiveView("navigate() has not been called yet.")
        return self._view

    def match(self, path: str) -> RouteMatch:
        """Resolve a still percent-encoded *path*; unknown paths fall back to the list.

        Parameters are decoded only after matching, so an encoded ``/`` stays
        inside its segment.
        """
        normalised = _normalise(path)
        for name, regex in self._routes:
            found = regex.match(normalised)
            if found:
                params = {key: unquote(value) for key, value in found.groupdict().items()}
                return RouteMatch(name=name, params=params)
        return RouteMatch(name=LIST_ROUTE)

    def navigate(self, path: str) -> View:
        """Switch to *path* without a reload and return the view now mounted.

        Must be called from inside a running event loop.
        """
        route = self.match(path)
        logger.info("Navigating to %s (%s)", path, route.name)
        self._path = path
        self._history.append(path)

        if route.name == DETAIL_ROUTE:
            repo_id = route.params["id"]
            if isinstance(self._view, RepositoryDetailView):
                self._view.set_id(repo_id)
                return self._view
            return self._mount(RepositoryDetailView(self._source, repo_id))

        return self._mount(
            RepositoryListView(self._source, self.navigate, heading=self._list_heading)
        )

    async def settled(self) -> Screen:
        """Wait for the mounted view to settle, following any navigation on the way."""
        while True:
            view = self.view
            screen = await view.settled()
            if view is self._view:
                return screen

    def _mount(self, view: View) -> View:
        if self._view is not None:
            self._view.unmount()
        self._view = view
        view.mount()
        return view
