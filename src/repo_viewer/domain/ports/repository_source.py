"""Port: repository source — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Protocol

from repo_viewer.domain.entities import RepositoryPayload


class RepositorySource(Protocol):
    """Abstract contract for reading repositories from the remote API."""

    async def fetch_list(self) -> list[RepositoryPayload]:
        """Return every repository, in the order the API lists them."""
        ...

    async def fetch_one(self, repo_id: Any) -> RepositoryPayload | None:
        """Return one repository by identifier, or ``None`` if the API says so."""
        ...
