"""Shared fixtures: sample payloads and an in-memory repository source."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest


def make_repo(repo_id: int, **overrides: Any) -> dict[str, Any]:
    repo: dict[str, Any] = {
        "id": repo_id,
        "name": f"test-repo-{repo_id}",
        "full_name": f"godaddy/test-repo-{repo_id}",
        "description": f"Test repository {repo_id}",
        "html_url": f"https://github.com/godaddy/test-repo-{repo_id}",
        "language": "JavaScript",
        "forks_count": 5,
        "open_issues_count": 2,
        "watchers_count": 10,
        "stargazers_count": 15,
    }
    repo.update(overrides)
    return repo


class FakeSource:
    """RepositorySource double.

    Ids listed in ``gated`` block in ``fetch_one`` until :meth:`release`
    is called for them, which lets tests hold a response in flight.
    """

    def __init__(
        self,
        repos: Any = None,
        *,
        by_id: dict[str, Any] | None = None,
        list_error: Exception | None = None,
        one_error: Exception | None = None,
        gated: set[str] | None = None,
    ) -> None:
        self.repos = repos if repos is not None else []
        if by_id is None:
            entries = self.repos if isinstance(self.repos, list) else []
            by_id = {str(r["id"]): r for r in entries if isinstance(r, dict)}
        self.by_id = by_id
        self.list_error = list_error
        self.one_error = one_error
        self.list_calls = 0
        self.one_calls: list[str] = []
        self._gates: dict[str, asyncio.Event] = {key: asyncio.Event() for key in gated or ()}

    def release(self, repo_id: str) -> None:
        self._gates[repo_id].set()

    async def fetch_list(self) -> Any:
        self.list_calls += 1
        if self.list_error is not None:
            raise self.list_error
        return self.repos

    async def fetch_one(self, repo_id: Any) -> dict[str, Any] | None:
        self.one_calls.append(repo_id)
        gate = self._gates.get(repo_id)
        if gate is not None:
            await gate.wait()
        if self.one_error is not None:
            raise self.one_error
        return self.by_id.get(repo_id)


@pytest.fixture
def sample_repos() -> list[dict[str, Any]]:
    return [
        make_repo(1),
        make_repo(
            2,
            description="Test repository 2",
            language="Go",
            forks_count=8,
            open_issues_count=3,
            watchers_count=20,
            stargazers_count=25,
        ),
    ]


@pytest.fixture
def incomplete_repo() -> dict[str, Any]:
    return make_repo(
        3,
        name="incomplete-repo",
        description=None,
        language=None,
        forks_count=0,
        open_issues_count=0,
        watchers_count=0,
        stargazers_count=0,
    )
