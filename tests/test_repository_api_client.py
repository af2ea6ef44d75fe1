"""Tests for the HTTP client behind both views."""

from __future__ import annotations

import json

import httpx
import pytest

from repo_viewer.domain.exceptions import RequestFailed
from repo_viewer.infrastructure.repository_api_client import RepositoryApiClient

from conftest import make_repo

BASE = "http://api.test/api"


def _client(handler) -> RepositoryApiClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return RepositoryApiClient(httpx.AsyncClient(transport=transport), base_url=BASE + "/")


async def test_fetch_list_returns_body_verbatim(sample_repos):
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=sample_repos)

    result = await _client(handler).fetch_list()

    assert seen == [f"{BASE}/repositories"]
    assert result == sample_repos


async def test_fetch_one_hits_repository_path():
    repo = make_repo(1)
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=repo)

    result = await _client(handler).fetch_one(1)

    assert str(seen[0].url) == f"{BASE}/repositories/1"
    assert seen[0].headers["accept"] == "application/json"
    assert result == repo


async def test_fetch_one_passes_null_through():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"null", headers={"content-type": "application/json"})

    assert await _client(handler).fetch_one("5") is None


@pytest.mark.parametrize("status", [200, 204])
async def test_empty_success_body_reads_as_none(status):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, content=b"")

    assert await _client(handler).fetch_one("5") is None


async def test_no_schema_validation_on_success():
    body = [{"id": "x", "stargazers_count": "lots"}]

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=json.dumps(body).encode())

    assert await _client(handler).fetch_list() == body


async def test_list_non_success_status_raises_request_failed():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="Internal Server Error")

    with pytest.raises(RequestFailed, match="Failed to fetch repositories") as info:
        await _client(handler).fetch_list()
    assert info.value.status_code == 500


async def test_one_not_found_raises_request_failed():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="Repository not found")

    with pytest.raises(RequestFailed, match="Failed to fetch repository") as info:
        await _client(handler).fetch_one(999)
    assert info.value.status_code == 404
    assert info.value.message == "Failed to fetch repository"


async def test_network_error_propagates_unchanged():
    error = httpx.ConnectError("Network error")

    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    with pytest.raises(httpx.ConnectError) as info:
        await _client(handler).fetch_one(1)
    assert info.value is error
