"""Domain exception hierarchy.

Adapters raise these; views catch every fetch error at their boundary and
turn it into a rendered failure state.  Network-level failures are not
wrapped: ``httpx.TransportError`` reaches the view unchanged.
"""

from __future__ import annotations


class RepoViewerError(Exception):
    """Base exception for the entire application."""


# ── Repositories API errors ─────────────────────────────────────────────────


class RequestFailed(RepoViewerError):
    """The repositories API answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status_code})"


# ── Routing errors ──────────────────────────────────────────────────────────


class NoActiveView(RepoViewerError):
    """A view was requested before anything was navigated to."""
