"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypedDict, Union


class RepositoryPayload(TypedDict, total=False):
    """A repository exactly as the API returns it.

    Nothing is validated on fetch: missing or malformed fields show up as
    display fallbacks when a view renders them.
    """

    id: int
    name: str
    full_name: str
    description: str | None
    html_url: str
    language: str | None
    forks_count: int
    open_issues_count: int
    watchers_count: int
    stargazers_count: int


# ── View state (tagged union) ───────────────────────────────────────────────


class ViewStatus(str, Enum):
    """Discriminator of :data:`ViewState`."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class Idle:
    """Nothing requested yet."""

    status: ViewStatus = ViewStatus.IDLE


@dataclass(frozen=True, slots=True)
class Loading:
    """A request is in flight; no payload or error is held."""

    status: ViewStatus = ViewStatus.LOADING


@dataclass(frozen=True, slots=True)
class Success:
    """The request resolved; ``payload`` is the parsed response body (may be ``None``)."""

    payload: Any
    status: ViewStatus = ViewStatus.SUCCESS


@dataclass(frozen=True, slots=True)
class Failure:
    """The request failed; ``message`` is the user-facing text."""

    message: str
    status: ViewStatus = ViewStatus.FAILURE


ViewState = Union[Idle, Loading, Success, Failure]


# ── Screens (what a view presents) ──────────────────────────────────────────


class ScreenKind(str, Enum):
    """Which template presents a screen."""

    LOADING = "loading"
    ERROR = "error"
    NOT_FOUND = "not_found"
    LIST = "list"
    DETAIL = "detail"


@dataclass(frozen=True, slots=True)
class Metric:
    """One labelled statistic, already formatted for display."""

    label: str
    value: str
    icon: str = ""


@dataclass(frozen=True, slots=True)
class RepositoryCard:
    """One entry of the repository list."""

    key: str
    name: str
    description: str
    language: str
    metrics: tuple[Metric, ...]
    detail_path: str


@dataclass(frozen=True, slots=True)
class ExternalLink:
    """Outbound link opened in a new browsing context without an opener reference."""

    href: str
    text: str
    target: str = "_blank"
    rel: str = "noopener noreferrer"


@dataclass(frozen=True, slots=True)
class RepositoryDetail:
    """Fields of the repository detail page."""

    name: str
    description: str
    language: str
    metrics: tuple[Metric, ...]
    link: ExternalLink
    back_path: str = "/"
    back_text: str = "← Back to Repositories"


@dataclass(frozen=True, slots=True)
class Screen:
    """Immutable view model returned by a view's ``render()``."""

    kind: ScreenKind
    message: str | None = None
    heading: str | None = None
    cards: tuple[RepositoryCard, ...] = ()
    detail: RepositoryDetail | None = None

    @property
    def template_name(self) -> str:
        return f"{self.kind.value}.html"
