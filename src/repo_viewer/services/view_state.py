"""Fetch lifecycle shared by every view.

A :class:`ViewStateMachine` owns exactly one :data:`ViewState` cell.  Each
activation bumps a generation counter, enters ``Loading`` synchronously and
schedules the fetch on the running event loop.  When a fetch resolves, its
result is applied only if its generation is still the current one, so a
response for a previous key (or for a view that has since been unmounted)
can never overwrite newer state.  The underlying request is not cancelled;
its effect is suppressed.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Generic, Hashable, TypeVar

from repo_viewer.domain.entities import Failure, Idle, Loading, Success, ViewState

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)

Fetch = Callable[[K], Awaitable[Any]]


class ViewStateMachine(Generic[K]):
    """``idle → loading → (success | failure)``, re-entering loading on a new key."""

    def __init__(self, fetch: Fetch[K], failure_message: str, *, name: str) -> None:
        self._fetch = fetch
        self._failure_message = failure_message
        self._name = name
        self._state: ViewState = Idle()
        self._generation = 0
        self._key: K | None = None
        self._active = False
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def key(self) -> K | None:
        return self._key

    @property
    def active(self) -> bool:
        return self._active

    def activate(self, key: K) -> asyncio.Task[None]:
        """Enter Loading for *key* and start fetching it.

        Must be called from inside a running event loop.
        """
        self._generation += 1
        generation = self._generation
        self._key = key
        self._active = True
        self._state = Loading()
        logger.debug("%s: loading %r (generation %d)", self._name, key, generation)
        self._task = asyncio.get_running_loop().create_task(self._run(generation, key))
        return self._task

    def rekey(self, key: K) -> asyncio.Task[None] | None:
        """Refetch only if *key* differs from the current one (or nothing is active)."""
        if self._active and key == self._key:
            return self._task
        return self.activate(key)

    def deactivate(self) -> None:
        """Stop accepting results; anything still in flight is discarded on arrival."""
        self._generation += 1
        self._active = False
        logger.debug("%s: deactivated (generation %d)", self._name, self._generation)

    async def settled(self) -> ViewState:
        """Wait until the current fetch has resolved and return the resulting state.

        If the key changes while waiting, waits for the newer fetch instead.
        """
        while self._task is not None and not self._task.done():
            await self._task
        return self._state

    async def _run(self, generation: int, key: K) -> None:
        try:
            result = await self._fetch(key)
        except Exception:
            logger.error("%s: error fetching %r", self._name, key, exc_info=True)
            self._apply(generation, Failure(self._failure_message))
        else:
            self._apply(generation, Success(result))

    def _apply(self, generation: int, state: ViewState) -> bool:
        if generation != self._generation:
            logger.debug(
                "%s: discarding stale %s (generation %d, current %d)",
                self._name,
                state.status.value,
                generation,
                self._generation,
            )
            return False
        self._state = state
        return True
