"""Player search state machine.

A :class:`SearchSession` owns exactly one :data:`SearchState` value and is its
only writer. Query-change events schedule an upstream fetch as an asyncio task;
every new query bumps a generation counter and cancels the previous fetch, and
a fetch may only commit its result while its generation is still current, so
the response to the most recent query always wins.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import (
    Any,
    Awaitable,
    Callable,
    ClassVar,
    Dict,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from ..core import FetchFailed, InvalidTransition, SessionClosed, idle_cutoff, utcnow
from ..models import Player, player_to_dict
from .leaderboards import map_leaderboards, match_data_to_dict

logger = logging.getLogger(__name__)

SearchFn = Callable[[str], Awaitable[Sequence[Player]]]


@dataclass(frozen=True)
class Home:
    """No query yet."""

    kind: ClassVar[str] = "home"


@dataclass(frozen=True)
class Loading:
    """A fetch for ``query`` is in flight."""

    query: str
    kind: ClassVar[str] = "loading"


@dataclass(frozen=True)
class Success:
    """The fetch for ``query`` returned ``players`` (possibly none)."""

    query: str
    players: Tuple[Player, ...]
    kind: ClassVar[str] = "success"


@dataclass(frozen=True)
class PlayerFocus:
    """A single player picked from the results of ``query``."""

    player: Player
    query: str = ""
    players: Tuple[Player, ...] = ()
    kind: ClassVar[str] = "player_focus"


@dataclass(frozen=True)
class Error:
    """The fetch for ``query`` failed."""

    query: str
    reason: str = ""
    kind: ClassVar[str] = "error"


SearchState = Union[Home, Loading, Success, PlayerFocus, Error]


def _find_player(players: Sequence[Player], profile_id: int) -> Optional[Player]:
    for candidate in players:
        if candidate.profile_id == profile_id:
            return candidate
    return None


class SearchSession:
    """State container for one consumer of the search screen.

    ``search`` must be called from a running event loop. Calling
    ``focus_player`` outside of ``Success``, or with a player that is not part
    of the current results, raises :class:`InvalidTransition` and leaves the
    state untouched.
    """

    def __init__(self, fetch: SearchFn) -> None:
        self._fetch = fetch
        self._state: SearchState = Home()
        self._generation = 0
        self._task: Optional[asyncio.Task] = None
        self._closed = False
        self.last_seen: datetime = utcnow()

    @property
    def state(self) -> SearchState:
        return self._state

    def current_state(self) -> SearchState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def touch(self, now: Optional[datetime] = None) -> None:
        self.last_seen = now or utcnow()

    # Events -----------------------------------------------------------------

    def search(self, text: str) -> Optional[asyncio.Task]:
        """Handle a query-change event.

        Returns the scheduled fetch task, or ``None`` when the query is empty
        and the session went back to ``Home``.
        """

        self._ensure_open()
        query = (text or "").strip()
        self._generation += 1
        self._cancel_pending()

        if not query:
            self._set_state(Home())
            return None

        self._set_state(Loading(query=query))
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run_fetch(self._generation, query))
        return self._task

    def focus_player(self, player: Player) -> PlayerFocus:
        """Select ``player`` from the current results."""

        return self.focus_profile(player.profile_id)

    def focus_profile(self, profile_id: int) -> PlayerFocus:
        self._ensure_open()
        state = self._state
        if not isinstance(state, Success):
            raise InvalidTransition(
                f"Cannot focus a player while in {state.kind} state"
            )

        selected = _find_player(state.players, profile_id)
        if selected is None:
            raise InvalidTransition(
                f"Player {profile_id} is not part of the current results"
            )

        focus = PlayerFocus(player=selected, query=state.query, players=state.players)
        self._set_state(focus)
        return focus

    def back_to_results(self) -> Success:
        """Leave ``PlayerFocus`` for the result list it was picked from."""

        self._ensure_open()
        state = self._state
        if not isinstance(state, PlayerFocus):
            raise InvalidTransition(
                f"Cannot return to results while in {state.kind} state"
            )

        results = Success(query=state.query, players=state.players)
        self._set_state(results)
        return results

    async def settle(self) -> SearchState:
        """Wait until no fetch is in flight and return the resulting state."""

        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        return self._state

    def close(self) -> Optional[asyncio.Task]:
        """Cancel any in-flight fetch and reject further events.

        Returns the cancelled fetch task, if there was one, so the caller can
        wait for it to unwind.
        """

        if self._closed:
            return None
        self._closed = True
        self._generation += 1
        return self._cancel_pending()

    # Internals --------------------------------------------------------------

    async def _run_fetch(self, generation: int, query: str) -> None:
        try:
            players = await self._fetch(query)
        except asyncio.CancelledError:
            logger.debug("Search for %r cancelled", query)
            raise
        except FetchFailed as exc:
            logger.warning("Search for %r failed: %s", query, exc)
            self._commit(generation, Error(query=query, reason=str(exc)))
            return
        except Exception:
            logger.exception("Unexpected error while searching for %r", query)
            self._commit(generation, Error(query=query, reason="Unexpected error"))
            return

        self._commit(generation, Success(query=query, players=tuple(players)))

    def _commit(self, generation: int, state: SearchState) -> None:
        if generation != self._generation or self._closed:
            logger.debug(
                "Discarding stale %s result (generation %d, current %d)",
                state.kind,
                generation,
                self._generation,
            )
            return
        self._task = None
        self._set_state(state)

    def _cancel_pending(self) -> Optional[asyncio.Task]:
        task, self._task = self._task, None
        if task is None or task.done():
            return None
        task.cancel()
        return task

    def _set_state(self, state: SearchState) -> None:
        logger.debug("Search state %s -> %s", self._state.kind, state.kind)
        self._state = state

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosed("Search session is closed")


class SearchSessionRegistry:
    """Keeps one :class:`SearchSession` per consumer id."""

    def __init__(self, fetch: SearchFn, idle_timeout: float) -> None:
        self._fetch = fetch
        self._idle_timeout = timedelta(seconds=idle_timeout)
        self._sessions: Dict[str, SearchSession] = {}
        self._closing: List[asyncio.Task] = []

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sessions))

    def get_or_create(self, session_id: str) -> SearchSession:
        now = utcnow()
        self.sweep(now)

        session = self._sessions.get(session_id)
        if session is None:
            session = SearchSession(self._fetch)
            self._sessions[session_id] = session
            logger.info("Opened search session %s", session_id)
        session.touch(now)
        return session

    def discard(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        cancelled = session.close()
        self._closing = [task for task in self._closing if not task.done()]
        if cancelled is not None:
            self._closing.append(cancelled)
        logger.info("Closed search session %s", session_id)
        return True

    def sweep(self, now: Optional[datetime] = None) -> int:
        """Close sessions idle for longer than the configured timeout."""

        cutoff = idle_cutoff(self._idle_timeout, now)
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if session.last_seen < cutoff
        ]
        for session_id in expired:
            self.discard(session_id)
        return len(expired)

    async def close_all(self) -> None:
        """Close every session and wait for their cancelled fetches."""

        for session_id in list(self._sessions):
            self.discard(session_id)
        await self.drain()

    async def drain(self) -> None:
        tasks, self._closing = self._closing, []
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)


def state_to_dict(state: SearchState) -> Dict[str, Any]:
    """Serialise a search state for the rendering layer."""

    payload: Dict[str, Any] = {"state": state.kind}
    if isinstance(state, Loading):
        payload["query"] = state.query
    elif isinstance(state, Success):
        payload["query"] = state.query
        payload["players"] = [player_to_dict(player) for player in state.players]
    elif isinstance(state, PlayerFocus):
        payload["query"] = state.query
        payload["player"] = player_to_dict(state.player)
        payload["match_data"] = match_data_to_dict(
            map_leaderboards(state.player.leaderboards)
        )
    elif isinstance(state, Error):
        payload["query"] = state.query
        payload["reason"] = state.reason
    return payload


__all__ = [
    "Error",
    "Home",
    "Loading",
    "PlayerFocus",
    "SearchFn",
    "SearchSession",
    "SearchSessionRegistry",
    "SearchState",
    "Success",
    "state_to_dict",
]
