"""Search state endpoints driven by the rendering layer."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from ...core import InvalidTransition
from ...services import SearchSession, SearchSessionRegistry, state_to_dict
from ..deps import SEARCH_SESSION_KEY, get_registry, get_search_session

router = APIRouter(prefix="/search", tags=["search"])


@router.post("")
async def submit_query(
    body: Dict[str, Any],
    wait: bool = False,
    session: SearchSession = Depends(get_search_session),
):
    """Apply a query change; an empty query returns to the home state."""

    query = body.get("query")
    if query is None:
        query = ""
    if not isinstance(query, str):
        raise HTTPException(400, "Query must be a string")

    try:
        task = session.search(query)
    except InvalidTransition as exc:
        raise HTTPException(409, str(exc)) from exc
    if wait and task is not None:
        await session.settle()
    return state_to_dict(session.state)


@router.get("/state")
async def current_state(session: SearchSession = Depends(get_search_session)):
    """Return the caller's current search state."""

    return state_to_dict(session.current_state())


@router.post("/focus")
async def focus_player(
    body: Dict[str, Any], session: SearchSession = Depends(get_search_session)
):
    """Select one player from the current results."""

    profile_id = body.get("profile_id")
    if not isinstance(profile_id, int) or isinstance(profile_id, bool):
        raise HTTPException(400, "profile_id must be an integer")

    try:
        session.focus_profile(profile_id)
    except InvalidTransition as exc:
        raise HTTPException(409, str(exc)) from exc
    return state_to_dict(session.state)


@router.post("/back")
async def back_to_results(session: SearchSession = Depends(get_search_session)):
    """Return from a focused player to the result list."""

    try:
        session.back_to_results()
    except InvalidTransition as exc:
        raise HTTPException(409, str(exc)) from exc
    return state_to_dict(session.state)


@router.delete("")
async def close_search(
    request: Request, registry: SearchSessionRegistry = Depends(get_registry)
):
    """Tear down the caller's search session."""

    session_id = request.session.pop(SEARCH_SESSION_KEY, None)
    closed = registry.discard(session_id) if session_id else False
    return {"ok": True, "closed": closed}


__all__ = ["router"]
