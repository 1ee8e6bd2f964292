"""Request-scoped dependencies shared by the routers."""

from __future__ import annotations

import uuid

from fastapi import Request

from ..clients import Aoe4WorldClient
from ..services import SearchSession, SearchSessionRegistry

SEARCH_SESSION_KEY = "search_id"


def get_registry(request: Request) -> SearchSessionRegistry:
    return request.app.state.search_sessions


def get_client(request: Request) -> Aoe4WorldClient:
    return request.app.state.aoe4world


async def get_search_session(request: Request) -> SearchSession:
    """Return the caller's search session, opening one on first use."""

    session_id = request.session.get(SEARCH_SESSION_KEY)
    if not session_id:
        session_id = uuid.uuid4().hex
        request.session[SEARCH_SESSION_KEY] = session_id
    return get_registry(request).get_or_create(session_id)


__all__ = [
    "SEARCH_SESSION_KEY",
    "get_client",
    "get_registry",
    "get_search_session",
]
