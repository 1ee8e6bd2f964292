"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from .api import register_routes
from .clients import Aoe4WorldClient
from .core import (
    ALLOWED_CORS_ORIGINS,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    SEARCH_SESSION_IDLE_SECONDS,
    SECRET_KEY,
    setup_logging,
)
from .services import SearchSessionRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.search_sessions.close_all()
    logger.info("Closed all search sessions")


def create_app(client: Optional[Aoe4WorldClient] = None) -> FastAPI:
    setup_logging()
    app = FastAPI(title="AoE Lookup API", version="0.1.0", lifespan=lifespan)

    client = client or Aoe4WorldClient()
    app.state.aoe4world = client
    app.state.search_sessions = SearchSessionRegistry(
        client.search_players, idle_timeout=SEARCH_SESSION_IDLE_SECONDS
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=SECRET_KEY,
        session_cookie="sid",
        https_only=COOKIE_SECURE,
        same_site=COOKIE_SAMESITE,
        domain=COOKIE_DOMAIN,
    )

    register_routes(app)
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("aoelookup.app:create_app", factory=True, host="127.0.0.1", port=3000, reload=True)
