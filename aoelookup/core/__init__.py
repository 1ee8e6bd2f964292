"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    AOE4WORLD_API_BASE,
    AOE4WORLD_TIMEOUT,
    COOKIE_DOMAIN,
    COOKIE_SAMESITE,
    COOKIE_SECURE,
    DEBUG,
    FRONTEND_ORIGIN,
    FRONTEND_ORIGINS,
    SEARCH_SESSION_IDLE_SECONDS,
    SECRET_KEY,
)
from .exceptions import (
    AoeLookupError,
    FetchFailed,
    InvalidTransition,
    PlayerNotFound,
    SessionClosed,
)
from .logging import setup_logging
from .time import idle_cutoff, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "AOE4WORLD_API_BASE",
    "AOE4WORLD_TIMEOUT",
    "COOKIE_DOMAIN",
    "COOKIE_SAMESITE",
    "COOKIE_SECURE",
    "DEBUG",
    "FRONTEND_ORIGIN",
    "FRONTEND_ORIGINS",
    "SEARCH_SESSION_IDLE_SECONDS",
    "SECRET_KEY",
    "AoeLookupError",
    "FetchFailed",
    "InvalidTransition",
    "PlayerNotFound",
    "SessionClosed",
    "idle_cutoff",
    "setup_logging",
    "utcnow",
]
