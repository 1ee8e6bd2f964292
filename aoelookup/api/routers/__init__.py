"""Aggregate API routers."""

from fastapi import APIRouter

from .players import router as players_router
from .search import router as search_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    search_router,
    players_router,
)

__all__ = ["ALL_ROUTERS"]
