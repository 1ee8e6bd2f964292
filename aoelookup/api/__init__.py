"""HTTP surface of the lookup service."""

from __future__ import annotations

import logging
from typing import Iterable

from fastapi import APIRouter, FastAPI

from .routers import ALL_ROUTERS

logger = logging.getLogger(__name__)


def register_routes(app: FastAPI, routers: Iterable[APIRouter] = ALL_ROUTERS) -> None:
    """Mount the search, player and system routers on ``app``."""

    for router in routers:
        app.include_router(router)
        logger.debug("Mounted %d routes with tags %s", len(router.routes), router.tags)


__all__ = ["register_routes"]
