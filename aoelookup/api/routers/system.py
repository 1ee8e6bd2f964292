"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...core import AOE4WORLD_API_BASE, SEARCH_SESSION_IDLE_SECONDS
from ...services import SearchSessionRegistry
from ..deps import get_registry

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/healthz")
def healthz() -> JSONResponse:
    """Kubernetes-style readiness endpoint."""

    return JSONResponse({"ok": True})


@router.get("/config")
def get_config(
    registry: SearchSessionRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {
        "aoe4world_api_base": AOE4WORLD_API_BASE,
        "search_session_idle_seconds": SEARCH_SESSION_IDLE_SECONDS,
        "open_search_sessions": len(registry),
    }


__all__ = ["router"]
