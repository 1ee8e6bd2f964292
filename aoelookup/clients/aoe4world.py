"""
aoe4world API Client
Player search and profile lookups against the public aoe4world API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..core import AOE4WORLD_API_BASE, AOE4WORLD_TIMEOUT, FetchFailed, PlayerNotFound
from ..models import Player

logger = logging.getLogger(__name__)


class Aoe4WorldClient:
    """Async client for the aoe4world player endpoints.

    A fresh ``httpx.AsyncClient`` is opened per call; ``transport`` lets tests
    substitute an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str = AOE4WORLD_API_BASE,
        timeout: float = AOE4WORLD_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def search_players(self, query: str) -> List[Player]:
        """Search players by name."""

        payload = await self._get_json("/players/search", params={"query": query})
        try:
            return [Player.model_validate(item) for item in payload.get("players") or []]
        except (ValidationError, AttributeError, TypeError) as exc:
            raise FetchFailed(f"Malformed search response: {exc}") from exc

    async def fetch_player(self, profile_id: int) -> Player:
        """Fetch one player's profile, including leaderboards."""

        payload = await self._get_json(f"/players/{profile_id}")
        try:
            return Player.model_validate(payload)
        except ValidationError as exc:
            raise FetchFailed(f"Malformed player response: {exc}") from exc

    async def _get_json(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, params=params or {})
        except httpx.HTTPError as exc:
            logger.warning("GET %s failed: %s", url, exc)
            raise FetchFailed(f"Request to aoe4world failed: {exc}") from exc

        if response.status_code == 404:
            raise PlayerNotFound(f"Not found: {path}")
        if response.is_error:
            raise FetchFailed(f"aoe4world returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            raise FetchFailed("aoe4world returned invalid JSON") from exc
        if not isinstance(data, dict):
            raise FetchFailed("aoe4world returned an unexpected payload")
        return data


__all__ = ["Aoe4WorldClient"]
