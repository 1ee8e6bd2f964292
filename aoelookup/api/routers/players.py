"""Player lookup endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ...clients import Aoe4WorldClient
from ...core import FetchFailed, PlayerNotFound
from ...models import player_to_dict
from ...services import map_leaderboards, match_data_to_dict
from ..deps import get_client

router = APIRouter(prefix="/players", tags=["players"])


@router.get("/{profile_id}/match-data")
async def player_match_data(
    profile_id: int, client: Aoe4WorldClient = Depends(get_client)
):
    """Fetch a player and return their leaderboards in display order."""

    try:
        player = await client.fetch_player(profile_id)
    except PlayerNotFound as exc:
        raise HTTPException(404, "Player not found") from exc
    except FetchFailed as exc:
        raise HTTPException(502, str(exc)) from exc

    return {
        "player": player_to_dict(player),
        "match_data": match_data_to_dict(map_leaderboards(player.leaderboards)),
    }


__all__ = ["router"]
