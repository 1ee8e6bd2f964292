"""Player and leaderboard models parsed from aoe4world payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class RatingRecord(SQLModel):
    """Competitive statistics for one matchmaking queue."""

    rating: int
    max_rating: Optional[int] = None
    max_rating_7d: Optional[int] = None
    max_rating_1m: Optional[int] = None
    rank: Optional[int] = None
    rank_level: Optional[str] = None
    streak: Optional[int] = None
    games_count: Optional[int] = None
    wins_count: Optional[int] = None
    losses_count: Optional[int] = None
    disputes_count: Optional[int] = None
    drops_count: Optional[int] = None
    win_rate: Optional[float] = None
    season: Optional[int] = None
    last_game_at: Optional[datetime] = None


class Leaderboards(SQLModel):
    """The nine rating categories a player may have history in."""

    rm_solo: Optional[RatingRecord] = None
    rm_team: Optional[RatingRecord] = None
    rm_2v2_elo: Optional[RatingRecord] = None
    rm_3v3_elo: Optional[RatingRecord] = None
    rm_4v4_elo: Optional[RatingRecord] = None
    qm_1v1: Optional[RatingRecord] = None
    qm_2v2: Optional[RatingRecord] = None
    qm_3v3: Optional[RatingRecord] = None
    qm_4v4: Optional[RatingRecord] = None


class Avatars(SQLModel):
    small: Optional[str] = None
    medium: Optional[str] = None
    full: Optional[str] = None


class Player(SQLModel):
    """A player as returned by the search and profile endpoints."""

    profile_id: int
    name: str
    steam_id: Optional[str] = None
    country: Optional[str] = None
    site_url: Optional[str] = None
    avatars: Optional[Avatars] = None
    last_game_at: Optional[datetime] = None
    leaderboards: Leaderboards = Field(default_factory=Leaderboards)


def player_to_dict(player: Player) -> dict:
    """Serialise a player summary for API responses."""

    return {
        "profile_id": player.profile_id,
        "name": player.name,
        "country": player.country,
        "site_url": player.site_url,
        "avatar_url": player.avatars.small if player.avatars else None,
        "last_game_at": player.last_game_at.isoformat() if player.last_game_at else None,
    }


__all__ = [
    "Avatars",
    "Leaderboards",
    "Player",
    "RatingRecord",
    "player_to_dict",
]
