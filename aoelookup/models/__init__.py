"""Model exports."""

from .player import Avatars, Leaderboards, Player, RatingRecord, player_to_dict

__all__ = [
    "Avatars",
    "Leaderboards",
    "Player",
    "RatingRecord",
    "player_to_dict",
]
