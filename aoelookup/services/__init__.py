"""Service layer helpers."""

from .leaderboards import (
    LEADERBOARD_LABELS,
    MatchData,
    map_leaderboards,
    match_data_to_dict,
)
from .search import (
    Error,
    Home,
    Loading,
    PlayerFocus,
    SearchFn,
    SearchSession,
    SearchSessionRegistry,
    SearchState,
    Success,
    state_to_dict,
)

__all__ = [
    "LEADERBOARD_LABELS",
    "MatchData",
    "map_leaderboards",
    "match_data_to_dict",
    "Error",
    "Home",
    "Loading",
    "PlayerFocus",
    "SearchFn",
    "SearchSession",
    "SearchSessionRegistry",
    "SearchState",
    "Success",
    "state_to_dict",
]
