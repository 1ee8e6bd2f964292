"""Turn a player's leaderboard aggregate into a display-ordered list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..models import Leaderboards, RatingRecord

# Display order; not the field order of the payload.
LEADERBOARD_LABELS: Tuple[Tuple[str, str], ...] = (
    ("Ranked Solo", "rm_solo"),
    ("Ranked Team", "rm_team"),
    ("Ranked Team 2v2", "rm_2v2_elo"),
    ("Ranked Team 3v3", "rm_3v3_elo"),
    ("Ranked Team 4v4", "rm_4v4_elo"),
    ("Quick Match Solo", "qm_1v1"),
    ("Quick Match 2v2", "qm_2v2"),
    ("Quick Match 3v3", "qm_3v3"),
    ("Quick Match 4v4", "qm_4v4"),
)


@dataclass(frozen=True)
class MatchData:
    """Labelled rating records for the categories a player has played."""

    entries: Tuple[Tuple[str, RatingRecord], ...]

    @property
    def has_data(self) -> bool:
        return bool(self.entries)


def map_leaderboards(leaderboards: Leaderboards) -> MatchData:
    """Pair each present rating record with its label, in display order."""

    entries = []
    for label, attr in LEADERBOARD_LABELS:
        record = getattr(leaderboards, attr)
        if record is not None:
            entries.append((label, record))
    return MatchData(entries=tuple(entries))


def match_data_to_dict(match_data: MatchData) -> Dict[str, Any]:
    """Serialise mapped leaderboards to an API-friendly dict."""

    return {
        "has_data": match_data.has_data,
        "entries": [
            {"label": label, "record": record.model_dump(mode="json")}
            for label, record in match_data.entries
        ],
    }


__all__ = [
    "LEADERBOARD_LABELS",
    "MatchData",
    "map_leaderboards",
    "match_data_to_dict",
]
