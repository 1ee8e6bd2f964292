"""Unit tests for the leaderboard mapper."""

from __future__ import annotations

from aoelookup.models import Leaderboards, RatingRecord
from aoelookup.services.leaderboards import (
    LEADERBOARD_LABELS,
    map_leaderboards,
    match_data_to_dict,
)


def _record(rating: int) -> RatingRecord:
    return RatingRecord(rating=rating)


class TestMapLeaderboards:
    def test_all_absent_reports_no_data(self) -> None:
        result = map_leaderboards(Leaderboards())
        assert result.has_data is False
        assert result.entries == ()

    def test_single_ranked_solo(self) -> None:
        result = map_leaderboards(Leaderboards(rm_solo=_record(1500)))
        assert result.has_data is True
        assert len(result.entries) == 1
        label, record = result.entries[0]
        assert label == "Ranked Solo"
        assert record.rating == 1500

    def test_order_follows_display_labels_not_input(self) -> None:
        leaderboards = Leaderboards.model_validate(
            {
                "qm_4v4": {"rating": 900},
                "rm_3v3_elo": {"rating": 1300},
                "qm_1v1": {"rating": 1000},
                "rm_solo": {"rating": 1500},
            }
        )
        labels = [label for label, _ in map_leaderboards(leaderboards).entries]
        assert labels == [
            "Ranked Solo",
            "Ranked Team 3v3",
            "Quick Match Solo",
            "Quick Match 4v4",
        ]

    def test_all_present_uses_full_label_list(self) -> None:
        leaderboards = Leaderboards(
            **{attr: _record(1000 + idx) for idx, (_, attr) in enumerate(LEADERBOARD_LABELS)}
        )
        entries = map_leaderboards(leaderboards).entries
        assert [label for label, _ in entries] == [
            "Ranked Solo",
            "Ranked Team",
            "Ranked Team 2v2",
            "Ranked Team 3v3",
            "Ranked Team 4v4",
            "Quick Match Solo",
            "Quick Match 2v2",
            "Quick Match 3v3",
            "Quick Match 4v4",
        ]
        assert [record.rating for _, record in entries] == list(range(1000, 1009))

    def test_mapping_is_idempotent(self) -> None:
        leaderboards = Leaderboards(rm_team=_record(1200), qm_2v2=_record(1100))
        assert map_leaderboards(leaderboards) == map_leaderboards(leaderboards)

    def test_unknown_payload_keys_are_ignored(self) -> None:
        leaderboards = Leaderboards.model_validate(
            {"rm_1v1": {"rating": 1}, "rm_team": {"rating": 1400}}
        )
        entries = map_leaderboards(leaderboards).entries
        assert [label for label, _ in entries] == ["Ranked Team"]


class TestMatchDataToDict:
    def test_serialises_labels_and_records(self) -> None:
        leaderboards = Leaderboards(
            rm_solo=RatingRecord(rating=1500, rank_level="gold_2", win_rate=55.1)
        )
        payload = match_data_to_dict(map_leaderboards(leaderboards))
        assert payload["has_data"] is True
        assert payload["entries"][0]["label"] == "Ranked Solo"
        assert payload["entries"][0]["record"]["rating"] == 1500
        assert payload["entries"][0]["record"]["rank_level"] == "gold_2"

    def test_no_data_payload(self) -> None:
        assert match_data_to_dict(map_leaderboards(Leaderboards())) == {
            "has_data": False,
            "entries": [],
        }
