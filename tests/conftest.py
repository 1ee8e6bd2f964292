"""Shared fixtures for the test suite."""

from __future__ import annotations

import os

os.environ.setdefault("SECRET_KEY", "test-secret")

from typing import Any, Dict, Optional  # noqa: E402

import pytest  # noqa: E402

from aoelookup.models import Player  # noqa: E402


def rating_payload(rating: int, **extra: Any) -> Dict[str, Any]:
    return {"rating": rating, **extra}


def player_payload(
    profile_id: int,
    name: str,
    leaderboards: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    return {
        "name": name,
        "profile_id": profile_id,
        "steam_id": f"7656119{profile_id:010d}",
        "country": "de",
        "site_url": f"https://aoe4world.com/players/{profile_id}",
        "avatars": {"small": f"https://avatars.example/{profile_id}.jpg"},
        "leaderboards": leaderboards or {},
    }


def make_player(profile_id: int, name: str, **leaderboards: Any) -> Player:
    return Player.model_validate(player_payload(profile_id, name, leaderboards))


@pytest.fixture
def players():
    return [
        make_player(1, "Beasty", rm_solo=rating_payload(2100)),
        make_player(2, "MarineLorD", rm_team=rating_payload(1800)),
        make_player(3, "DeMusliM"),
    ]
