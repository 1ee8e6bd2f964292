"""Tests for the aoe4world client using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from aoelookup.clients import Aoe4WorldClient
from aoelookup.core import FetchFailed, PlayerNotFound

from .conftest import player_payload, rating_payload

BASE = "https://aoe4world.test/api/v0"


def _client(handler) -> Aoe4WorldClient:
    return Aoe4WorldClient(base_url=BASE, timeout=5, transport=httpx.MockTransport(handler))


class TestSearchPlayers:
    @pytest.mark.asyncio
    async def test_parses_players(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["query"] = request.url.params.get("query")
            return httpx.Response(
                200,
                json={
                    "query": "beasty",
                    "count": 2,
                    "players": [
                        player_payload(
                            1,
                            "Beasty",
                            {
                                "rm_solo": rating_payload(
                                    2100, rank_level="conqueror_3", win_rate=61.2
                                ),
                                "qm_2v2": rating_payload(1500),
                            },
                        ),
                        player_payload(2, "BeastyJr"),
                    ],
                },
            )

        players = await _client(handler).search_players("beasty")

        assert seen == {"path": "/api/v0/players/search", "query": "beasty"}
        assert [player.name for player in players] == ["Beasty", "BeastyJr"]
        assert players[0].leaderboards.rm_solo.rating == 2100
        assert players[0].leaderboards.rm_solo.rank_level == "conqueror_3"
        assert players[0].leaderboards.qm_2v2.rating == 1500
        assert players[0].leaderboards.rm_team is None
        assert players[1].leaderboards.rm_solo is None

    @pytest.mark.asyncio
    async def test_missing_players_key_is_empty(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"query": "zzz", "count": 0})

        assert await _client(handler).search_players("zzz") == []

    @pytest.mark.asyncio
    async def test_server_error_raises_fetch_failed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="maintenance")

        with pytest.raises(FetchFailed):
            await _client(handler).search_players("abc")

    @pytest.mark.asyncio
    async def test_transport_error_raises_fetch_failed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(FetchFailed):
            await _client(handler).search_players("abc")

    @pytest.mark.asyncio
    async def test_invalid_json_raises_fetch_failed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        with pytest.raises(FetchFailed):
            await _client(handler).search_players("abc")

    @pytest.mark.asyncio
    async def test_malformed_player_raises_fetch_failed(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"players": [{"name": "no id"}]})

        with pytest.raises(FetchFailed):
            await _client(handler).search_players("abc")


class TestFetchPlayer:
    @pytest.mark.asyncio
    async def test_fetches_single_player(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/v0/players/42"
            return httpx.Response(
                200, json=player_payload(42, "Hera", {"rm_team": rating_payload(1900)})
            )

        player = await _client(handler).fetch_player(42)
        assert player.profile_id == 42
        assert player.leaderboards.rm_team.rating == 1900

    @pytest.mark.asyncio
    async def test_not_found(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": "Not found"})

        with pytest.raises(PlayerNotFound):
            await _client(handler).fetch_player(404404)
