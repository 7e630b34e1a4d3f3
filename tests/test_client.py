"""Tests for the Sleeper API client."""

import httpx
import pytest

from sleeper_assistant.clients import RequestPacer, SleeperAPIError, SleeperClient

from conftest import PROJECTIONS, SEASON, WEEK


async def test_non_success_status_raises(fake, client):
    fake.core("/league/L1", {"error": "boom"}, status=500)

    with pytest.raises(SleeperAPIError) as exc_info:
        await client.get_league("L1")

    assert exc_info.value.status_code == 500


async def test_unknown_resource_raises(client):
    with pytest.raises(SleeperAPIError) as exc_info:
        await client.get_league("missing")

    assert exc_info.value.status_code == 404


async def test_null_body_is_none(fake, client):
    fake.core("/league/L1", None)

    assert await client.get_league("L1") is None


async def test_malformed_json_raises(fake, client):
    fake.core("/league/L1", b"<html>oops</html>")

    with pytest.raises(SleeperAPIError, match="Malformed"):
        await client.get_league("L1")


async def test_unexpected_shape_raises(fake, client):
    fake.core("/league/L1", {"unexpected": True})

    with pytest.raises(SleeperAPIError, match="Unexpected response shape"):
        await client.get_league("L1")


async def test_network_error_raises(fake, client):
    fake.core("/state/nfl", httpx.ConnectError("connection refused"))

    with pytest.raises(SleeperAPIError) as exc_info:
        await client.get_nfl_state()

    assert exc_info.value.status_code is None


async def test_state_is_remembered(league_fake, client):
    assert client.current_week is None

    state = await client.get_nfl_state()

    assert state.week == WEEK
    assert client.current_week == WEEK
    assert await client.get_current_season() == SEASON
    assert league_fake.core_count("/state/nfl") == 1


async def test_malformed_list_records_skipped(fake, client):
    fake.core("/league/L1/rosters", [{"roster_id": 1, "players": None}, {"owner_id": "u1"}])

    rosters = await client.get_league_rosters("L1")

    assert [r.roster_id for r in rosters] == [1]
    assert rosters[0].players == []


async def test_transactions_keep_known_types_and_statuses(fake, client):
    fake.core(
        "/league/L1/transactions/3",
        [
            {"transaction_id": "t1", "type": "trade", "status": "complete", "roster_ids": [1, 2]},
            {"transaction_id": "t2", "type": "mystery", "status": "complete"},
            {"transaction_id": "t3", "type": "waiver", "status": "vetoed"},
            {"type": "free_agent", "status": "complete"},
        ],
    )

    transactions = await client.get_transactions("L1", 3)

    assert [t.transaction_id for t in transactions] == ["t1"]
    assert transactions[0].week == 3
    assert transactions[0].is_trade


async def test_bulk_projection_query(fake, client):
    fake.add(f"{PROJECTIONS}/{SEASON}/{WEEK}", [{"player_id": "qb1", "stats": {"pts_ppr": 20}}])

    rows = await client.get_bulk_projections(SEASON, WEEK, order_by="half_ppr")

    params = fake.requests[-1].url.params
    assert params.get_list("position[]") == ["QB", "RB", "WR", "TE", "FLEX"]
    assert params["order_by"] == "half_ppr"
    assert params["season_type"] == "regular"
    assert rows[0].stats == {"pts_ppr": 20}


async def test_weekly_projections_use_core_api(fake, client):
    fake.core(f"/projections/nfl/{SEASON}/{WEEK}", [])

    assert await client.get_weekly_projections(SEASON, WEEK, "RB") == []
    assert fake.requests[-1].url.params["position"] == "RB"


async def test_client_requires_context(settings):
    client = SleeperClient(settings, pacer=RequestPacer(0))

    with pytest.raises(RuntimeError):
        await client.get_nfl_state()


@pytest.mark.parametrize(
    "path, payload, fetch",
    [
        ("/players/nfl", [1, 2, 3], lambda c: c.get_all_players()),
        ("/league/L1/rosters", {"roster_id": 1}, lambda c: c.get_league_rosters("L1")),
        ("/league/L1/transactions/3", {"t1": {}}, lambda c: c.get_transactions("L1", 3)),
        ("/stats/nfl/player/qb1", [], lambda c: c.get_player_stats("qb1", SEASON, by_week=True)),
    ],
)
async def test_wrong_container_shape_raises(fake, client, path, payload, fetch):
    fake.core(path, payload)

    with pytest.raises(SleeperAPIError, match="Unexpected response shape"):
        await fetch(client)


async def test_non_object_transactions_skipped(fake, client):
    fake.core(
        "/league/L1/transactions/3",
        ["junk", {"transaction_id": "t1", "type": "waiver", "status": "complete"}],
    )

    transactions = await client.get_transactions("L1", 3)

    assert [t.transaction_id for t in transactions] == ["t1"]
