"""Tests for trade evaluation and trade target search."""

import pytest

from sleeper_assistant.errors import ResolutionError
from sleeper_assistant.models import TradeFairness
from sleeper_assistant.services.trade_analyzer import TradeAnalyzerService, classify_gap
from sleeper_assistant.services.trade_targets import TradeTargetService

from conftest import LEAGUE_ID


@pytest.fixture
def service(league_fake, client, players) -> TradeAnalyzerService:
    return TradeAnalyzerService(client, players)


async def test_lopsided_trade_is_significant(service):
    result = await service.evaluate_trade(LEAGUE_ID, 1, 2, ["qb1"], ["k1"])

    assert result.team1_value == 100
    assert result.team2_value == 50
    assert result.percent_difference == 50.0
    assert result.fairness == TradeFairness.SIGNIFICANT
    assert result.recommendation == "Team 1 wins significantly"
    assert result.team1_gives == ["Josh Allen (QB)"]
    assert result.team2_gives == ["Justin Tucker (K)"]
    assert result.team1_record == "3-1"
    assert result.team2_record == "1-3"


async def test_depth_warnings_after_trade(service):
    result = await service.evaluate_trade(LEAGUE_ID, 1, 2, ["qb1"], ["k1"])

    assert result.team1_needs == ["QB backup", "RB depth", "WR depth"]
    assert result.team2_needs == ["RB depth", "WR depth"]
    assert "Team 1 needs: QB backup, RB depth, WR depth" in result.risk_factors


async def test_injured_player_is_discounted(service):
    result = await service.evaluate_trade(LEAGUE_ID, 1, 2, ["wr2"], ["wr4"])

    assert result.team1_value == pytest.approx(49.0)
    assert result.team2_value == 70
    assert result.fairness == TradeFairness.SLIGHT
    assert result.recommendation == "Team 2 has slight advantage"
    assert "Puka Nacua has injury status: Questionable" in result.risk_factors


async def test_unknown_players_are_worth_nothing(service):
    result = await service.evaluate_trade(LEAGUE_ID, 1, 2, ["ghost"], [])

    assert result.team1_value == 0
    assert result.percent_difference == 0
    assert result.fairness == TradeFairness.FAIR
    assert result.recommendation == "Fair trade"
    assert result.team1_gives == ["ghost"]


async def test_unknown_roster_raises(service):
    with pytest.raises(ResolutionError):
        await service.evaluate_trade(LEAGUE_ID, 1, 99, ["qb1"], ["k1"])


@pytest.mark.parametrize(
    "values, fairness",
    [
        ((100, 90), TradeFairness.FAIR),
        ((100, 85), TradeFairness.FAIR),
        ((100, 80), TradeFairness.SLIGHT),
        ((100, 70), TradeFairness.SLIGHT),
        ((100, 69), TradeFairness.SIGNIFICANT),
    ],
)
def test_fairness_buckets(values, fairness):
    assert classify_gap(*values)[1] == fairness


async def test_trade_targets_at_positions_of_need(league_fake, client, players):
    report = await TradeTargetService(client, players).find_targets(LEAGUE_ID, 2)

    assert report.position_needs == ["RB", "WR", "QB", "TE"]
    assert report.current_roster == {"QB": 1, "RB": 1, "WR": 1, "TE": 1, "K": 1}
    assert len(report.trade_targets) == 1

    target = report.trade_targets[0]
    assert target.roster_id == 1
    assert target.potential_targets["QB"] == ["Josh Allen"]
    assert target.potential_targets["RB"] == ["Bijan Robinson", "Breece Hall", "James Cook"]


async def test_every_thin_position_is_a_need(league_fake, client, players):
    report = await TradeTargetService(client, players).find_targets(LEAGUE_ID, 1)

    assert report.position_needs == ["RB", "WR", "QB", "TE"]
    assert report.trade_targets[0].potential_targets["TE"] == ["Trey McBride"]
    assert "K" not in report.trade_targets[0].potential_targets
