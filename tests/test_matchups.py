"""Tests for matchup previews, results, season records and scoreboards."""

import pytest

from sleeper_assistant.config import AccountRegistry
from sleeper_assistant.errors import ConfigurationError, ResolutionError
from sleeper_assistant.models import Account, LeagueBinding
from sleeper_assistant.services import IdentityResolver, MatchupService
from sleeper_assistant.services.matchups import format_record

from conftest import LEAGUE_ID, MATCHUPS, PROJECTIONS, SEASON, WEEK, install_league

PROJECTION_ROWS = [
    {"player_id": "qb1", "stats": {"pass_yd": 300, "pass_td": 2}},
    {"player_id": "qb2", "stats": {"pts_ppr": 15}},
    {"player_id": "rb1", "stats": {"rush_yd": 100, "rush_td": 1}},
]

BYES = [
    {"roster_id": 1, "matchup_id": None, "points": 90.0},
    {"roster_id": 2, "matchup_id": None, "points": 80.0},
]


def pairing(week_scores: tuple[float, float]) -> list[dict]:
    mine, theirs = week_scores
    return [
        {"roster_id": 1, "matchup_id": 1, "points": mine, "starters": ["qb1"]},
        {"roster_id": 2, "matchup_id": 1, "points": theirs, "starters": ["qb2"]},
    ]


def make_service(client, players, period_cache, settings, accounts) -> MatchupService:
    resolver = IdentityResolver(client, accounts)
    return MatchupService(client, players, period_cache, resolver, settings)


@pytest.fixture
def service(client, players, period_cache, settings, accounts) -> MatchupService:
    return make_service(client, players, period_cache, settings, accounts)


@pytest.fixture
def projections_fake(league_fake):
    league_fake.add(f"{PROJECTIONS}/{SEASON}/{WEEK}", PROJECTION_ROWS)
    return league_fake


# ==================== Preview ====================


async def test_preview_scores_starters_with_league_weights(projections_fake, service):
    preview = await service.preview(LEAGUE_ID, WEEK, 1)

    assert preview.type == "preview"
    assert preview.my_team.name == "Alice"
    assert preview.my_team.record == "3-1"
    assert [s.projected for s in preview.my_team.starters] == [20.0, 16.0]
    assert preview.my_team.projected_points == 36.0

    # No weighted categories, so the ppr total is used
    assert preview.opponent.name == "Bob"
    assert preview.opponent.projected_points == 15.0

    assert preview.win_probability == 70.6
    assert preview.recommendation == "Favored to win"
    assert preview.injury_concerns == []


async def test_preview_without_projections(league_fake, service):
    preview = await service.preview(LEAGUE_ID, WEEK, 1)

    assert preview.my_team.projected_points == 0
    assert preview.win_probability is None
    assert preview.recommendation == "Underdog"


async def test_preview_on_bye_has_no_opponent(league_fake, service):
    league_fake.core(f"/league/{LEAGUE_ID}/matchups/{WEEK}", BYES)

    preview = await service.preview(LEAGUE_ID, WEEK, 1)

    assert preview.opponent is None


async def test_preview_unknown_roster(projections_fake, service):
    with pytest.raises(ResolutionError):
        await service.preview(LEAGUE_ID, WEEK, 99)


async def test_preview_lists_injured_starters(projections_fake, service):
    projections_fake.core(
        f"/league/{LEAGUE_ID}/matchups/{WEEK}",
        [
            {"roster_id": 1, "matchup_id": 1, "starters": ["qb1", "wr2"]},
            {"roster_id": 2, "matchup_id": 1, "starters": ["qb2", "ghost"]},
        ],
    )

    preview = await service.preview(LEAGUE_ID, WEEK, 1)

    assert preview.injury_concerns == ["Puka Nacua: Questionable"]
    assert preview.opponent.starters[1].name == "Unknown"


# ==================== Configured roster ====================


async def test_my_matchup_defaults_to_current_week_preview(projections_fake, service):
    result = await service.my_matchup()

    assert result.type == "preview"
    assert result.week == WEEK
    assert result.my_team.roster_id == 1


async def test_my_matchup_for_completed_week(fake, service):
    install_league(fake, {3: pairing((100.0, 120.0))})

    result = await service.my_matchup(week=3)

    assert result.type == "historical"
    assert result.result == "LOST"
    assert result.my_score == 100.0
    assert result.opponent_score == 120.0
    assert result.opponent_roster_id == 2
    assert result.opponent_starters == ["qb2"]


async def test_my_matchup_completed_bye_week(fake, service):
    install_league(fake, {3: BYES})

    result = await service.my_matchup(week=3)

    assert result.result == "N/A"
    assert result.my_score == 90.0
    assert result.opponent_score is None
    assert result.opponent_starters is None


async def test_season_record_skips_byes(fake, service):
    install_league(
        fake,
        {
            1: pairing((110.0, 100.0)),
            2: pairing((90.0, 95.0)),
            3: BYES,
            4: pairing((100.0, 100.0)),
        },
    )

    record = await service.season_record()

    assert record.season_record == "1-1-1"
    assert [h.week for h in record.matchup_history] == [1, 2, 4]
    assert [h.result for h in record.matchup_history] == ["W", "L", "T"]
    assert record.total_points_for == 300.0
    assert record.total_points_against == 295.0
    assert record.avg_points_for == 100.0
    assert record.avg_points_against == 98.33
    assert record.consistency == 8.16
    assert record.matchup_history[1].margin == 5.0


async def test_season_record_before_any_games(fake, service):
    install_league(fake)
    fake.core("/state/nfl", {"week": 1, "season": SEASON})

    record = await service.season_record()

    assert record.season_record == "0-0"
    assert record.matchup_history == []
    assert record.consistency == 0.0


async def test_my_opponent_profile(league_fake, service, settings):
    report = await service.my_opponent(week=WEEK)

    opponent = report.opponent
    assert opponent.username == "bob"
    assert opponent.roster_id == 2
    assert opponent.record == "1-3"
    assert opponent.points_this_week == 98.2
    assert opponent.avatar_url == f"{settings.avatar_base_url}/av2"
    assert opponent.avatar_thumbnail == f"{settings.avatar_thumb_base_url}/av2"
    assert league_fake.core_count("/state/nfl") == 0


async def test_my_opponent_on_bye(fake, service):
    install_league(fake, {WEEK: BYES})

    report = await service.my_opponent()

    assert report.opponent is None
    assert report.message == "No opponent this week (bye week or playoffs)"


async def test_unconfigured_accounts(league_fake, client, players, period_cache, settings):
    service = make_service(client, players, period_cache, settings, AccountRegistry([]))

    with pytest.raises(ConfigurationError):
        await service.my_matchup()


async def test_account_without_roster(league_fake, client, players, period_cache, settings):
    accounts = AccountRegistry(
        [Account(tag="A", username="carol", leagues=[LeagueBinding(league_id=LEAGUE_ID)])]
    )
    service = make_service(client, players, period_cache, settings, accounts)

    with pytest.raises(ResolutionError) as exc_info:
        await service.season_record()

    assert exc_info.value.details == {"user": "carol", "league": LEAGUE_ID}


# ==================== Scoreboard ====================


async def test_matchup_scores_current_week(league_fake, service):
    scores = await service.matchup_scores(LEAGUE_ID, WEEK)

    assert scores.current_nfl_week == WEEK
    assert len(scores.matchups) == 1

    matchup = scores.matchups[0]
    assert matchup.status == "LIVE"
    assert matchup.team1.name == "Alice"
    assert matchup.team1.points == MATCHUPS[0]["points"]
    assert matchup.team1.starters == ["Josh Allen", "Bijan Robinson"]
    assert matchup.team2.name == "Bob"


async def test_matchup_scores_lists_unpaired_rosters_alone(fake, service):
    install_league(fake, {3: BYES})

    scores = await service.matchup_scores(LEAGUE_ID, 3)

    assert len(scores.matchups) == 2
    assert all(m.status == "FINAL" and m.team2 is None for m in scores.matchups)


async def test_matchup_scores_future_week(fake, service):
    install_league(fake, {8: []})

    scores = await service.matchup_scores(LEAGUE_ID, 8)

    assert scores.matchups == []
    assert scores.week == 8


@pytest.mark.parametrize(
    "record, expected",
    [((3, 1, 0), "3-1"), ((2, 2, 1), "2-2-1"), ((0, 0, 0), "0-0")],
)
def test_format_record(record, expected):
    assert format_record(*record) == expected
