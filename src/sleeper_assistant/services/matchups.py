"""
Matchup Analysis Service

Projected previews for upcoming weeks, actual results for completed weeks,
the season-to-date record and opponent lookups for configured rosters.
"""

import asyncio
import logging

import numpy as np

from sleeper_assistant.cache.period import PeriodCache
from sleeper_assistant.cache.players import PlayerDirectory
from sleeper_assistant.clients.sleeper import SleeperAPIError, SleeperClient
from sleeper_assistant.config import Settings
from sleeper_assistant.errors import ConfigurationError, ResolutionError
from sleeper_assistant.models import (
    HistoricalMatchup,
    MatchupEntry,
    MatchupPreview,
    MatchupScores,
    OpponentProfile,
    OpponentReport,
    Resolution,
    ScoredMatchup,
    ScoredTeam,
    SeasonRecord,
    StarterProjection,
    TeamPreview,
    WeeklyResult,
    find_pairing,
)
from sleeper_assistant.services.context import LeagueContext
from sleeper_assistant.services.identity import IdentityResolver
from sleeper_assistant.services.scoring import projection_points, scoring_format

logger = logging.getLogger(__name__)

NO_CONFIGURATION_HINT = "Set SLEEPER_USERNAME_A and SLEEPER_LEAGUE_A_ID_1 in .env"


def format_record(wins: int, losses: int, ties: int = 0) -> str:
    """W-L, with -T appended only when there are ties."""
    record = f"{wins}-{losses}"
    if ties:
        record += f"-{ties}"
    return record


def _outcome(mine: float, theirs: float) -> str:
    if mine > theirs:
        return "W"
    if mine < theirs:
        return "L"
    return "T"


class MatchupService:
    """Service for matchup previews, results and season history."""

    def __init__(
        self,
        client: SleeperClient,
        players: PlayerDirectory,
        cache: PeriodCache,
        resolver: IdentityResolver,
        settings: Settings,
    ):
        self.client = client
        self.players = players
        self.cache = cache
        self.resolver = resolver
        self.settings = settings

    async def _resolve(self, hint: str | None) -> Resolution:
        """Resolve a hint to a roster, raising when that is not possible."""
        resolution = await self.resolver.resolve(hint)
        if resolution is None:
            raise ConfigurationError(
                "No league configuration found. Please configure at least one "
                "user and league in your .env file",
                {"hint": NO_CONFIGURATION_HINT},
            )
        if resolution.roster_id is None:
            raise ResolutionError(
                "Could not find roster for user in this league",
                {
                    "user": resolution.account.username,
                    "league": resolution.league_id,
                },
            )
        return resolution

    # ==================== Preview ====================

    async def _projections(self, ctx: LeagueContext, week: int) -> dict[str, float]:
        """League-weighted projections for the week; empty when unavailable."""
        weights = ctx.league.scoring_settings
        try:
            rows = await self.cache.bulk_projections(
                ctx.league.season, week, ctx.league_id, scoring_format(weights)
            )
        except SleeperAPIError as e:
            logger.warning("Projections unavailable for week %s: %s", week, e)
            return {}

        points = projection_points(rows, weights)
        for player_id, value in points.items():
            self.cache.remember_projection(ctx.league_id, player_id, week, value)
        return points

    def _starters(
        self, starters: list[str], projections: dict[str, float]
    ) -> list[StarterProjection]:
        rows = []
        for pid in starters:
            player = self.players.get(pid)
            if player is None:
                rows.append(StarterProjection(player_id=pid, name="Unknown"))
                continue
            rows.append(
                StarterProjection(
                    player_id=pid,
                    name=player.display_name,
                    position=player.position,
                    team=player.team,
                    projected=round(projections.get(pid, 0.0), 2),
                    injury_status=player.injury_status,
                )
            )
        return rows

    def _team(
        self, ctx: LeagueContext, entry: MatchupEntry, projections: dict[str, float]
    ) -> TeamPreview:
        starters = self._starters(entry.starters, projections)
        return TeamPreview(
            name=ctx.get_team_name(entry.roster_id),
            roster_id=entry.roster_id,
            record=ctx.get_record(entry.roster_id),
            projected_points=round(sum(s.projected for s in starters), 2),
            starters=starters,
        )

    async def preview(self, league_id: str, week: int, roster_id: int) -> MatchupPreview:
        """
        Preview a roster's matchup with projected points.

        Args:
            league_id: Sleeper league ID
            week: Week to preview
            roster_id: Roster whose matchup to preview

        Returns:
            MatchupPreview; opponent is None on a bye
        """
        matchups, rosters = await asyncio.gather(
            self.cache.matchups(league_id, week),
            self.cache.rosters(league_id, week),
        )
        ctx = await LeagueContext.create(self.client, self.players, league_id, rosters)

        mine, opponent = find_pairing(matchups, roster_id)
        if mine is None:
            raise ResolutionError(
                "Matchup not found",
                {"league_id": league_id, "week": week, "roster_id": roster_id},
            )

        projections = await self._projections(ctx, week)
        my_team = self._team(ctx, mine, projections)
        opp_team = self._team(ctx, opponent, projections) if opponent else None

        my_points = my_team.projected_points
        opp_points = opp_team.projected_points if opp_team else 0.0
        total = my_points + opp_points
        win_probability = round(my_points / total * 100, 1) if total > 0 else None

        starters = my_team.starters + (opp_team.starters if opp_team else [])
        concerns = [f"{s.name}: {s.injury_status}" for s in starters if s.injury_status]

        return MatchupPreview(
            week=week,
            my_team=my_team,
            opponent=opp_team,
            win_probability=win_probability,
            injury_concerns=concerns,
            recommendation="Favored to win" if my_points > opp_points else "Underdog",
        )

    # ==================== Configured roster ====================

    async def my_matchup(
        self, week: int | None = None, hint: str | None = None
    ) -> MatchupPreview | HistoricalMatchup:
        """
        The configured roster's matchup: actual scores for a completed week,
        otherwise a projected preview.
        """
        resolution = await self._resolve(hint)
        state = await self.client.get_nfl_state()
        week = week or state.week

        if week >= state.week:
            return await self.preview(resolution.league_id, week, resolution.roster_id)

        matchups = await self.cache.matchups(resolution.league_id, week)
        mine, opponent = find_pairing(matchups, resolution.roster_id)

        if mine and opponent:
            result = {"W": "WON", "L": "LOST", "T": "TIED"}[_outcome(mine.points, opponent.points)]
        else:
            result = "N/A"

        return HistoricalMatchup(
            week=week,
            my_score=mine.points if mine else 0.0,
            opponent_score=opponent.points if opponent else None,
            opponent_roster_id=opponent.roster_id if opponent else None,
            result=result,
            my_starters=mine.starters if mine else [],
            my_starters_points=mine.starters_points if mine else [],
            opponent_starters=opponent.starters if opponent else None,
            opponent_starters_points=opponent.starters_points if opponent else None,
        )

    async def season_record(self, hint: str | None = None) -> SeasonRecord:
        """
        Walk every completed week and tally the configured roster's results.

        Weeks are fetched one at a time. Weeks without an opponent are skipped.
        """
        resolution = await self._resolve(hint)
        roster_id = resolution.roster_id
        state = await self.client.get_nfl_state()

        history = []
        for week in range(1, state.week):
            matchups = await self.cache.matchups(resolution.league_id, week)
            mine, opponent = find_pairing(matchups, roster_id)
            if mine is None or opponent is None:
                continue
            history.append(
                WeeklyResult(
                    week=week,
                    my_score=mine.points,
                    opponent_score=opponent.points,
                    opponent_roster_id=opponent.roster_id,
                    result=_outcome(mine.points, opponent.points),
                    margin=round(abs(mine.points - opponent.points), 2),
                )
            )

        wins = sum(1 for h in history if h.result == "W")
        losses = sum(1 for h in history if h.result == "L")
        ties = sum(1 for h in history if h.result == "T")
        points_for = sum(h.my_score for h in history)
        points_against = sum(h.opponent_score for h in history)
        games = len(history)

        return SeasonRecord(
            league_id=resolution.league_id,
            roster_id=roster_id,
            season_record=format_record(wins, losses, ties),
            wins=wins,
            losses=losses,
            ties=ties,
            total_points_for=round(points_for, 2),
            total_points_against=round(points_against, 2),
            avg_points_for=round(points_for / games, 2) if games else 0.0,
            avg_points_against=round(points_against / games, 2) if games else 0.0,
            consistency=round(float(np.std([h.my_score for h in history])), 2) if games else 0.0,
            matchup_history=history,
        )

    async def my_opponent(
        self, week: int | None = None, hint: str | None = None
    ) -> OpponentReport:
        """Who the configured roster plays in a week, with avatar links."""
        resolution = await self._resolve(hint)
        if not week:
            week = (await self.client.get_nfl_state()).week

        league_id = resolution.league_id
        matchups, rosters, users = await asyncio.gather(
            self.cache.matchups(league_id, week),
            self.cache.rosters(league_id, week),
            self.client.get_league_users(league_id),
        )

        _, opponent = find_pairing(matchups, resolution.roster_id)
        if opponent is None:
            return OpponentReport(
                week=week, message="No opponent this week (bye week or playoffs)"
            )

        roster = next((r for r in rosters if r.roster_id == opponent.roster_id), None)
        owner_id = roster.owner_id if roster else None
        user = next((u for u in users if owner_id and u.user_id == owner_id), None)
        avatar = user.avatar if user else None

        return OpponentReport(
            week=week,
            opponent=OpponentProfile(
                username=user.username if user else None,
                display_name=user.display_name if user else None,
                user_id=user.user_id if user else None,
                avatar_id=avatar,
                avatar_url=f"{self.settings.avatar_base_url}/{avatar}" if avatar else None,
                avatar_thumbnail=(
                    f"{self.settings.avatar_thumb_base_url}/{avatar}" if avatar else None
                ),
                roster_id=opponent.roster_id,
                record=roster.record if roster else None,
                points_this_week=opponent.points,
            ),
        )

    # ==================== Scoreboard ====================

    async def matchup_scores(self, league_id: str, week: int) -> MatchupScores:
        """
        Scores for every matchup in a week.

        Status is LIVE for the current week, FINAL for earlier weeks and
        UPCOMING for later ones. A roster without a matchup id is listed on
        its own.
        """
        matchups, rosters, users, state, _ = await asyncio.gather(
            self.client.get_matchups(league_id, week),
            self.client.get_league_rosters(league_id),
            self.client.get_league_users(league_id),
            self.client.get_nfl_state(),
            self.players.ensure_loaded(),
        )

        names: dict[int, str] = {}
        user_map = {u.user_id: u for u in users}
        for roster in rosters:
            user = user_map.get(roster.owner_id) if roster.owner_id else None
            if user:
                names[roster.roster_id] = user.name

        groups: list[list[MatchupEntry]] = []
        by_id: dict[int, list[MatchupEntry]] = {}
        for entry in matchups:
            if entry.matchup_id is None:
                groups.append([entry])
            elif entry.matchup_id in by_id:
                by_id[entry.matchup_id].append(entry)
            else:
                by_id[entry.matchup_id] = [entry]
                groups.append(by_id[entry.matchup_id])

        if week == state.week:
            status = "LIVE"
        elif week < state.week:
            status = "FINAL"
        else:
            status = "UPCOMING"

        def scored(entry: MatchupEntry) -> ScoredTeam:
            return ScoredTeam(
                name=names.get(entry.roster_id),
                roster_id=entry.roster_id,
                points=entry.points,
                starters=[self.players.name(pid) for pid in entry.starters],
            )

        return MatchupScores(
            week=week,
            current_nfl_week=state.week,
            matchups=[
                ScoredMatchup(
                    matchup_id=group[0].matchup_id,
                    team1=scored(group[0]),
                    team2=scored(group[1]) if len(group) > 1 else None,
                    status=status,
                )
                for group in groups
            ],
        )
