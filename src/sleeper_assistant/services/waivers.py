"""
Waiver Wire Service

Ranks unrostered players for a roster by trending adds, positional need
and this week's projection.
"""

import asyncio
import logging
import math

from sleeper_assistant.cache.period import PeriodCache
from sleeper_assistant.cache.players import PlayerDirectory
from sleeper_assistant.clients.sleeper import SleeperAPIError, SleeperClient
from sleeper_assistant.config import Settings
from sleeper_assistant.errors import ResolutionError
from sleeper_assistant.models import (
    FreeAgent,
    FreeAgentList,
    League,
    Roster,
    WaiverCandidate,
    WaiverRecommendations,
)
from sleeper_assistant.services.scoring import compute_points

logger = logging.getLogger(__name__)

TRENDING_LOOKBACK_HOURS = 24
TRENDING_LIMIT = 50
NEED_BONUS = 10
MAX_PROBES = 50
FREE_AGENT_LIMIT = 100
DEFAULT_LIMIT = 10


def roster_needs(league: League, roster: Roster, players: PlayerDirectory) -> list[str]:
    """
    Positions where a roster holds fewer players than recommended.

    The recommended count is one more than the number of required starters,
    or one and a half times it when that is larger.
    """
    counts: dict[str, int] = {}
    for pid in roster.players:
        pos = players.position(pid)
        if pos:
            counts[pos] = counts.get(pos, 0) + 1

    needs = []
    for pos, required in league.starter_requirements().items():
        recommended = max(required + 1, math.ceil(required * 1.5))
        if counts.get(pos, 0) < recommended:
            needs.append(pos)
    return needs


def rostered_ids(rosters: list[Roster]) -> set[str]:
    return {pid for roster in rosters for pid in roster.players}


class WaiverService:
    """Service for waiver pickups and free agent listings."""

    def __init__(
        self,
        client: SleeperClient,
        players: PlayerDirectory,
        cache: PeriodCache,
        settings: Settings,
    ):
        self.client = client
        self.players = players
        self.cache = cache
        self.settings = settings

    async def _projected(
        self, league: League, player_id: str, season: str, week: int
    ) -> float:
        """League-weighted projection for one player; 0 when the probe fails."""
        cached = self.cache.cached_projection(league.league_id, player_id, week)
        if cached is not None:
            return cached

        try:
            row = await self.client.get_player_projection(
                player_id, season, week, timeout=self.settings.projection_probe_timeout
            )
        except SleeperAPIError as e:
            logger.debug("Projection probe failed for %s: %s", player_id, e)
            return 0.0

        if row is None or not row.stats:
            return 0.0

        points = compute_points(row.stats, league.scoring_settings)
        self.cache.remember_projection(league.league_id, player_id, week, points)
        return points

    async def suggest_pickups(
        self,
        league_id: str,
        roster_id: int,
        position: str | None = None,
        limit: int = 10,
    ) -> WaiverRecommendations:
        """
        Rank waiver pickups for a roster.

        Candidates are unrostered active players. Each gets an initial score
        of trending adds / 10, plus 10 when it fills a roster need. The best
        candidates that are trending or fill a need are probed for this
        week's projection, and the final score is projection * 2 + initial.

        Args:
            league_id: Sleeper league ID
            roster_id: Roster to recommend for
            position: Only consider this position
            limit: Number of recommendations; 0 means the default of 10

        Returns:
            WaiverRecommendations
        """
        rosters, trending, state, league, _ = await asyncio.gather(
            self.client.get_league_rosters(league_id),
            self.client.get_trending_players(
                "add", lookback_hours=TRENDING_LOOKBACK_HOURS, limit=TRENDING_LIMIT
            ),
            self.client.get_nfl_state(),
            self.client.get_league(league_id),
            self.players.ensure_loaded(),
        )
        if league is None:
            raise SleeperAPIError(f"League not found: {league_id}")

        roster = next((r for r in rosters if r.roster_id == roster_id), None)
        if roster is None:
            raise ResolutionError(
                "Roster not found", {"league_id": league_id, "roster_id": roster_id}
            )

        needs = roster_needs(league, roster, self.players)
        trending_adds = {t.player_id: t.count for t in trending}
        taken = rostered_ids(rosters)

        available = []
        for pid, player in self.players.items():
            if pid in taken or player.status != "Active":
                continue
            if position and player.position != position:
                continue
            adds = trending_adds.get(pid, 0)
            fills_need = player.position in needs
            initial = adds / 10 + (NEED_BONUS if fills_need else 0)
            available.append((initial, pid, player, adds, fills_need))

        available.sort(key=lambda item: item[0], reverse=True)
        probe_count = min(MAX_PROBES, limit * 3 if limit else 30)

        candidates = []
        for initial, pid, player, adds, fills_need in available[:probe_count]:
            projection = 0.0
            if adds > 0 or fills_need:
                projection = await self._projected(league, pid, state.season, state.week)

            candidates.append(
                WaiverCandidate(
                    player_id=pid,
                    player=player.display_name,
                    position=player.position,
                    team=player.team,
                    trending_adds=adds,
                    current_week_projection=round(projection, 2),
                    fills_need=fills_need,
                    injury_status=player.injury_status or "Healthy",
                    recommendation_score=round(projection * 2 + initial, 2),
                )
            )

        candidates.sort(key=lambda c: c.recommendation_score, reverse=True)

        return WaiverRecommendations(
            roster_needs=needs,
            recommendations=candidates[: limit or DEFAULT_LIMIT],
            waiver_position=roster.waiver_position,
            waiver_budget_remaining=roster.waiver_budget_remaining,
            total_moves_made=roster.total_moves,
        )

    async def free_agents(
        self, league_id: str, position: str | None = None
    ) -> FreeAgentList:
        """
        List unrostered active players, sorted by name.

        Args:
            league_id: Sleeper league ID
            position: Only list this position

        Returns:
            FreeAgentList with at most 100 players
        """
        rosters, _ = await asyncio.gather(
            self.client.get_league_rosters(league_id),
            self.players.ensure_loaded(),
        )
        taken = rostered_ids(rosters)

        agents = [
            FreeAgent(
                player_id=pid,
                name=player.display_name,
                position=player.position,
                team=player.team,
                injury_status=player.injury_status,
            )
            for pid, player in self.players.items()
            if pid not in taken
            and player.status == "Active"
            and (not position or player.position == position)
        ]
        agents.sort(key=lambda a: a.name)

        return FreeAgentList(
            total=len(agents),
            position_filter=position or "all",
            free_agents=agents[:FREE_AGENT_LIMIT],
        )
