"""
Lineup Evaluation Service

Scores each starter by position tier and flags bench players at the same
position who score higher.
"""

import asyncio

from sleeper_assistant.cache.players import PlayerDirectory
from sleeper_assistant.clients.sleeper import SleeperAPIError, SleeperClient
from sleeper_assistant.errors import ResolutionError
from sleeper_assistant.models import LineupEvaluation, LineupSlot

POSITION_SCORES = {"QB": 18, "RB": 13, "WR": 11, "TE": 9, "K": 8, "DEF": 8}
DEFAULT_SCORE = 8
INJURY_FACTOR = 0.5


class LineupService:
    """Service for start/sit checks on a roster."""

    def __init__(self, client: SleeperClient, players: PlayerDirectory):
        self.client = client
        self.players = players

    def player_score(self, player_id: str) -> float:
        """Position-tier score, halved for injured players; 0 when unknown."""
        player = self.players.get(player_id)
        if player is None:
            return 0.0

        score = float(POSITION_SCORES.get(player.position, DEFAULT_SCORE))
        if player.is_injured:
            score *= INJURY_FACTOR
        return score

    async def evaluate_lineup(
        self, league_id: str, roster_id: int, week: int
    ) -> LineupEvaluation:
        """
        Check a roster's starters against its bench.

        Args:
            league_id: Sleeper league ID
            roster_id: Roster to analyze
            week: Week being set

        Returns:
            LineupEvaluation with one suggestion per improvable slot
        """
        league, rosters, _ = await asyncio.gather(
            self.client.get_league(league_id),
            self.client.get_league_rosters(league_id),
            self.players.ensure_loaded(),
        )
        if league is None:
            raise SleeperAPIError(f"League not found: {league_id}")

        roster = next((r for r in rosters if r.roster_id == roster_id), None)
        if roster is None:
            raise ResolutionError(
                "Roster not found", {"league_id": league_id, "roster_id": roster_id}
            )

        bench = roster.bench
        lineup = []
        for idx, player_id in enumerate(roster.starters):
            player = self.players.get(player_id)
            score = self.player_score(player_id)

            better_options = []
            if player is not None:
                for bench_id in bench:
                    bench_player = self.players.get(bench_id)
                    if (
                        bench_player is not None
                        and bench_player.position == player.position
                        and self.player_score(bench_id) > score
                    ):
                        better_options.append(bench_player.display_name)

            lineup.append(
                LineupSlot(
                    slot=league.roster_positions[idx] if idx < len(league.roster_positions) else None,
                    player_id=player_id,
                    current=player.display_name if player else "Empty",
                    position=player.position if player else None,
                    projected=score,
                    injury_status=player.injury_status if player else None,
                    better_options=better_options,
                )
            )

        suggestions = [
            f"Consider starting {slot.better_options[0]} over {slot.current} at {slot.slot}"
            for slot in lineup
            if slot.better_options
        ]

        return LineupEvaluation(
            week=week,
            roster_id=roster_id,
            total_projected=sum(slot.projected for slot in lineup),
            lineup=lineup,
            optimization_suggestions=suggestions,
        )
