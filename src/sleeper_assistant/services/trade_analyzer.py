"""
Trade Analysis Service

Values both sides of a trade by position tier and checks whether either
roster is left thin at a position afterwards.
"""

import asyncio

from sleeper_assistant.cache.players import PlayerDirectory
from sleeper_assistant.clients.sleeper import SleeperClient
from sleeper_assistant.errors import ResolutionError
from sleeper_assistant.models import Roster, TradeEvaluation, TradeFairness

POSITION_VALUES = {"QB": 100, "RB": 80, "WR": 70, "TE": 60}
DEFAULT_VALUE = 50
INJURY_DISCOUNT = 0.7

# Position -> (minimum count after the trade, warning)
DEPTH_THRESHOLDS = {
    "QB": (2, "QB backup"),
    "RB": (4, "RB depth"),
    "WR": (5, "WR depth"),
}
DEPTH_POSITIONS = ["QB", "RB", "WR", "TE"]


def classify_gap(value_1: float, value_2: float) -> tuple[float, TradeFairness]:
    """Percent gap relative to the larger side, and its fairness bucket."""
    larger = max(value_1, value_2)
    percent = abs(value_1 - value_2) / larger * 100 if larger > 0 else 0.0

    if percent > 30:
        return percent, TradeFairness.SIGNIFICANT
    if percent > 15:
        return percent, TradeFairness.SLIGHT
    return percent, TradeFairness.FAIR


class TradeAnalyzerService:
    """
    Service for position-tier trade evaluation.

    Values are fixed per position (QB 100, RB 80, WR 70, TE 60, others 50)
    and discounted to 70% for players with an injury designation. Players
    missing from the directory are worth nothing.
    """

    def __init__(self, client: SleeperClient, players: PlayerDirectory):
        self.client = client
        self.players = players

    def player_value(self, player_id: str) -> float:
        """Position-tier value of one player."""
        player = self.players.get(player_id)
        if player is None:
            return 0.0

        value = float(POSITION_VALUES.get(player.position, DEFAULT_VALUE))
        if player.is_injured:
            value *= INJURY_DISCOUNT
        return value

    def _label(self, player_id: str) -> str:
        player = self.players.get(player_id)
        return player.label if player else player_id

    def _count_at(self, player_ids: list[str], position: str) -> int:
        return sum(1 for pid in player_ids if self.players.position(pid) == position)

    def positional_needs(
        self, roster: Roster, giving: list[str], receiving: list[str]
    ) -> list[str]:
        """Depth warnings for a roster after the swap."""
        needs = []
        for pos in DEPTH_POSITIONS:
            after = (
                self._count_at(roster.players, pos)
                - self._count_at(giving, pos)
                + self._count_at(receiving, pos)
            )
            if pos in DEPTH_THRESHOLDS:
                minimum, warning = DEPTH_THRESHOLDS[pos]
                if after < minimum:
                    needs.append(warning)
        return needs

    async def evaluate_trade(
        self,
        league_id: str,
        roster_id_1: int,
        roster_id_2: int,
        players_from_1: list[str],
        players_from_2: list[str],
    ) -> TradeEvaluation:
        """
        Evaluate a two-team trade.

        Args:
            league_id: Sleeper league ID
            roster_id_1: First roster in the trade
            roster_id_2: Second roster in the trade
            players_from_1: Player IDs going from roster 1 to roster 2
            players_from_2: Player IDs going from roster 2 to roster 1

        Returns:
            TradeEvaluation
        """
        rosters, _ = await asyncio.gather(
            self.client.get_league_rosters(league_id),
            self.players.ensure_loaded(),
        )

        roster_1 = next((r for r in rosters if r.roster_id == roster_id_1), None)
        roster_2 = next((r for r in rosters if r.roster_id == roster_id_2), None)
        if roster_1 is None or roster_2 is None:
            raise ResolutionError(
                "Invalid roster IDs",
                {"league_id": league_id, "roster_ids": [roster_id_1, roster_id_2]},
            )

        team1_value = sum(self.player_value(pid) for pid in players_from_1)
        team2_value = sum(self.player_value(pid) for pid in players_from_2)
        percent, fairness = classify_gap(team1_value, team2_value)

        risk_factors = []
        for pid in [*players_from_1, *players_from_2]:
            player = self.players.get(pid)
            if player and player.is_injured:
                risk_factors.append(
                    f"{player.display_name} has injury status: {player.injury_status}"
                )

        team1_needs = self.positional_needs(roster_1, players_from_1, players_from_2)
        team2_needs = self.positional_needs(roster_2, players_from_2, players_from_1)
        if team1_needs:
            risk_factors.append(f"Team 1 needs: {', '.join(team1_needs)}")
        if team2_needs:
            risk_factors.append(f"Team 2 needs: {', '.join(team2_needs)}")

        favored = "Team 1" if team1_value > team2_value else "Team 2"
        if fairness == TradeFairness.SIGNIFICANT:
            recommendation = f"{favored} wins significantly"
        elif fairness == TradeFairness.SLIGHT:
            recommendation = f"{favored} has slight advantage"
        else:
            recommendation = "Fair trade"

        return TradeEvaluation(
            team1_gives=[self._label(pid) for pid in players_from_1],
            team2_gives=[self._label(pid) for pid in players_from_2],
            team1_value=team1_value,
            team2_value=team2_value,
            value_difference=abs(team1_value - team2_value),
            percent_difference=round(percent, 1),
            fairness=fairness,
            recommendation=recommendation,
            risk_factors=risk_factors,
            team1_needs=team1_needs,
            team2_needs=team2_needs,
            team1_record=roster_1.record,
            team2_record=roster_2.record,
        )
