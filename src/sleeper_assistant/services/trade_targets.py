"""
Trade target search.

Finds other rosters holding players at the positions a roster is short on.
"""

import asyncio

from sleeper_assistant.cache.players import PlayerDirectory
from sleeper_assistant.clients.sleeper import SleeperClient
from sleeper_assistant.errors import ResolutionError
from sleeper_assistant.models import Roster, TradeTarget, TradeTargetReport

# Position -> minimum rostered count before it counts as a need
MINIMUM_DEPTH = {"RB": 4, "WR": 4, "QB": 2, "TE": 2}


class TradeTargetService:
    """Service for locating trade partners by positional need."""

    def __init__(self, client: SleeperClient, players: PlayerDirectory):
        self.client = client
        self.players = players

    def position_counts(self, roster: Roster) -> dict[str, int]:
        counts: dict[str, int] = {}
        for pid in roster.players:
            pos = self.players.position(pid)
            if pos:
                counts[pos] = counts.get(pos, 0) + 1
        return counts

    async def find_targets(self, league_id: str, roster_id: int) -> TradeTargetReport:
        """
        List players on other rosters at this roster's positions of need.

        Args:
            league_id: Sleeper league ID
            roster_id: Roster looking to trade

        Returns:
            TradeTargetReport
        """
        rosters, _ = await asyncio.gather(
            self.client.get_league_rosters(league_id),
            self.players.ensure_loaded(),
        )

        roster = next((r for r in rosters if r.roster_id == roster_id), None)
        if roster is None:
            raise ResolutionError(
                "Roster not found", {"league_id": league_id, "roster_id": roster_id}
            )

        counts = self.position_counts(roster)
        needs = [
            pos for pos, minimum in MINIMUM_DEPTH.items() if counts.get(pos, 0) < minimum
        ]

        targets = []
        for other in rosters:
            if other.roster_id == roster_id:
                continue

            by_position: dict[str, list[str]] = {}
            for pid in other.players:
                player = self.players.get(pid)
                if player and player.position in needs:
                    by_position.setdefault(player.position, []).append(player.display_name)

            if by_position:
                targets.append(
                    TradeTarget(
                        roster_id=other.roster_id,
                        record=other.record,
                        potential_targets=by_position,
                    )
                )

        return TradeTargetReport(
            your_roster_id=roster_id,
            position_needs=needs,
            current_roster=counts,
            trade_targets=targets,
        )
