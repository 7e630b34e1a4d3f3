"""
League context helper.

Bundles a league with its members and rosters, and resolves roster ids to
team names and player ids to player info through the PlayerDirectory.
"""

import asyncio

from sleeper_assistant.cache.players import PlayerDirectory
from sleeper_assistant.clients.sleeper import SleeperAPIError, SleeperClient
from sleeper_assistant.models import League, Roster, User


class LeagueContext:
    """
    Helper class to hold league context and provide convenient lookups.
    """

    def __init__(
        self,
        league: League,
        users: list[User],
        rosters: list[Roster],
        players: PlayerDirectory,
    ):
        self.league = league
        self.users = users
        self.rosters = rosters
        self.players = players

        self._user_map: dict[str, User] = {u.user_id: u for u in users}
        self._roster_map: dict[int, Roster] = {r.roster_id: r for r in rosters}

    @classmethod
    async def create(
        cls,
        client: SleeperClient,
        players: PlayerDirectory,
        league_id: str,
        rosters: list[Roster] | None = None,
    ) -> "LeagueContext":
        """
        Factory method to create a LeagueContext by fetching all required data.

        Args:
            client: SleeperClient instance
            players: Player directory (loaded alongside the league data)
            league_id: Sleeper league ID
            rosters: Already-fetched rosters, e.g. from the period cache

        Returns:
            Initialized LeagueContext
        """
        if rosters is None:
            league, users, rosters, _ = await asyncio.gather(
                client.get_league(league_id),
                client.get_league_users(league_id),
                client.get_league_rosters(league_id),
                players.ensure_loaded(),
            )
        else:
            league, users, _ = await asyncio.gather(
                client.get_league(league_id),
                client.get_league_users(league_id),
                players.ensure_loaded(),
            )

        if league is None:
            raise SleeperAPIError(f"League not found: {league_id}")

        return cls(league=league, users=users, rosters=rosters, players=players)

    @property
    def league_id(self) -> str:
        return self.league.league_id

    def get_owner(self, roster_id: int) -> User | None:
        """Get the user who owns a roster."""
        roster = self._roster_map.get(roster_id)
        if roster and roster.owner_id:
            return self._user_map.get(roster.owner_id)
        return None

    def get_team_name(self, roster_id: int) -> str | None:
        """Owner display name for a roster, or None when unowned."""
        owner = self.get_owner(roster_id)
        return owner.name if owner else None

    def get_record(self, roster_id: int) -> str | None:
        roster = self._roster_map.get(roster_id)
        return roster.record if roster else None
