"""
Current-week cache for matchups, rosters and projections.

Only data for the active scoring period is cached. The whole cache shares
one timestamp: every store restamps it, and the first access after the TTL
drops every kind for every league at once.
"""

import logging
import time
from collections.abc import Awaitable, Callable, Hashable
from dataclasses import dataclass, field
from typing import Any

from sleeper_assistant.clients.sleeper import SleeperClient
from sleeper_assistant.models import MatchupEntry, ProjectionRow, Roster

logger = logging.getLogger(__name__)

MATCHUPS = "matchups"
ROSTERS = "rosters"
BULK_PROJECTIONS = "bulk_projections"
PROJECTIONS = "projections"


@dataclass
class PeriodSnapshot:
    """Everything cached for the active period."""

    matchups: dict[Hashable, list[MatchupEntry]] = field(default_factory=dict)
    rosters: dict[Hashable, list[Roster]] = field(default_factory=dict)
    bulk_projections: dict[Hashable, list[ProjectionRow]] = field(default_factory=dict)
    projections: dict[Hashable, float] = field(default_factory=dict)
    timestamp: float | None = None

    def entries(self, kind: str) -> dict[Hashable, Any]:
        return getattr(self, kind)

    def clear(self) -> None:
        self.matchups.clear()
        self.rosters.clear()
        self.bulk_projections.clear()
        self.projections.clear()


class PeriodCache:
    """
    Read-through cache valid only for the current scoring period.

    A week is active when it equals the week last observed from the state
    endpoint by the client. Requests for any other week always go upstream.
    Failed fetches are never cached.
    """

    def __init__(
        self,
        client: SleeperClient,
        ttl: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.ttl = ttl
        self._clock = clock
        self.snapshot = PeriodSnapshot()

    def is_active(self, week: int | None) -> bool:
        """True when ``week`` is the last period observed upstream."""
        return week is not None and week == self.client.current_week

    def is_fresh(self) -> bool:
        stamp = self.snapshot.timestamp
        return stamp is not None and self._clock() - stamp < self.ttl

    def sweep(self) -> None:
        """Drop everything, for all leagues, once the shared timestamp is stale."""
        if self.snapshot.timestamp is not None and not self.is_fresh():
            logger.debug("Period cache expired; clearing all leagues")
            self.snapshot.clear()
            self.snapshot.timestamp = None

    def _store(self, kind: str, key: Hashable, value: Any) -> None:
        self.snapshot.entries(kind)[key] = value
        self.snapshot.timestamp = self._clock()

    async def get_or_fetch(
        self,
        kind: str,
        key: Hashable,
        week: int | None,
        fetch: Callable[[], Awaitable[Any]],
    ) -> Any:
        """
        Return cached data for an active week, fetching and storing on a miss.

        Args:
            kind: One of matchups, rosters, bulk_projections
            key: Cache key within the kind
            week: Scoring period the data belongs to
            fetch: Coroutine factory producing the live value

        Returns:
            Cached or freshly fetched value
        """
        self.sweep()

        if not self.is_active(week):
            return await fetch()

        entries = self.snapshot.entries(kind)
        if key in entries and self.is_fresh():
            return entries[key]

        value = await fetch()
        self._store(kind, key, value)
        return value

    async def matchups(self, league_id: str, week: int) -> list[MatchupEntry]:
        return await self.get_or_fetch(
            MATCHUPS, league_id, week,
            lambda: self.client.get_matchups(league_id, week),
        )

    async def rosters(self, league_id: str, week: int | None) -> list[Roster]:
        return await self.get_or_fetch(
            ROSTERS, league_id, week,
            lambda: self.client.get_league_rosters(league_id),
        )

    async def bulk_projections(
        self, season: str, week: int, league_id: str, order_by: str = "ppr"
    ) -> list[ProjectionRow]:
        return await self.get_or_fetch(
            BULK_PROJECTIONS, (season, week, league_id), week,
            lambda: self.client.get_bulk_projections(season, week, order_by=order_by),
        )

    def remember_projection(
        self, league_id: str, player_id: str, week: int, points: float
    ) -> None:
        """Cache a league-weighted projection for the active week."""
        if self.is_active(week):
            self._store(PROJECTIONS, (league_id, player_id), points)

    def cached_projection(
        self, league_id: str, player_id: str, week: int
    ) -> float | None:
        """Return a cached league-weighted projection, if any."""
        self.sweep()
        if not self.is_active(week) or not self.is_fresh():
            return None
        return self.snapshot.projections.get((league_id, player_id))
