"""
Async Sleeper API Client

Handles all API interactions with the Sleeper Fantasy Football platform.
Uses httpx for async HTTP requests with connection pooling. Every request
waits on the shared RequestPacer first.

API Documentation: https://docs.sleeper.com/
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from sleeper_assistant.clients.pacer import RequestPacer
from sleeper_assistant.config import Settings, get_settings
from sleeper_assistant.models import (
    BracketMatchup,
    Draft,
    DraftSelection,
    League,
    MatchupEntry,
    NFLState,
    Player,
    PlayerStatLine,
    ProjectionRow,
    Roster,
    TradedPick,
    Transaction,
    TransactionStatus,
    TransactionType,
    TrendingPlayer,
    User,
)

logger = logging.getLogger(__name__)

PROJECTION_POSITIONS = ["QB", "RB", "WR", "TE", "FLEX"]


class SleeperAPIError(Exception):
    """Exception raised for Sleeper API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class SleeperClient:
    """
    Async client for the Sleeper Fantasy Football API.

    Usage:
        async with SleeperClient() as client:
            user = await client.get_user("username")
            leagues = await client.get_user_leagues(user.user_id, 2024)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        pacer: RequestPacer | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self.pacer = pacer or RequestPacer(self.settings.request_interval)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        # Last season state observed from /state/nfl
        self.state: NFLState | None = None

    async def __aenter__(self) -> "SleeperClient":
        """Create HTTP client on context entry."""
        self._client = httpx.AsyncClient(
            base_url=self.settings.sleeper_base_url,
            timeout=httpx.Timeout(self.settings.sleeper_timeout),
            headers={"Accept": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close HTTP client on context exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client, raising if not initialized."""
        if self._client is None:
            raise RuntimeError(
                "SleeperClient must be used as async context manager: "
                "async with SleeperClient() as client: ..."
            )
        return self._client

    @property
    def current_week(self) -> int | None:
        return self.state.week if self.state else None

    @property
    def current_season(self) -> str | None:
        return self.state.season if self.state else None

    async def _get(
        self,
        endpoint: str,
        params: Any = None,
        timeout: float | None = None,
    ) -> Any:
        """Make a paced GET request and return decoded JSON."""
        await self.pacer.wait()

        kwargs: dict[str, Any] = {}
        if params is not None:
            kwargs["params"] = params
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = await self.client.get(endpoint, **kwargs)
        except httpx.HTTPError as e:
            raise SleeperAPIError(f"API request failed: {endpoint} ({e})") from e

        if not response.is_success:
            raise SleeperAPIError(
                f"API request failed: {endpoint}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise SleeperAPIError(
                f"Malformed response from {endpoint}",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _expect(data: Any, kind: type, endpoint: str) -> Any:
        """Check a payload is the expected JSON container; null becomes empty."""
        if data is None:
            return kind()
        if not isinstance(data, kind):
            raise SleeperAPIError(f"Unexpected response shape from {endpoint}")
        return data

    @classmethod
    def _parse_list(cls, model, data: Any, endpoint: str = "") -> list:
        """Validate a list payload, skipping malformed records."""
        items = []
        for raw in cls._expect(data, list, endpoint or f"{model.__name__} list"):
            try:
                items.append(model.model_validate(raw))
            except ValidationError as e:
                logger.debug("Skipping malformed %s record: %s", model.__name__, e)
        return items

    @staticmethod
    def _parse(model, data: Any, endpoint: str):
        """Validate a single-object payload."""
        if data is None:
            return None
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise SleeperAPIError(f"Unexpected response shape from {endpoint}") from e

    # ==================== User Endpoints ====================

    async def get_user(self, username: str) -> User | None:
        """
        Get user information by username or user_id.

        Args:
            username: Sleeper username or user ID

        Returns:
            User object or None if not found
        """
        endpoint = f"/user/{username}"
        return self._parse(User, await self._get(endpoint), endpoint)

    async def get_user_leagues(
        self, user_id: str, season: str | int, sport: str = "nfl"
    ) -> list[League]:
        """
        Get all leagues for a user in a given season.

        Args:
            user_id: Sleeper user ID
            season: Season year (e.g., 2024)
            sport: Sport type (default: nfl)

        Returns:
            List of League objects
        """
        data = await self._get(f"/user/{user_id}/leagues/{sport}/{season}")
        return self._parse_list(League, data)

    async def get_user_drafts(
        self, user_id: str, season: str | int, sport: str = "nfl"
    ) -> list[Draft]:
        """Get all drafts for a user in a given season."""
        data = await self._get(f"/user/{user_id}/drafts/{sport}/{season}")
        return self._parse_list(Draft, data)

    # ==================== League Endpoints ====================

    async def get_league(self, league_id: str) -> League | None:
        """
        Get league information.

        Args:
            league_id: Sleeper league ID

        Returns:
            League object or None if not found
        """
        endpoint = f"/league/{league_id}"
        return self._parse(League, await self._get(endpoint), endpoint)

    async def get_league_rosters(self, league_id: str) -> list[Roster]:
        """
        Get all rosters in a league.

        Args:
            league_id: Sleeper league ID

        Returns:
            List of Roster objects
        """
        data = await self._get(f"/league/{league_id}/rosters")
        return self._parse_list(Roster, data)

    async def get_league_users(self, league_id: str) -> list[User]:
        """
        Get all users in a league.

        Args:
            league_id: Sleeper league ID

        Returns:
            List of User objects
        """
        data = await self._get(f"/league/{league_id}/users")
        return self._parse_list(User, data)

    async def get_league_traded_picks(self, league_id: str) -> list[TradedPick]:
        """Get all traded draft picks in a league."""
        data = await self._get(f"/league/{league_id}/traded_picks")
        return self._parse_list(TradedPick, data)

    async def get_winners_bracket(self, league_id: str) -> list[BracketMatchup]:
        """Get the playoff winners bracket."""
        data = await self._get(f"/league/{league_id}/winners_bracket")
        return self._parse_list(BracketMatchup, data)

    async def get_losers_bracket(self, league_id: str) -> list[BracketMatchup]:
        """Get the playoff losers bracket."""
        data = await self._get(f"/league/{league_id}/losers_bracket")
        return self._parse_list(BracketMatchup, data)

    # ==================== Matchup Endpoints ====================

    async def get_matchups(self, league_id: str, week: int) -> list[MatchupEntry]:
        """
        Get matchups for a specific week.

        Args:
            league_id: Sleeper league ID
            week: Week number

        Returns:
            List of MatchupEntry objects, one per roster
        """
        data = await self._get(f"/league/{league_id}/matchups/{week}")
        return self._parse_list(MatchupEntry, data)

    # ==================== Transaction Endpoints ====================

    async def get_transactions(self, league_id: str, week: int) -> list[Transaction]:
        """
        Get transactions for a specific week (round).

        Args:
            league_id: Sleeper league ID
            week: Week/round number

        Returns:
            List of Transaction objects
        """
        endpoint = f"/league/{league_id}/transactions/{week}"
        data = self._expect(await self._get(endpoint), list, endpoint)

        known_types = {t.value for t in TransactionType}
        known_statuses = {s.value for s in TransactionStatus}

        transactions = []
        for txn in data:
            if not isinstance(txn, dict):
                continue
            if txn.get("type") not in known_types:
                continue
            if txn.get("status") not in known_statuses:
                continue
            try:
                transactions.append(Transaction.model_validate({**txn, "week": week}))
            except ValidationError as e:
                logger.debug("Skipping malformed transaction: %s", e)

        return transactions

    # ==================== Draft Endpoints ====================

    async def get_league_drafts(self, league_id: str) -> list[Draft]:
        """
        Get all drafts for a league.

        Args:
            league_id: Sleeper league ID

        Returns:
            List of Draft objects
        """
        data = await self._get(f"/league/{league_id}/drafts")
        return self._parse_list(Draft, data)

    async def get_draft(self, draft_id: str) -> Draft | None:
        """
        Get specific draft information.

        Args:
            draft_id: Sleeper draft ID

        Returns:
            Draft or None
        """
        endpoint = f"/draft/{draft_id}"
        return self._parse(Draft, await self._get(endpoint), endpoint)

    async def get_draft_picks(self, draft_id: str) -> list[DraftSelection]:
        """
        Get all picks in a draft.

        Args:
            draft_id: Sleeper draft ID

        Returns:
            List of DraftSelection objects
        """
        data = await self._get(f"/draft/{draft_id}/picks")
        return self._parse_list(DraftSelection, data)

    async def get_draft_traded_picks(self, draft_id: str) -> list[TradedPick]:
        """Get all traded picks in a draft."""
        data = await self._get(f"/draft/{draft_id}/traded_picks")
        return self._parse_list(TradedPick, data)

    # ==================== Player Endpoints ====================

    async def get_all_players(self, sport: str = "nfl") -> dict[str, Player]:
        """
        Get the full player catalog.

        This endpoint returns a large payload (~15MB); callers should go
        through PlayerDirectory rather than calling this repeatedly.

        Returns:
            Dict mapping player_id to Player object
        """
        endpoint = f"/players/{sport}"
        data = self._expect(await self._get(endpoint), dict, endpoint)

        players: dict[str, Player] = {}
        skipped = 0
        for player_id, player_data in data.items():
            try:
                players[player_id] = Player.model_validate(
                    {**player_data, "player_id": player_id}
                )
            except (ValidationError, TypeError):
                skipped += 1
        if skipped:
            logger.debug("Skipped %d malformed player records", skipped)

        return players

    async def get_trending_players(
        self,
        trend_type: str = "add",
        lookback_hours: int = 24,
        limit: int = 25,
        sport: str = "nfl",
    ) -> list[TrendingPlayer]:
        """
        Get players trending on adds or drops.

        Args:
            trend_type: "add" or "drop"
            lookback_hours: Hours to look back
            limit: Number of results

        Returns:
            List of TrendingPlayer objects
        """
        data = await self._get(
            f"/players/{sport}/trending/{trend_type}",
            params={"lookback_hours": lookback_hours, "limit": limit},
        )
        return self._parse_list(TrendingPlayer, data)

    # ==================== Stats & Projections ====================

    async def get_player_stats(
        self, player_id: str, season: str, by_week: bool = False
    ) -> Any:
        """
        Get a player's stats for a season.

        Args:
            player_id: Sleeper player ID
            season: Season year
            by_week: Group the stats by week

        Returns:
            PlayerStatLine for season totals, or a dict of week -> PlayerStatLine
        """
        params = {"season_type": "regular", "season": season}
        if by_week:
            params["grouping"] = "week"
        endpoint = f"/stats/nfl/player/{player_id}"
        data = await self._get(endpoint, params=params)

        if not by_week:
            return self._parse(PlayerStatLine, data, endpoint)

        return {
            week: self._parse(PlayerStatLine, line, endpoint)
            for week, line in self._expect(data, dict, endpoint).items()
        }

    async def get_bulk_projections(
        self,
        season: str,
        week: int,
        positions: list[str] | None = None,
        order_by: str = "ppr",
    ) -> list[ProjectionRow]:
        """
        Get projections for many players in one request.

        Args:
            season: Season year
            week: Week number
            positions: Position filter (default: QB, RB, WR, TE, FLEX)
            order_by: ppr, half_ppr or std

        Returns:
            List of ProjectionRow objects
        """
        params: list[tuple[str, Any]] = [("season_type", "regular")]
        params += [("position[]", pos) for pos in positions or PROJECTION_POSITIONS]
        params.append(("order_by", order_by))

        data = await self._get(
            f"{self.settings.projections_base_url}/{season}/{week}", params=params
        )
        return self._parse_list(ProjectionRow, data)

    async def get_weekly_projections(
        self, season: str, week: int, position: str | None = None
    ) -> list[ProjectionRow]:
        """Get projections for a week from the core API, optionally for one position."""
        data = await self._get(
            f"/projections/nfl/{season}/{week}",
            params={"season_type": "regular", "position": position or ""},
        )
        return self._parse_list(ProjectionRow, data)

    async def get_player_projection(
        self, player_id: str, season: str, week: int, timeout: float | None = None
    ) -> ProjectionRow | None:
        """Get one player's projection for a week."""
        endpoint = f"{self.settings.projections_base_url}/player/{player_id}"
        data = await self._get(
            endpoint,
            params={"season_type": "regular", "season": season, "week": week},
            timeout=timeout,
        )
        return self._parse(ProjectionRow, data, endpoint)

    # ==================== NFL State Endpoint ====================

    async def get_nfl_state(self) -> NFLState:
        """
        Get current NFL state (week, season, etc.).

        The result is remembered as the active scoring period.

        Returns:
            NFLState object
        """
        endpoint = "/state/nfl"
        state = self._parse(NFLState, await self._get(endpoint), endpoint)
        if state is None:
            raise SleeperAPIError("Sleeper returned no NFL state")
        self.state = state
        return state

    async def get_current_season(self) -> str:
        """Current season, from the last observed state or a fresh fetch."""
        if self.state is not None:
            return self.state.season
        return (await self.get_nfl_state()).season
