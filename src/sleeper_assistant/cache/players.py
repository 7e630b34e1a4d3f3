"""
Process-lifetime player directory.

The Sleeper player catalog is ~2000 NFL players in a single large payload.
It is fetched once on first use and never refreshed.
"""

import asyncio
import logging
from collections.abc import ItemsView

from sleeper_assistant.clients.sleeper import SleeperAPIError, SleeperClient
from sleeper_assistant.models import Player

logger = logging.getLogger(__name__)


class PlayerDirectory:
    """
    Lazily loaded map of player_id -> Player.

    Concurrent ``ensure_loaded()`` calls made before the first load finishes
    share that load instead of starting their own. A failed load leaves the
    directory empty and the next ``ensure_loaded()`` tries again.
    """

    def __init__(self, client: SleeperClient):
        self.client = client
        self._players: dict[str, Player] = {}
        self._loading: asyncio.Task | None = None

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player_id: str) -> bool:
        return player_id in self._players

    @property
    def loaded(self) -> bool:
        return bool(self._players)

    async def ensure_loaded(self) -> None:
        """Fetch the catalog if it has not been loaded yet."""
        if self._players:
            return

        if self._loading is None:
            self._loading = asyncio.ensure_future(self._load())

        loading = self._loading
        try:
            await asyncio.shield(loading)
        finally:
            if self._loading is loading and loading.done():
                self._loading = None

    async def _load(self) -> None:
        try:
            players = await self.client.get_all_players()
        except SleeperAPIError as e:
            logger.warning("Failed to load player catalog: %s", e)
            return
        self._players = players
        logger.info("Loaded %d players into the directory", len(players))

    def get(self, player_id: str) -> Player | None:
        """Get player by ID, or None if unknown."""
        return self._players.get(player_id)

    def items(self) -> ItemsView[str, Player]:
        return self._players.items()

    def name(self, player_id: str) -> str:
        """Player display name, or the raw id when unknown."""
        player = self._players.get(player_id)
        return player.display_name if player else player_id

    def position(self, player_id: str) -> str | None:
        player = self._players.get(player_id)
        return player.position if player else None
