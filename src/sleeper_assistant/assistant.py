"""
Sleeper Assistant

Wires the shared client, caches and services together for one process.
"""

import logging

from sleeper_assistant.cache import PeriodCache, PlayerDirectory
from sleeper_assistant.clients import RequestPacer, SleeperClient
from sleeper_assistant.config import AccountRegistry, Settings, get_settings, load_accounts
from sleeper_assistant.services import (
    AccountService,
    IdentityResolver,
    LineupService,
    MatchupService,
    TradeAnalyzerService,
    TradeTargetService,
    WaiverService,
)

logger = logging.getLogger(__name__)


class SleeperAssistant:
    """
    Process-wide container for the Sleeper tool service.

    Holds the single pacer, client, player directory and period cache, so
    every operation shares one request budget and one set of caches.

    Example:
        async with SleeperAssistant() as assistant:
            preview = await assistant.matchups.my_matchup()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: AccountRegistry | None = None,
        transport=None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry if registry is not None else load_accounts()
        self.pacer = RequestPacer(self.settings.request_interval)
        self.client = SleeperClient(self.settings, pacer=self.pacer, transport=transport)

        self.players = PlayerDirectory(self.client)
        self.period_cache = PeriodCache(self.client, ttl=self.settings.period_cache_ttl)
        self.resolver = IdentityResolver(self.client, self.registry)

        self.accounts = AccountService(self.client, self.registry, self.resolver, self.settings)
        self.trades = TradeAnalyzerService(self.client, self.players)
        self.trade_targets = TradeTargetService(self.client, self.players)
        self.lineups = LineupService(self.client, self.players)
        self.waivers = WaiverService(self.client, self.players, self.period_cache, self.settings)
        self.matchups = MatchupService(
            self.client, self.players, self.period_cache, self.resolver, self.settings
        )

    async def __aenter__(self) -> "SleeperAssistant":
        await self.client.__aenter__()
        logger.info(
            "Sleeper assistant ready with %d account(s), %d league(s)",
            len(self.registry), self.registry.total_leagues,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.client.__aexit__(exc_type, exc_val, exc_tb)
