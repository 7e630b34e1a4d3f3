"""Business logic services."""

from sleeper_assistant.services.accounts import AccountService
from sleeper_assistant.services.context import LeagueContext
from sleeper_assistant.services.identity import IdentityResolver
from sleeper_assistant.services.lineup import LineupService
from sleeper_assistant.services.matchups import MatchupService
from sleeper_assistant.services.scoring import (
    compute_points,
    projection_points,
    scoring_format,
)
from sleeper_assistant.services.trade_analyzer import TradeAnalyzerService
from sleeper_assistant.services.trade_targets import TradeTargetService
from sleeper_assistant.services.waivers import WaiverService

__all__ = [
    # Identity
    "IdentityResolver",
    "AccountService",
    # Scoring
    "compute_points",
    "projection_points",
    "scoring_format",
    # Analytics
    "LeagueContext",
    "LineupService",
    "MatchupService",
    "TradeAnalyzerService",
    "TradeTargetService",
    "WaiverService",
]
