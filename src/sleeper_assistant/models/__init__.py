"""Pydantic models and schemas."""

from sleeper_assistant.models.account import (
    Account,
    AccountSummary,
    AvatarInfo,
    ConfiguredTeams,
    LeagueBinding,
    LeagueSummary,
    Resolution,
)
from sleeper_assistant.models.league import League, NFLState, Roster, User
from sleeper_assistant.models.lineup import LineupEvaluation, LineupSlot
from sleeper_assistant.models.matchup import (
    HistoricalMatchup,
    MatchupEntry,
    MatchupPreview,
    MatchupScores,
    OpponentProfile,
    OpponentReport,
    ScoredMatchup,
    ScoredTeam,
    SeasonRecord,
    StarterProjection,
    TeamPreview,
    WeeklyResult,
    find_pairing,
)
from sleeper_assistant.models.player import (
    Player,
    PlayerStatLine,
    ProjectionRow,
    TrendingPlayer,
)
from sleeper_assistant.models.trade_analyzer import (
    TradeEvaluation,
    TradeFairness,
    TradeTarget,
    TradeTargetReport,
)
from sleeper_assistant.models.transaction import (
    BracketMatchup,
    Draft,
    DraftSelection,
    TradedPick,
    Transaction,
    TransactionStatus,
    TransactionType,
    WaiverBudget,
)
from sleeper_assistant.models.waiver import (
    FreeAgent,
    FreeAgentList,
    WaiverCandidate,
    WaiverRecommendations,
)

__all__ = [
    # Accounts
    "Account",
    "AccountSummary",
    "AvatarInfo",
    "ConfiguredTeams",
    "LeagueBinding",
    "LeagueSummary",
    "Resolution",
    # League
    "League",
    "NFLState",
    "Roster",
    "User",
    # Lineup
    "LineupEvaluation",
    "LineupSlot",
    # Matchup
    "HistoricalMatchup",
    "MatchupEntry",
    "MatchupPreview",
    "MatchupScores",
    "OpponentProfile",
    "OpponentReport",
    "ScoredMatchup",
    "ScoredTeam",
    "SeasonRecord",
    "StarterProjection",
    "TeamPreview",
    "WeeklyResult",
    "find_pairing",
    # Player
    "Player",
    "PlayerStatLine",
    "ProjectionRow",
    "TrendingPlayer",
    # Trades
    "TradeEvaluation",
    "TradeFairness",
    "TradeTarget",
    "TradeTargetReport",
    # Transactions
    "BracketMatchup",
    "Draft",
    "DraftSelection",
    "TradedPick",
    "Transaction",
    "TransactionStatus",
    "TransactionType",
    "WaiverBudget",
    # Waivers
    "FreeAgent",
    "FreeAgentList",
    "WaiverCandidate",
    "WaiverRecommendations",
]
