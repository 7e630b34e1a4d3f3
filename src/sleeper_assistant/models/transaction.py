"""
Transaction, draft and bracket Pydantic models.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class TransactionType(str, Enum):
    """Types of transactions in Sleeper."""

    TRADE = "trade"
    WAIVER = "waiver"
    FREE_AGENT = "free_agent"
    COMMISSIONER = "commissioner"


class TransactionStatus(str, Enum):
    """Transaction status."""

    COMPLETE = "complete"
    PENDING = "pending"
    FAILED = "failed"


class TradedPick(BaseModel):
    """A traded draft pick."""

    season: str
    round: int
    roster_id: int
    previous_owner_id: int | None = None
    owner_id: int


class WaiverBudget(BaseModel):
    """Waiver budget transfer in a transaction."""

    sender: int
    receiver: int
    amount: int


class Transaction(BaseModel):
    """Sleeper transaction."""

    transaction_id: str
    type: TransactionType
    status: TransactionStatus
    week: int = Field(default=0, description="Week the transaction occurred")
    roster_ids: list[int] = Field(default_factory=list)
    adds: dict[str, int] | None = Field(
        default=None, description="Player ID -> Roster ID receiving"
    )
    drops: dict[str, int] | None = Field(
        default=None, description="Player ID -> Roster ID dropping"
    )
    draft_picks: list[TradedPick] = Field(default_factory=list)
    waiver_budget: list[WaiverBudget] = Field(default_factory=list)
    settings: dict | None = None
    metadata: dict | None = None
    created: int | None = Field(default=None, description="Unix timestamp (ms)")
    consenter_ids: list[int] = Field(default_factory=list)
    creator: str | None = None

    @field_validator("roster_ids", "draft_picks", "waiver_budget", "consenter_ids", mode="before")
    @classmethod
    def _null_list(cls, value):
        return value or []

    @property
    def is_trade(self) -> bool:
        return self.type == TransactionType.TRADE


class Draft(BaseModel):
    """A Sleeper draft."""

    draft_id: str
    league_id: str | None = None
    season: str | None = None
    status: str | None = None
    type: str | None = None
    sport: str | None = None
    settings: dict | None = None
    metadata: dict | None = None
    start_time: int | None = None
    draft_order: dict[str, int] | None = None


class DraftSelection(BaseModel):
    """A pick made in a draft."""

    round: int
    pick_no: int
    player_id: str | None = None
    picked_by: str | None = None
    roster_id: int | None = None
    draft_slot: int | None = None
    is_keeper: bool | None = None
    metadata: dict | None = None


class BracketMatchup(BaseModel):
    """A playoff bracket matchup."""

    r: int = Field(description="Round")
    m: int = Field(description="Matchup number")
    t1: int | None = Field(default=None, description="Team 1 roster ID")
    t2: int | None = Field(default=None, description="Team 2 roster ID")
    w: int | None = Field(default=None, description="Winner roster ID")
    l: int | None = Field(default=None, description="Loser roster ID")
    t1_from: dict | None = None
    t2_from: dict | None = None
    p: int | None = Field(default=None, description="Placement decided by this game")
