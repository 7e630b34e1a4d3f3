"""
Trade Analysis Models

Models for trade evaluation and trade target search.
"""

from enum import Enum

from pydantic import BaseModel, Field


class TradeFairness(str, Enum):
    """Trade fairness classification."""

    FAIR = "fair"
    SLIGHT = "slight"
    SIGNIFICANT = "significant"


class TradeEvaluation(BaseModel):
    """Position-tier valuation of a two-team trade."""

    team1_gives: list[str] = Field(description="Player labels going from roster 1")
    team2_gives: list[str] = Field(description="Player labels going from roster 2")
    team1_value: float
    team2_value: float
    value_difference: float
    percent_difference: float = Field(description="Gap as a percent of the larger side")
    fairness: TradeFairness
    recommendation: str
    risk_factors: list[str] = Field(default_factory=list)
    team1_needs: list[str] = Field(default_factory=list)
    team2_needs: list[str] = Field(default_factory=list)
    team1_record: str
    team2_record: str


class TradeTarget(BaseModel):
    """Players on another roster at positions of need."""

    roster_id: int
    record: str
    potential_targets: dict[str, list[str]] = Field(
        description="Position -> player names"
    )


class TradeTargetReport(BaseModel):
    """Trade targets for a roster."""

    your_roster_id: int
    position_needs: list[str]
    current_roster: dict[str, int] = Field(description="Position -> player count")
    trade_targets: list[TradeTarget] = Field(default_factory=list)
