"""
Lineup evaluation models.
"""

from pydantic import BaseModel, Field


class LineupSlot(BaseModel):
    """A starting slot and any better bench options."""

    slot: str | None = None
    player_id: str | None = None
    current: str
    position: str | None = None
    projected: float = 0.0
    injury_status: str | None = None
    better_options: list[str] = Field(default_factory=list)


class LineupEvaluation(BaseModel):
    """Starter-by-starter lineup check."""

    week: int
    roster_id: int
    total_projected: float
    lineup: list[LineupSlot] = Field(default_factory=list)
    optimization_suggestions: list[str] = Field(default_factory=list)
