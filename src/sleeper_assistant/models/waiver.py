"""
Waiver wire and free agent models.
"""

from pydantic import BaseModel, Field


class WaiverCandidate(BaseModel):
    """A ranked waiver pickup."""

    player_id: str
    player: str
    position: str | None = None
    team: str | None = None
    trending_adds: int = 0
    current_week_projection: float = 0.0
    fills_need: bool = False
    injury_status: str = "Healthy"
    recommendation_score: float = 0.0


class WaiverRecommendations(BaseModel):
    """Waiver recommendations for a roster."""

    roster_needs: list[str] = Field(default_factory=list)
    recommendations: list[WaiverCandidate] = Field(default_factory=list)
    waiver_position: int | None = None
    waiver_budget_remaining: int | None = None
    total_moves_made: int = 0
    analysis_note: str = (
        "Recommendations based on: current week projections, trending adds, and roster needs"
    )


class FreeAgent(BaseModel):
    """An unrostered active player."""

    player_id: str
    name: str
    position: str | None = None
    team: str | None = None
    injury_status: str | None = None


class FreeAgentList(BaseModel):
    """Free agents in a league."""

    total: int
    position_filter: str = "all"
    free_agents: list[FreeAgent] = Field(default_factory=list)
