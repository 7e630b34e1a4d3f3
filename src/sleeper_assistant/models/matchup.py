"""
Matchup-related Pydantic models.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class MatchupEntry(BaseModel):
    """One roster's side of a weekly matchup, as returned by Sleeper."""

    roster_id: int
    matchup_id: int | None = None
    points: float = 0.0
    starters: list[str] = Field(default_factory=list)
    players: list[str] = Field(default_factory=list)
    starters_points: list[float] = Field(default_factory=list)
    players_points: dict[str, float] = Field(default_factory=dict)

    @field_validator("points", mode="before")
    @classmethod
    def _null_points(cls, value):
        return value or 0.0

    @field_validator("starters", "players", "starters_points", mode="before")
    @classmethod
    def _null_list(cls, value):
        return value or []

    @field_validator("players_points", mode="before")
    @classmethod
    def _null_dict(cls, value):
        return value or {}


def find_pairing(
    entries: list[MatchupEntry], roster_id: int
) -> tuple[MatchupEntry | None, MatchupEntry | None]:
    """
    Find a roster's entry and its opponent's entry.

    A roster on bye has no ``matchup_id``; its opponent is None rather than
    any other roster that also lacks one.
    """
    mine = next((m for m in entries if m.roster_id == roster_id), None)
    if mine is None or mine.matchup_id is None:
        return mine, None
    opponent = next(
        (
            m for m in entries
            if m.matchup_id == mine.matchup_id and m.roster_id != roster_id
        ),
        None,
    )
    return mine, opponent


class StarterProjection(BaseModel):
    """A starter with league-weighted projected points."""

    player_id: str
    name: str
    position: str | None = None
    team: str | None = None
    projected: float = 0.0
    injury_status: str | None = None


class TeamPreview(BaseModel):
    """One side of a matchup preview."""

    name: str | None = None
    roster_id: int
    record: str | None = None
    projected_points: float = 0.0
    starters: list[StarterProjection] = Field(default_factory=list)


class MatchupPreview(BaseModel):
    """Projected preview of a matchup."""

    type: Literal["preview"] = "preview"
    week: int
    my_team: TeamPreview
    opponent: TeamPreview | None = None
    win_probability: float | None = Field(
        default=None, description="Percent chance from projected point share"
    )
    injury_concerns: list[str] = Field(default_factory=list)
    recommendation: str


class HistoricalMatchup(BaseModel):
    """Actual result of a completed week."""

    type: Literal["historical"] = "historical"
    week: int
    my_score: float = 0.0
    opponent_score: float | None = None
    opponent_roster_id: int | None = None
    result: str = Field(description="WON, LOST, TIED or N/A")
    my_starters: list[str] = Field(default_factory=list)
    my_starters_points: list[float] = Field(default_factory=list)
    opponent_starters: list[str] | None = None
    opponent_starters_points: list[float] | None = None


class WeeklyResult(BaseModel):
    """A team's result for a single week."""

    week: int
    my_score: float
    opponent_score: float
    opponent_roster_id: int
    result: str = Field(description="W, L, or T")
    margin: float


class SeasonRecord(BaseModel):
    """Season-to-date record for a configured roster."""

    league_id: str
    roster_id: int
    season_record: str
    wins: int = 0
    losses: int = 0
    ties: int = 0
    total_points_for: float = 0.0
    total_points_against: float = 0.0
    avg_points_for: float = 0.0
    avg_points_against: float = 0.0
    consistency: float = Field(default=0.0, description="Std dev of weekly scores")
    matchup_history: list[WeeklyResult] = Field(default_factory=list)


class OpponentProfile(BaseModel):
    """Who a configured roster is playing."""

    username: str | None = None
    display_name: str | None = None
    user_id: str | None = None
    avatar_id: str | None = None
    avatar_url: str | None = None
    avatar_thumbnail: str | None = None
    roster_id: int
    record: str | None = None
    points_this_week: float = 0.0


class OpponentReport(BaseModel):
    """Opponent lookup for a week; opponent is None on a bye."""

    week: int
    opponent: OpponentProfile | None = None
    message: str | None = None


class ScoredTeam(BaseModel):
    """A team's live score in a matchup."""

    name: str | None = None
    roster_id: int
    points: float = 0.0
    starters: list[str] = Field(default_factory=list)


class ScoredMatchup(BaseModel):
    """Both sides of a matchup with scores."""

    matchup_id: int | None = None
    team1: ScoredTeam
    team2: ScoredTeam | None = None
    status: str = Field(description="LIVE, FINAL or UPCOMING")


class MatchupScores(BaseModel):
    """All matchups for a week."""

    week: int
    current_nfl_week: int
    matchups: list[ScoredMatchup] = Field(default_factory=list)
