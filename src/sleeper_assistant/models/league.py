"""
League-related Pydantic models.
"""

from pydantic import BaseModel, Field, field_validator


class League(BaseModel):
    """Sleeper league information."""

    league_id: str
    name: str
    status: str | None = None
    sport: str = "nfl"
    season: str
    season_type: str | None = None
    total_rosters: int = 0
    roster_positions: list[str] = Field(default_factory=list)
    scoring_settings: dict[str, float] = Field(default_factory=dict)
    settings: dict = Field(default_factory=dict)
    avatar: str | None = None
    draft_id: str | None = None
    previous_league_id: str | None = None

    @field_validator("roster_positions", mode="before")
    @classmethod
    def _null_list(cls, value):
        return value or []

    @field_validator("scoring_settings", "settings", mode="before")
    @classmethod
    def _null_dict(cls, value):
        return value or {}

    def starter_requirements(self) -> dict[str, int]:
        """Count required starters per fixed position, ignoring bench and flex slots."""
        required: dict[str, int] = {}
        for pos in self.roster_positions:
            if pos and pos not in ("BN", "FLEX", "SUPER_FLEX"):
                required[pos] = required.get(pos, 0) + 1
        return required


class User(BaseModel):
    """Sleeper user information."""

    user_id: str
    username: str | None = None
    display_name: str | None = None
    avatar: str | None = None
    metadata: dict | None = None
    is_owner: bool | None = False

    @property
    def name(self) -> str:
        """Display name, falling back to username."""
        return self.display_name or self.username or self.user_id


class Roster(BaseModel):
    """League roster information."""

    roster_id: int
    owner_id: str | None = None
    league_id: str | None = None
    players: list[str] = Field(default_factory=list)
    starters: list[str] = Field(default_factory=list)
    reserve: list[str] | None = None
    taxi: list[str] | None = None
    settings: dict = Field(default_factory=dict)
    metadata: dict | None = None

    @field_validator("players", "starters", mode="before")
    @classmethod
    def _null_list(cls, value):
        return value or []

    @field_validator("settings", mode="before")
    @classmethod
    def _null_dict(cls, value):
        return value or {}

    @property
    def wins(self) -> int:
        return self.settings.get("wins", 0) or 0

    @property
    def losses(self) -> int:
        return self.settings.get("losses", 0) or 0

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}"

    @property
    def bench(self) -> list[str]:
        return [p for p in self.players if p not in self.starters]

    @property
    def waiver_position(self) -> int | None:
        return self.settings.get("waiver_position")

    @property
    def total_moves(self) -> int:
        return self.settings.get("total_moves", 0) or 0

    @property
    def waiver_budget_remaining(self) -> int | None:
        """Remaining FAAB, or None when the league has no budget."""
        total = self.settings.get("waiver_budget_total")
        if not total:
            return None
        return total - (self.settings.get("waiver_budget_used") or 0)


class NFLState(BaseModel):
    """Current NFL state from Sleeper."""

    week: int
    season: str
    season_type: str | None = None
    display_week: int | None = None
    leg: int | None = None
    season_start_date: str | None = None
    previous_season: str | None = None
