"""
Player-related Pydantic models.
"""

from pydantic import BaseModel, Field, field_validator


class Player(BaseModel):
    """NFL Player information from Sleeper."""

    player_id: str
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    position: str | None = None
    team: str | None = None
    age: int | None = None
    years_exp: int | None = None
    status: str | None = None
    injury_status: str | None = None
    fantasy_positions: list[str] | None = None
    height: str | None = None
    weight: str | None = None

    @field_validator("height", "weight", mode="before")
    @classmethod
    def _as_text(cls, value):
        if value is None or value == "":
            return None
        return str(value)

    @property
    def display_name(self) -> str:
        """Get display name for the player."""
        if self.full_name:
            return self.full_name
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.player_id

    @property
    def label(self) -> str:
        """Name with position, e.g. ``Josh Allen (QB)``."""
        return f"{self.display_name} ({self.position})"

    @property
    def is_injured(self) -> bool:
        return bool(self.injury_status)


class TrendingPlayer(BaseModel):
    """A trending add/drop entry."""

    player_id: str
    count: int = 0


class PlayerStatLine(BaseModel):
    """Stats for one player, one period."""

    player_id: str | None = None
    week: int | None = None
    season: str | None = None
    stats: dict[str, float] = Field(default_factory=dict)

    @field_validator("stats", mode="before")
    @classmethod
    def _numeric_only(cls, value):
        if not value:
            return {}
        return {
            key: val for key, val in value.items()
            if isinstance(val, (int, float)) and not isinstance(val, bool)
        }


class ProjectionRow(PlayerStatLine):
    """A projection row from the projections service."""

    team: str | None = None
    opponent: str | None = None
    company: str | None = None
    player: dict | None = None
