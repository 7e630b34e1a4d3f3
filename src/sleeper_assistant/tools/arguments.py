"""
Tool argument models.

Each tool validates its loosely-typed JSON arguments against one of these
models before its handler runs.
"""

from typing import Literal

from pydantic import BaseModel, Field


class NoArguments(BaseModel):
    pass


class UsernameArgs(BaseModel):
    username: str = Field(description="Sleeper username or user ID")


class UserSeasonArgs(BaseModel):
    user_id: str = Field(description="Sleeper user ID")
    sport: str = Field(default="nfl", description="Sport (e.g., nfl)")
    season: str | None = Field(
        default=None, description="Season year (defaults to the current season)"
    )


class LeagueArgs(BaseModel):
    league_id: str = Field(description="Sleeper league ID")


class LeagueWeekArgs(BaseModel):
    league_id: str = Field(description="Sleeper league ID")
    week: int = Field(ge=1, description="Week number (1-18 for NFL)")


class LeagueRosterArgs(BaseModel):
    league_id: str = Field(description="Sleeper league ID")
    roster_id: int = Field(description="Roster ID")


class TrendingArgs(BaseModel):
    type: Literal["add", "drop"] = Field(description="Trend type: add or drop")
    sport: str = "nfl"
    lookback_hours: int = Field(default=24, ge=1, description="Hours to look back")
    limit: int = Field(default=25, ge=1, description="Number of results to return")


class PlayerIdsArgs(BaseModel):
    player_ids: list[str] = Field(description="Player IDs to look up")


class MyWeekArgs(BaseModel):
    week: int | None = Field(
        default=None, ge=1, description="Week number (defaults to the current week)"
    )
    league_hint: str | None = Field(
        default=None, description="League name or username hint to pick a league"
    )


class LeagueHintArgs(BaseModel):
    league_hint: str | None = Field(
        default=None, description="League name or username hint to pick a league"
    )


class AvatarArgs(BaseModel):
    username: str | None = None
    user_id: str | None = None
    thumbnail: bool = Field(default=False, description="Return the thumbnail URL")


class TradeArgs(BaseModel):
    league_id: str
    roster_id_1: int = Field(description="First roster ID in the trade")
    roster_id_2: int = Field(description="Second roster ID in the trade")
    players_from_1: list[str] = Field(description="Player IDs going from roster 1 to roster 2")
    players_from_2: list[str] = Field(description="Player IDs going from roster 2 to roster 1")


class WaiverArgs(BaseModel):
    league_id: str
    roster_id: int = Field(description="Roster ID to get recommendations for")
    position: str | None = Field(default=None, description="Position to focus on")
    limit: int = Field(
        default=10, ge=0, description="Number of recommendations (0 for the default)"
    )


class PreviewArgs(BaseModel):
    league_id: str
    week: int = Field(ge=1)
    roster_id: int = Field(description="Your roster ID")


class FreeAgentArgs(BaseModel):
    league_id: str
    position: str | None = Field(default=None, description="Filter by position")


class LineupArgs(BaseModel):
    league_id: str
    roster_id: int
    week: int = Field(ge=1)


class WeeklyProjectionArgs(BaseModel):
    week: int = Field(ge=1)
    season: str | None = None
    position: str | None = None


class DraftArgs(BaseModel):
    draft_id: str = Field(description="Sleeper draft ID")


class PlayerStatsArgs(BaseModel):
    player_id: str
    season: str | None = None
    week: int | None = Field(default=None, ge=1, description="Only return this week")
