"""
Configured account models.

Accounts are built once from configuration and only ever gain data:
resolved user ids, league names and roster ids are filled in lazily.
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field


class LeagueBinding(BaseModel):
    """A configured league for one account."""

    league_id: str
    league_name: str | None = None
    roster_id: int | None = None

    def remember_name(self, name: str | None) -> None:
        """Cache the league display name, ignoring empty values."""
        if name:
            self.league_name = name

    def remember_roster(self, roster_id: int | None) -> None:
        """Cache the resolved roster id, ignoring empty values."""
        if roster_id is not None:
            self.roster_id = roster_id


class Account(BaseModel):
    """A configured Sleeper account and its leagues."""

    tag: str = "DEFAULT"
    username: str
    user_id: str | None = None
    leagues: list[LeagueBinding] = Field(default_factory=list)

    def remember_user_id(self, user_id: str | None) -> None:
        """Cache the resolved user id, ignoring empty values."""
        if user_id:
            self.user_id = user_id

    def matches_handle(self, hint: str) -> bool:
        """Case-insensitive substring match in either direction."""
        handle = self.username.lower()
        hint = hint.lower()
        return hint in handle or handle in hint


@dataclass
class Resolution:
    """Result of resolving a hint to an account, league and roster."""

    account: Account
    binding: LeagueBinding

    @property
    def roster_id(self) -> int | None:
        return self.binding.roster_id

    @property
    def league_id(self) -> str:
        return self.binding.league_id


class LeagueSummary(BaseModel):
    """A configured league as reported back to the caller."""

    league_id: str
    name: str | None = None
    roster_id: int | None = None
    error: str | None = None


class AccountSummary(BaseModel):
    """A configured account with its leagues."""

    username: str
    user_id: str | None = None
    avatar: str | None = None
    error: str | None = None
    leagues: list[LeagueSummary] = Field(default_factory=list)


class ConfiguredTeams(BaseModel):
    """Every configured account and league."""

    configured_users: int
    total_leagues: int
    configurations: list[AccountSummary] = Field(default_factory=list)


class AvatarInfo(BaseModel):
    """Avatar URL for a user."""

    avatar_id: str
    avatar_url: str
    thumbnail: bool = False
