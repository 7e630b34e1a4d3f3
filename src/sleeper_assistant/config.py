"""
Configuration module using pydantic-settings.

Loads scalar settings from environment variables with sensible defaults, and
builds the account registry from tagged ``SLEEPER_USERNAME_<TAG>`` /
``SLEEPER_LEAGUE_<TAG>_ID_<N>`` variables.
"""

import os
import re
from collections.abc import Iterator, Mapping
from functools import lru_cache

from dotenv import dotenv_values
from pydantic_settings import BaseSettings, SettingsConfigDict

from sleeper_assistant.errors import ConfigurationError
from sleeper_assistant.models.account import Account, LeagueBinding

PLACEHOLDER_USERNAME = "your_sleeper_username"
PLACEHOLDER_LEAGUE_ID = "your_league_id_1"

_USERNAME_KEY = re.compile(r"^SLEEPER_USERNAME_([A-Z]+)$")
_LEAGUE_KEY = re.compile(r"^SLEEPER_LEAGUE_([A-Z]+)_ID_(\d+)$")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SLEEPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Configuration
    api_title: str = "Sleeper Assistant API"
    api_version: str = "0.1.0"
    api_description: str = "Fantasy football tools for Sleeper leagues"
    debug: bool = False
    log_level: str = "INFO"

    # Sleeper API
    sleeper_base_url: str = "https://api.sleeper.app/v1"
    projections_base_url: str = "https://api.sleeper.com/projections/nfl"
    avatar_base_url: str = "https://sleepercdn.com/avatars"
    avatar_thumb_base_url: str = "https://sleepercdn.com/avatars/thumbs"
    sleeper_timeout: float = 30.0
    projection_probe_timeout: float = 1.0

    # Pacing and caching
    request_interval: float = 0.1  # seconds between upstream calls
    period_cache_ttl: float = 300.0  # 5 minutes

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class AccountRegistry:
    """
    The configured accounts, owned for the lifetime of the process.

    Constructed once at startup and passed to the components that need it.
    Only the lazily resolved fields on accounts and bindings ever change.
    """

    def __init__(self, accounts: list[Account] | None = None):
        self.accounts = accounts or []

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts)

    def __len__(self) -> int:
        return len(self.accounts)

    @property
    def total_leagues(self) -> int:
        return sum(len(a.leagues) for a in self.accounts)

    @property
    def is_usable(self) -> bool:
        """True when at least the first account has a league to fall back on."""
        return bool(self.accounts) and bool(self.accounts[0].leagues)

    def validate(self) -> None:
        """Raise ConfigurationError unless a real account and league are configured."""
        if not self.accounts:
            raise ConfigurationError(
                "No Sleeper configuration found! Please set at least "
                "SLEEPER_USERNAME_A and SLEEPER_LEAGUE_A_ID_1 in your environment."
            )

        first = self.accounts[0]
        if not first.username or not first.leagues:
            raise ConfigurationError(
                "Invalid configuration! SLEEPER_USERNAME_A and SLEEPER_LEAGUE_A_ID_1 "
                "must both be set."
            )

        if (
            first.username == PLACEHOLDER_USERNAME
            or first.leagues[0].league_id == PLACEHOLDER_LEAGUE_ID
        ):
            raise ConfigurationError(
                f"Please replace the placeholder values '{PLACEHOLDER_USERNAME}' and "
                f"'{PLACEHOLDER_LEAGUE_ID}' with your actual Sleeper username and league ID."
            )


def load_accounts(environ: Mapping[str, str] | None = None) -> AccountRegistry:
    """
    Build the account registry from environment-style key/value pairs.

    Args:
        environ: Variables to read. Defaults to ``.env`` values overlaid
            with the process environment.

    Returns:
        AccountRegistry ordered by tag, with leagues ordered by index
    """
    if environ is None:
        environ = {
            **{k: v for k, v in dotenv_values(".env").items() if v is not None},
            **os.environ,
        }

    usernames: dict[str, str] = {}
    leagues: dict[str, list[tuple[int, str]]] = {}

    for key, value in environ.items():
        if match := _USERNAME_KEY.match(key):
            usernames[match.group(1)] = value
        elif match := _LEAGUE_KEY.match(key):
            leagues.setdefault(match.group(1), []).append((int(match.group(2)), value))

    accounts = []
    for tag in sorted(set(usernames) | set(leagues)):
        username = usernames.get(tag, "")
        if not username:
            continue
        bindings = [
            LeagueBinding(league_id=league_id)
            for _, league_id in sorted(leagues.get(tag, []))
            if league_id
        ]
        accounts.append(Account(tag=tag, username=username, leagues=bindings))

    # Legacy single-account format, only when no tagged keys are present
    if not (usernames or leagues) and environ.get("SLEEPER_USERNAME"):
        roster_id = environ.get("SLEEPER_ROSTER_ID")
        bindings = []
        if environ.get("SLEEPER_LEAGUE_ID"):
            bindings.append(
                LeagueBinding(
                    league_id=environ["SLEEPER_LEAGUE_ID"],
                    roster_id=int(roster_id) if roster_id and roster_id.isdigit() else None,
                )
            )
        accounts.append(
            Account(
                username=environ["SLEEPER_USERNAME"],
                user_id=environ.get("SLEEPER_USER_ID") or None,
                leagues=bindings,
            )
        )

    return AccountRegistry(accounts)
