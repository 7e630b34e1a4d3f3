"""
Configured account reporting and avatar lookups.
"""

import logging

from sleeper_assistant.clients.sleeper import SleeperAPIError, SleeperClient
from sleeper_assistant.config import AccountRegistry, Settings
from sleeper_assistant.errors import ResolutionError
from sleeper_assistant.models import (
    AccountSummary,
    AvatarInfo,
    ConfiguredTeams,
    LeagueSummary,
)
from sleeper_assistant.services.identity import IdentityResolver

logger = logging.getLogger(__name__)


class AccountService:
    """Service for listing configured teams and resolving avatars."""

    def __init__(
        self,
        client: SleeperClient,
        registry: AccountRegistry,
        resolver: IdentityResolver,
        settings: Settings,
    ):
        self.client = client
        self.registry = registry
        self.resolver = resolver
        self.settings = settings

    async def show_my_teams(self) -> ConfiguredTeams:
        """
        Every configured account with its leagues, names and roster ids.

        Lookups that fail are reported per account or league instead of
        failing the whole listing.
        """
        summaries = []
        for account in self.registry:
            summary = AccountSummary(username=account.username, user_id=account.user_id)

            if not account.user_id:
                try:
                    user = await self.client.get_user(account.username)
                except SleeperAPIError as e:
                    logger.warning("Failed to fetch user %s: %s", account.username, e)
                    user = None
                if user is None:
                    summary.error = "Failed to fetch user details"
                else:
                    account.remember_user_id(user.user_id)
                    summary.user_id = account.user_id
                    summary.avatar = user.avatar

            for binding in account.leagues:
                name = await self.resolver.ensure_league_name(binding)
                league = LeagueSummary(league_id=binding.league_id, name=name)
                if name is None:
                    league.error = "Failed to fetch league details"
                else:
                    league.roster_id = await self.resolver.ensure_roster_id(account, binding)
                summary.leagues.append(league)

            summaries.append(summary)

        return ConfiguredTeams(
            configured_users=len(self.registry),
            total_leagues=self.registry.total_leagues,
            configurations=summaries,
        )

    async def avatar(
        self,
        username: str | None = None,
        user_id: str | None = None,
        thumbnail: bool = False,
    ) -> AvatarInfo:
        """
        Avatar URL for a user, defaulting to the first configured account.

        Args:
            username: Sleeper handle
            user_id: Sleeper user id (takes precedence over username)
            thumbnail: Return the thumbnail URL instead of full size

        Returns:
            AvatarInfo
        """
        lookup = user_id or username
        first = None
        if not lookup and len(self.registry):
            first = self.registry.accounts[0]
            lookup = first.user_id or first.username

        user = await self.client.get_user(lookup) if lookup else None
        if first is not None and user is not None:
            first.remember_user_id(user.user_id)

        if user is None or not user.avatar:
            raise ResolutionError(
                "No avatar found for user", {"username": username, "user_id": user_id}
            )

        base_url = (
            self.settings.avatar_thumb_base_url if thumbnail else self.settings.avatar_base_url
        )
        return AvatarInfo(
            avatar_id=user.avatar,
            avatar_url=f"{base_url}/{user.avatar}",
            thumbnail=thumbnail,
        )
