"""
Identity Resolution Service

Maps a free-text hint ("my dynasty league", "jsmith") to a configured
account, one of its leagues, and that account's roster in the league.
"""

import logging

from sleeper_assistant.clients.sleeper import SleeperAPIError, SleeperClient
from sleeper_assistant.config import AccountRegistry
from sleeper_assistant.models import Account, LeagueBinding, Resolution

logger = logging.getLogger(__name__)


def _mutual_substring(hint: str, name: str | None) -> bool:
    """Case-insensitive substring match in either direction."""
    if not name:
        return False
    hint, name = hint.lower(), name.lower()
    return hint in name or name in hint


class IdentityResolver:
    """
    Resolves hints against the account registry.

    Resolved user ids, league names and roster ids are written back onto the
    registry's accounts and bindings. Writes are fill-if-missing, so two
    overlapping resolutions may both fetch but always store equivalent values.
    """

    def __init__(self, client: SleeperClient, registry: AccountRegistry):
        self.client = client
        self.registry = registry

    async def resolve(self, hint: str | None = None) -> Resolution | None:
        """
        Resolve a hint to an account, league and roster.

        Order: single account/league without a hint, then handle match,
        then league name or id match across every account, then the first
        configured league.

        Args:
            hint: Username, league name or league id fragment

        Returns:
            Resolution (roster_id may be None), or None when nothing is configured
        """
        if not self.registry.is_usable:
            return None

        accounts = self.registry.accounts

        if not hint and len(accounts) == 1 and len(accounts[0].leagues) == 1:
            return await self._resolved(accounts[0], accounts[0].leagues[0])

        if hint:
            for account in accounts:
                if not account.matches_handle(hint):
                    continue
                if len(account.leagues) == 1:
                    return await self._resolved(account, account.leagues[0])
                for binding in account.leagues:
                    await self.ensure_league_name(binding)
                    if _mutual_substring(hint, binding.league_name):
                        return await self._resolved(account, binding)

            for account in accounts:
                for binding in account.leagues:
                    await self.ensure_league_name(binding)
                    if (
                        _mutual_substring(hint, binding.league_name)
                        or binding.league_id == hint
                    ):
                        return await self._resolved(account, binding)

        return await self._resolved(accounts[0], accounts[0].leagues[0])

    async def _resolved(self, account: Account, binding: LeagueBinding) -> Resolution:
        await self.ensure_roster_id(account, binding)
        return Resolution(account=account, binding=binding)

    async def ensure_league_name(self, binding: LeagueBinding) -> str | None:
        """Fetch and cache the league display name; failures are logged and skipped."""
        if binding.league_name:
            return binding.league_name
        try:
            league = await self.client.get_league(binding.league_id)
        except SleeperAPIError as e:
            logger.warning("Error fetching league name for %s: %s", binding.league_id, e)
            return None
        binding.remember_name(league.name if league else None)
        return binding.league_name

    async def ensure_user_id(self, account: Account) -> str | None:
        """Look up the account's user id by handle if it is not known yet."""
        if not account.user_id:
            user = await self.client.get_user(account.username)
            account.remember_user_id(user.user_id if user else None)
        return account.user_id

    async def ensure_roster_id(self, account: Account, binding: LeagueBinding) -> int | None:
        """
        Find the account's roster in a league and cache it on the binding.

        Ownership is matched on user id first. If that misses, the league's
        member list is searched by username or user id and the corrected user
        id is kept. Fetch failures are logged; the roster id then stays unset.
        """
        if binding.roster_id is not None:
            return binding.roster_id

        try:
            user_id = await self.ensure_user_id(account)
            rosters = await self.client.get_league_rosters(binding.league_id)

            roster = next((r for r in rosters if user_id and r.owner_id == user_id), None)

            if roster is None and rosters:
                members = await self.client.get_league_users(binding.league_id)
                member = next(
                    (
                        u for u in members
                        if u.username == account.username
                        or (user_id and u.user_id == user_id)
                    ),
                    None,
                )
                if member is not None:
                    roster = next(
                        (r for r in rosters if r.owner_id == member.user_id), None
                    )
                    if roster is not None:
                        account.user_id = member.user_id

            if roster is not None:
                binding.remember_roster(roster.roster_id)
        except SleeperAPIError as e:
            logger.warning(
                "Error finding roster for %s in league %s: %s",
                account.username, binding.league_id, e,
            )

        return binding.roster_id
