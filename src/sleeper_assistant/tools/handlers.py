"""
Tool handlers.

Registers every tool against a ``SleeperAssistant``: thin pass-throughs to
the Sleeper API, plus the analytics services.
"""

from sleeper_assistant.assistant import SleeperAssistant
from sleeper_assistant.errors import ResolutionError
from sleeper_assistant.tools.arguments import (
    AvatarArgs,
    DraftArgs,
    FreeAgentArgs,
    LeagueArgs,
    LeagueHintArgs,
    LeagueRosterArgs,
    LeagueWeekArgs,
    LineupArgs,
    MyWeekArgs,
    PlayerIdsArgs,
    PlayerStatsArgs,
    PreviewArgs,
    TradeArgs,
    TrendingArgs,
    UsernameArgs,
    UserSeasonArgs,
    WaiverArgs,
    WeeklyProjectionArgs,
)
from sleeper_assistant.tools.registry import ToolRegistry


def build_registry(assistant: SleeperAssistant) -> ToolRegistry:
    """Create the tool registry for an assistant."""
    registry = ToolRegistry(assistant.registry)
    client = assistant.client

    async def season_or_current(season: str | None) -> str:
        return season or await client.get_current_season()

    # ==================== Users & Leagues ====================

    @registry.tool("get_user", "Get Sleeper user information by username", UsernameArgs)
    async def get_user(args: UsernameArgs):
        user = await client.get_user(args.username)
        if user is None:
            raise ResolutionError("User not found", {"username": args.username})
        return user

    @registry.tool("get_user_leagues", "Get all leagues for a user in a season", UserSeasonArgs)
    async def get_user_leagues(args: UserSeasonArgs):
        season = await season_or_current(args.season)
        return await client.get_user_leagues(args.user_id, season, args.sport)

    @registry.tool("get_league_info", "Get league information by league ID", LeagueArgs)
    async def get_league_info(args: LeagueArgs):
        league = await client.get_league(args.league_id)
        if league is None:
            raise ResolutionError("League not found", {"league_id": args.league_id})
        return league

    @registry.tool("get_league_rosters", "Get all rosters in a league", LeagueArgs)
    async def get_league_rosters(args: LeagueArgs):
        return await client.get_league_rosters(args.league_id)

    @registry.tool("get_league_members", "Get all users in a league", LeagueArgs)
    async def get_league_members(args: LeagueArgs):
        return await client.get_league_users(args.league_id)

    @registry.tool("get_week_matchups", "Get matchups for a week in a league", LeagueWeekArgs)
    async def get_week_matchups(args: LeagueWeekArgs):
        return await client.get_matchups(args.league_id, args.week)

    @registry.tool(
        "get_week_transactions", "Get transactions for a week in a league", LeagueWeekArgs
    )
    async def get_week_transactions(args: LeagueWeekArgs):
        return await client.get_transactions(args.league_id, args.week)

    @registry.tool(
        "get_league_traded_picks", "Get all traded draft picks in a league", LeagueArgs
    )
    async def get_league_traded_picks(args: LeagueArgs):
        return await client.get_league_traded_picks(args.league_id)

    @registry.tool("get_winners_bracket", "Get the playoff winners bracket", LeagueArgs)
    async def get_winners_bracket(args: LeagueArgs):
        return await client.get_winners_bracket(args.league_id)

    @registry.tool("get_losers_bracket", "Get the playoff losers bracket", LeagueArgs)
    async def get_losers_bracket(args: LeagueArgs):
        return await client.get_losers_bracket(args.league_id)

    # ==================== Players ====================

    @registry.tool(
        "get_trending_players", "Get players trending on adds or drops", TrendingArgs
    )
    async def get_trending_players(args: TrendingArgs):
        return await client.get_trending_players(
            args.type, args.lookback_hours, args.limit, args.sport
        )

    @registry.tool(
        "get_player_details", "Get details for specific players by their IDs", PlayerIdsArgs
    )
    async def get_player_details(args: PlayerIdsArgs):
        await assistant.players.ensure_loaded()
        return {pid: assistant.players.get(pid) for pid in args.player_ids}

    @registry.tool(
        "get_player_stats",
        "Get a player's season stats, or a single week's stats",
        PlayerStatsArgs,
    )
    async def get_player_stats(args: PlayerStatsArgs):
        season = await season_or_current(args.season)
        if args.week is None:
            return await client.get_player_stats(args.player_id, season)

        weeks = await client.get_player_stats(args.player_id, season, by_week=True)
        line = weeks.get(str(args.week))
        if line is None:
            return {"message": "No stats for this week"}
        return line

    @registry.tool(
        "get_weekly_projections", "Get player projections for a week", WeeklyProjectionArgs
    )
    async def get_weekly_projections(args: WeeklyProjectionArgs):
        season = await season_or_current(args.season)
        return await client.get_weekly_projections(season, args.week, args.position)

    @registry.tool("get_current_week", "Get the current NFL season state including week")
    async def get_current_week(args):
        state = await client.get_nfl_state()
        assistant.period_cache.sweep()
        return state

    # ==================== Drafts ====================

    @registry.tool("get_user_drafts", "Get all drafts for a user in a season", UserSeasonArgs)
    async def get_user_drafts(args: UserSeasonArgs):
        season = await season_or_current(args.season)
        return await client.get_user_drafts(args.user_id, season, args.sport)

    @registry.tool("get_league_drafts", "Get all drafts for a league", LeagueArgs)
    async def get_league_drafts(args: LeagueArgs):
        return await client.get_league_drafts(args.league_id)

    @registry.tool("get_draft_info", "Get a specific draft", DraftArgs)
    async def get_draft_info(args: DraftArgs):
        draft = await client.get_draft(args.draft_id)
        if draft is None:
            raise ResolutionError("Draft not found", {"draft_id": args.draft_id})
        return draft

    @registry.tool("get_draft_picks", "Get all picks made in a draft", DraftArgs)
    async def get_draft_picks(args: DraftArgs):
        return await client.get_draft_picks(args.draft_id)

    @registry.tool("get_draft_traded_picks", "Get traded picks in a draft", DraftArgs)
    async def get_draft_traded_picks(args: DraftArgs):
        return await client.get_draft_traded_picks(args.draft_id)

    # ==================== My Teams ====================

    @registry.tool(
        "show_my_teams", "Show every configured account and league with roster IDs"
    )
    async def show_my_teams(args):
        return await assistant.accounts.show_my_teams()

    @registry.tool(
        "show_my_matchup",
        "Get your matchup for any week: actual scores for past weeks, "
        "projections for the current or future weeks",
        MyWeekArgs,
    )
    async def show_my_matchup(args: MyWeekArgs):
        return await assistant.matchups.my_matchup(args.week, args.league_hint)

    @registry.tool(
        "show_my_season_record",
        "Get your season record with weekly results and scoring averages",
        LeagueHintArgs,
    )
    async def show_my_season_record(args: LeagueHintArgs):
        return await assistant.matchups.season_record(args.league_hint)

    @registry.tool(
        "show_my_opponent", "Get your opponent for a week including avatar", MyWeekArgs
    )
    async def show_my_opponent(args: MyWeekArgs):
        return await assistant.matchups.my_opponent(args.week, args.league_hint)

    @registry.tool(
        "get_user_avatar", "Get the avatar URL for a user (full size or thumbnail)", AvatarArgs
    )
    async def get_user_avatar(args: AvatarArgs):
        return await assistant.accounts.avatar(args.username, args.user_id, args.thumbnail)

    # ==================== Analytics ====================

    @registry.tool(
        "analyze_trade",
        "Evaluate trade fairness with player values and positional impact",
        TradeArgs,
    )
    async def analyze_trade(args: TradeArgs):
        return await assistant.trades.evaluate_trade(
            args.league_id,
            args.roster_id_1,
            args.roster_id_2,
            args.players_from_1,
            args.players_from_2,
        )

    @registry.tool(
        "analyze_trade_targets",
        "Find players on other rosters at your positions of need",
        LeagueRosterArgs,
    )
    async def analyze_trade_targets(args: LeagueRosterArgs):
        return await assistant.trade_targets.find_targets(args.league_id, args.roster_id)

    @registry.tool(
        "suggest_waiver_pickups", "Get waiver wire recommendations based on team needs", WaiverArgs
    )
    async def suggest_waiver_pickups(args: WaiverArgs):
        return await assistant.waivers.suggest_pickups(
            args.league_id, args.roster_id, args.position, args.limit
        )

    @registry.tool("get_free_agents", "Get available free agents in a league", FreeAgentArgs)
    async def get_free_agents(args: FreeAgentArgs):
        return await assistant.waivers.free_agents(args.league_id, args.position)

    @registry.tool(
        "preview_matchup", "Preview a matchup with projections and analysis", PreviewArgs
    )
    async def preview_matchup(args: PreviewArgs):
        return await assistant.matchups.preview(args.league_id, args.week, args.roster_id)

    @registry.tool(
        "optimize_lineup", "Analyze and optimize a lineup for a specific week", LineupArgs
    )
    async def optimize_lineup(args: LineupArgs):
        return await assistant.lineups.evaluate_lineup(
            args.league_id, args.roster_id, args.week
        )

    @registry.tool(
        "get_matchup_scores", "Get live or final scores for every matchup in a week", LeagueWeekArgs
    )
    async def get_matchup_scores(args: LeagueWeekArgs):
        return await assistant.matchups.matchup_scores(args.league_id, args.week)

    return registry
