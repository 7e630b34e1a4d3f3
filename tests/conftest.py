"""Shared fixtures: a fake Sleeper API served through httpx.MockTransport."""

from typing import Any

import httpx
import pytest

from sleeper_assistant.cache import PeriodCache, PlayerDirectory
from sleeper_assistant.clients import RequestPacer, SleeperClient
from sleeper_assistant.config import AccountRegistry, Settings
from sleeper_assistant.models import Account, LeagueBinding

LEAGUE_ID = "L1"
SEASON = "2024"
WEEK = 5

CORE = "/v1"
PROJECTIONS = "/projections/nfl"


class FakeSleeper:
    """
    Canned Sleeper responses keyed by URL path.

    Unknown paths return 404. A None payload is sent as a JSON null body;
    an exception is raised from the transport; raw bytes are returned as the
    body undecoded.
    """

    def __init__(self):
        self.routes: dict[str, tuple[int, Any]] = {}
        self.calls: list[str] = []
        self.requests: list[httpx.Request] = []

    def add(self, path: str, payload: Any = None, status: int = 200) -> None:
        self.routes[path] = (status, payload)

    def core(self, path: str, payload: Any = None, status: int = 200) -> None:
        self.add(f"{CORE}{path}", payload, status)

    def count(self, path: str) -> int:
        return self.calls.count(path)

    def core_count(self, path: str) -> int:
        return self.count(f"{CORE}{path}")

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append(path)
        self.requests.append(request)
        if path not in self.routes:
            return httpx.Response(404, content=b"null")
        status, payload = self.routes[path]
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, bytes):
            return httpx.Response(status, content=payload)
        if payload is None:
            return httpx.Response(status, content=b"null")
        return httpx.Response(status, json=payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


# ==================== Sample league ====================

PLAYERS = {
    "qb1": {"first_name": "Josh", "last_name": "Allen", "position": "QB", "team": "BUF", "status": "Active"},
    "qb2": {"first_name": "Jared", "last_name": "Goff", "position": "QB", "team": "DET", "status": "Active"},
    "rb1": {"first_name": "Bijan", "last_name": "Robinson", "position": "RB", "team": "ATL", "status": "Active"},
    "rb2": {"first_name": "Breece", "last_name": "Hall", "position": "RB", "team": "NYJ", "status": "Active"},
    "rb3": {"first_name": "James", "last_name": "Cook", "position": "RB", "team": "BUF", "status": "Active"},
    "rb4": {"first_name": "Kyren", "last_name": "Williams", "position": "RB", "team": "LAR", "status": "Active"},
    "wr1": {"first_name": "CeeDee", "last_name": "Lamb", "position": "WR", "team": "DAL", "status": "Active"},
    "wr2": {"first_name": "Puka", "last_name": "Nacua", "position": "WR", "team": "LAR", "status": "Active", "injury_status": "Questionable"},
    "wr3": {"first_name": "Zay", "last_name": "Flowers", "position": "WR", "team": "BAL", "status": "Active"},
    "wr4": {"first_name": "Garrett", "last_name": "Wilson", "position": "WR", "team": "NYJ", "status": "Active"},
    "te1": {"first_name": "Sam", "last_name": "LaPorta", "position": "TE", "team": "DET", "status": "Active"},
    "te2": {"first_name": "Trey", "last_name": "McBride", "position": "TE", "team": "ARI", "status": "Active"},
    "fa_rb": {"first_name": "Zach", "last_name": "Charbonnet", "position": "RB", "team": "SEA", "status": "Active"},
    "fa_wr": {"first_name": "Adam", "last_name": "Thielen", "position": "WR", "team": "CAR", "status": "Active"},
    "fa_te": {"first_name": "Cade", "last_name": "Otton", "position": "TE", "team": "TB", "status": "Active"},
    "k1": {"first_name": "Justin", "last_name": "Tucker", "position": "K", "team": "BAL", "status": "Active"},
    "retired": {"first_name": "Old", "last_name": "Timer", "position": "RB", "team": None, "status": "Inactive"},
}

LEAGUE = {
    "league_id": LEAGUE_ID,
    "name": "Dynasty Warriors",
    "season": SEASON,
    "status": "in_season",
    "total_rosters": 2,
    "roster_positions": ["QB", "RB", "RB", "WR", "WR", "TE", "FLEX", "BN", "BN"],
    "scoring_settings": {
        "pass_yd": 0.04,
        "pass_td": 4,
        "rush_yd": 0.1,
        "rush_td": 6,
        "rec": 1,
        "rec_yd": 0.1,
        "rec_td": 6,
    },
}

USERS = [
    {"user_id": "u1", "username": "alice", "display_name": "Alice", "avatar": "av1"},
    {"user_id": "u2", "username": "bob", "display_name": "Bob", "avatar": "av2"},
]

ROSTERS = [
    {
        "roster_id": 1,
        "owner_id": "u1",
        "players": ["qb1", "rb1", "rb2", "rb3", "wr1", "wr2", "wr3", "te1"],
        "starters": ["qb1", "rb1", "rb2", "wr1", "wr2", "te1", "rb3"],
        "settings": {
            "wins": 3,
            "losses": 1,
            "waiver_position": 2,
            "total_moves": 4,
            "waiver_budget_total": 100,
            "waiver_budget_used": 30,
        },
    },
    {
        "roster_id": 2,
        "owner_id": "u2",
        "players": ["qb2", "rb4", "wr4", "te2", "k1"],
        "starters": ["qb2", "rb4", "wr4", "te2", "k1"],
        "settings": {"wins": 1, "losses": 3},
    },
]

MATCHUPS = [
    {"roster_id": 1, "matchup_id": 1, "points": 110.5, "starters": ["qb1", "rb1"], "starters_points": [25.0, 15.5]},
    {"roster_id": 2, "matchup_id": 1, "points": 98.2, "starters": ["qb2", "rb4"], "starters_points": [20.0, 12.0]},
]

STATE = {"week": WEEK, "season": SEASON, "season_type": "regular"}


def install_league(fake: FakeSleeper, matchups_by_week: dict[int, list] | None = None) -> None:
    """Install the sample league, its members and rosters, players and state."""
    fake.core(f"/league/{LEAGUE_ID}", LEAGUE)
    fake.core(f"/league/{LEAGUE_ID}/users", USERS)
    fake.core(f"/league/{LEAGUE_ID}/rosters", ROSTERS)
    fake.core("/players/nfl", PLAYERS)
    fake.core("/state/nfl", STATE)
    fake.core("/user/alice", USERS[0])
    fake.core("/user/u1", USERS[0])
    for week, entries in (matchups_by_week or {WEEK: MATCHUPS}).items():
        fake.core(f"/league/{LEAGUE_ID}/matchups/{week}", entries)


# ==================== Fixtures ====================


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, request_interval=0)


@pytest.fixture
def fake() -> FakeSleeper:
    return FakeSleeper()


@pytest.fixture
def league_fake(fake: FakeSleeper) -> FakeSleeper:
    install_league(fake)
    return fake


@pytest.fixture
async def client(fake: FakeSleeper, settings: Settings):
    async with SleeperClient(
        settings, pacer=RequestPacer(0), transport=fake.transport
    ) as client:
        yield client


@pytest.fixture
def players(client: SleeperClient) -> PlayerDirectory:
    return PlayerDirectory(client)


@pytest.fixture
def period_cache(client: SleeperClient) -> PeriodCache:
    return PeriodCache(client, ttl=300.0)


@pytest.fixture
def accounts() -> AccountRegistry:
    return AccountRegistry(
        [Account(tag="A", username="alice", leagues=[LeagueBinding(league_id=LEAGUE_ID)])]
    )
