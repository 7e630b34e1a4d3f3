"""Tests for the current-period cache."""

import pytest

from sleeper_assistant.cache import PeriodCache
from sleeper_assistant.clients import SleeperAPIError

from conftest import LEAGUE_ID, MATCHUPS, ROSTERS, WEEK


class Clock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> Clock:
    return Clock()


@pytest.fixture
async def cache(league_fake, client, clock) -> PeriodCache:
    await client.get_nfl_state()
    return PeriodCache(client, ttl=300.0, clock=clock)


MATCHUPS_PATH = f"/league/{LEAGUE_ID}/matchups/{WEEK}"


async def test_active_week_is_served_from_cache(cache, league_fake):
    first = await cache.matchups(LEAGUE_ID, WEEK)
    second = await cache.matchups(LEAGUE_ID, WEEK)

    assert second is first
    assert league_fake.core_count(MATCHUPS_PATH) == 1


async def test_other_weeks_always_go_upstream(cache, league_fake):
    league_fake.core(f"/league/{LEAGUE_ID}/matchups/4", MATCHUPS)

    await cache.matchups(LEAGUE_ID, 4)
    await cache.matchups(LEAGUE_ID, 4)

    assert league_fake.core_count(f"/league/{LEAGUE_ID}/matchups/4") == 2
    assert cache.snapshot.matchups == {}


async def test_nothing_is_active_before_state_is_observed(league_fake, client, clock):
    cache = PeriodCache(client, ttl=300.0, clock=clock)

    assert not cache.is_active(WEEK)
    await cache.matchups(LEAGUE_ID, WEEK)
    await cache.matchups(LEAGUE_ID, WEEK)

    assert league_fake.core_count(MATCHUPS_PATH) == 2


async def test_expiry_clears_every_league(cache, league_fake, clock):
    league_fake.core("/league/L2/rosters", ROSTERS)
    await cache.rosters(LEAGUE_ID, WEEK)
    await cache.rosters("L2", WEEK)

    clock.now += 301
    await cache.matchups(LEAGUE_ID, WEEK)

    assert set(cache.snapshot.rosters) == set()
    assert set(cache.snapshot.matchups) == {LEAGUE_ID}


async def test_every_store_restamps_the_shared_timestamp(cache, league_fake, clock):
    await cache.matchups(LEAGUE_ID, WEEK)
    clock.now += 200
    await cache.rosters(LEAGUE_ID, WEEK)
    clock.now += 150

    await cache.matchups(LEAGUE_ID, WEEK)

    assert league_fake.core_count(MATCHUPS_PATH) == 1


async def test_failed_fetch_is_not_cached(cache, league_fake):
    league_fake.core(MATCHUPS_PATH, {"error": "boom"}, status=500)
    with pytest.raises(SleeperAPIError):
        await cache.matchups(LEAGUE_ID, WEEK)
    assert cache.snapshot.matchups == {}

    league_fake.core(MATCHUPS_PATH, MATCHUPS)
    entries = await cache.matchups(LEAGUE_ID, WEEK)

    assert [e.roster_id for e in entries] == [1, 2]
    assert league_fake.core_count(MATCHUPS_PATH) == 2


async def test_projections_are_only_remembered_for_the_active_week(cache):
    cache.remember_projection(LEAGUE_ID, "qb1", WEEK, 21.5)
    cache.remember_projection(LEAGUE_ID, "qb1", WEEK + 1, 30.0)

    assert cache.cached_projection(LEAGUE_ID, "qb1", WEEK) == 21.5
    assert cache.cached_projection(LEAGUE_ID, "qb1", WEEK + 1) is None
    assert cache.cached_projection("other", "qb1", WEEK) is None


async def test_new_period_makes_old_week_inactive(cache, league_fake):
    await cache.matchups(LEAGUE_ID, WEEK)
    league_fake.core("/state/nfl", {"week": WEEK + 1, "season": "2024"})
    await cache.client.get_nfl_state()

    await cache.matchups(LEAGUE_ID, WEEK)

    assert league_fake.core_count(MATCHUPS_PATH) == 2
