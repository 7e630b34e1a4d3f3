"""Tests for RequestPacer spacing."""

import asyncio

import pytest

from sleeper_assistant.clients import RequestPacer, SleeperClient


class FakeClock:
    """Manual clock whose sleep advances time instead of blocking."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def pacer(clock: FakeClock) -> RequestPacer:
    return RequestPacer(0.1, clock=clock, sleep=clock.sleep)


async def test_first_call_does_not_wait(pacer, clock):
    await pacer.wait()
    assert clock.sleeps == []


async def test_waits_out_the_rest_of_the_interval(pacer, clock):
    await pacer.wait()
    clock.now += 0.03
    await pacer.wait()

    assert clock.sleeps == [pytest.approx(0.07)]


async def test_no_wait_once_interval_has_passed(pacer, clock):
    await pacer.wait()
    clock.now += 0.5
    await pacer.wait()

    assert clock.sleeps == []


async def test_concurrent_callers_are_each_spaced(pacer, clock):
    await asyncio.gather(pacer.wait(), pacer.wait(), pacer.wait())

    assert clock.sleeps == [pytest.approx(0.1), pytest.approx(0.1)]
    assert clock.now == pytest.approx(0.2)


async def test_client_requests_go_through_the_pacer(fake, settings):
    clock = FakeClock()
    pacer = RequestPacer(0.1, clock=clock, sleep=clock.sleep)
    fake.core("/state/nfl", {"week": 3, "season": "2024"})

    async with SleeperClient(settings, pacer=pacer, transport=fake.transport) as client:
        await client.get_nfl_state()
        await client.get_nfl_state()

    assert len(clock.sleeps) == 1
