"""Pytest configuration and shared fixtures."""

import pytest

from geosync.application.use_cases.geocoding_policy import IntervalLimiter


class FakeClock:
    """Manual clock; ``sleep`` advances time instead of waiting."""

    def __init__(self, now: float = 0.0):
        self.now = now
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limiter(clock):
    return IntervalLimiter(min_interval=1.0, clock=clock, sleep=clock.sleep)
