"""Tests for RateLimiter."""

import pytest

from newsriver.search.rate_limit import DEFAULT_REQUEST_INTERVAL, RateLimiter


class FakeClock:
    """Clock that only advances when slept on or moved explicitly."""

    def __init__(self) -> None:
        self.now = 100.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def test_default_interval_respects_upstream_quota() -> None:
    # 225 calls per 15 minutes
    assert DEFAULT_REQUEST_INTERVAL >= 15 * 60 / 225
    assert RateLimiter().min_interval == DEFAULT_REQUEST_INTERVAL


def test_first_call_does_not_sleep(clock: FakeClock) -> None:
    limiter = RateLimiter(4.0, clock=clock, sleep=clock.sleep)
    assert limiter.wait() == 0.0
    assert clock.sleeps == []


def test_consecutive_calls_are_spaced(clock: FakeClock) -> None:
    limiter = RateLimiter(4.0, clock=clock, sleep=clock.sleep)
    for _ in range(3):
        limiter.wait()
    assert clock.sleeps == [4.0, 4.0]


def test_only_sleeps_for_remaining_interval(clock: FakeClock) -> None:
    limiter = RateLimiter(4.0, clock=clock, sleep=clock.sleep)
    limiter.wait()
    clock.now += 1.5
    assert limiter.wait() == pytest.approx(2.5)


def test_no_sleep_when_interval_already_elapsed(clock: FakeClock) -> None:
    limiter = RateLimiter(4.0, clock=clock, sleep=clock.sleep)
    limiter.wait()
    clock.now += 10
    assert limiter.wait() == 0.0
    assert clock.sleeps == []


def test_rejects_negative_interval() -> None:
    with pytest.raises(ValueError, match="negative"):
        RateLimiter(-1)
