import pytest

from colorwalk.rate_limit import DAY_SECONDS, RateLimiter, RateLimitExceeded


class FakeClock:
    def __init__(self):
        self.now = 1000.0
        self.sleeps = []

    def time(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


def _limiter(clock, **kw):
    return RateLimiter(clock=clock.time, sleep=clock.sleep, **kw)


def test_under_the_cap_never_sleeps():
    clock = FakeClock()
    rl = _limiter(clock, rpm=3)
    assert [rl.wait() for _ in range(3)] == [0.0, 0.0, 0.0]
    assert clock.sleeps == []


def test_long_rpm_wait_is_refused_not_slept():
    clock = FakeClock()
    rl = _limiter(clock, rpm=2, max_sleep=5.0)
    rl.wait()
    rl.wait()
    with pytest.raises(RateLimitExceeded):
        rl.wait()
    assert clock.sleeps == []
    assert len(rl.events) == 2
    assert rl.daily_count == 2


def test_short_rpm_wait_sleeps_then_records():
    clock = FakeClock()
    rl = _limiter(clock, rpm=1, max_sleep=5.0)
    rl.wait()
    clock.now += 57
    slept = rl.wait()
    assert slept == pytest.approx(3.05)
    assert clock.sleeps == [pytest.approx(3.05)]
    assert len(rl.events) == 1


def test_old_events_leave_the_window():
    clock = FakeClock()
    rl = _limiter(clock, rpm=1)
    rl.wait()
    clock.now += 61
    assert rl.wait() == 0.0


def test_daily_limit_refuses_without_sleeping():
    clock = FakeClock()
    rl = _limiter(clock, rpm=100, daily_limit=2)
    rl.wait()
    rl.wait()
    with pytest.raises(RateLimitExceeded):
        rl.wait()
    assert clock.sleeps == []


def test_daily_quota_resets_after_a_day():
    clock = FakeClock()
    rl = _limiter(clock, rpm=100, daily_limit=1)
    rl.wait()
    clock.now += DAY_SECONDS
    assert rl.wait() == 0.0
    assert rl.daily_count == 1


def test_refusal_is_a_value_error():
    assert issubclass(RateLimitExceeded, ValueError)
