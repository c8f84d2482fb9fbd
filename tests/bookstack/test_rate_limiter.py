"""Tests for the token bucket rate limiter."""

import threading

import pytest

from bookstack_api.rate_limiter import RateLimiter


class FakeClock:
    """Manual clock whose sleep advances time."""

    def __init__(self):
        self.now = 100.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


class TestRateLimiter:
    """Test RateLimiter class."""

    def test_defaults(self):
        """Test default rate and interval."""
        limiter = RateLimiter()
        assert limiter.rate == 180
        assert limiter.per == 1.0
        assert limiter.fill_rate == 180.0

    @pytest.mark.parametrize("rate,per", [(0, 1.0), (-1, 1.0), (10, 0)])
    def test_invalid_arguments(self, rate, per):
        """Test non-positive rate or interval is rejected."""
        with pytest.raises(ValueError):
            RateLimiter(rate=rate, per=per)

    def test_burst_up_to_rate_is_immediate(self, clock):
        """Test the first R takes do not wait."""
        limiter = RateLimiter(rate=5, clock=clock, sleep=clock.sleep)

        waits = [limiter.take() for _ in range(5)]

        assert waits == [0.0] * 5
        assert clock.sleeps == []

    def test_take_beyond_rate_waits_for_refill(self, clock):
        """Test the (R+1)th take within one interval is delayed."""
        limiter = RateLimiter(rate=5, per=1.0, clock=clock, sleep=clock.sleep)
        for _ in range(5):
            limiter.take()

        waited = limiter.take()

        assert waited == pytest.approx(0.2)
        assert clock.sleeps == [pytest.approx(0.2)]

    def test_sleep_refill_leaves_no_spare_tokens(self, clock):
        """Test each wait earns exactly one token."""
        limiter = RateLimiter(rate=5, per=1.0, clock=clock, sleep=clock.sleep)
        for _ in range(5):
            limiter.take()

        waits = [limiter.take() for _ in range(3)]

        assert waits == [pytest.approx(0.2)] * 3
        assert clock.now == pytest.approx(100.6)
        assert limiter.available_tokens == pytest.approx(0.0, abs=1e-9)

    def test_interval_scales_wait(self, clock):
        """Test a longer interval refills more slowly."""
        limiter = RateLimiter(rate=2, per=10.0, clock=clock, sleep=clock.sleep)
        limiter.take()
        limiter.take()

        assert limiter.take() == pytest.approx(5.0)

    def test_refill_after_interval(self, clock):
        """Test the bucket refills after a full interval."""
        limiter = RateLimiter(rate=3, clock=clock, sleep=clock.sleep)
        for _ in range(3):
            limiter.take()

        clock.now += 1.0

        assert [limiter.take() for _ in range(3)] == [0.0, 0.0, 0.0]

    def test_refill_never_exceeds_capacity(self, clock):
        """Test idle time does not bank more than rate tokens."""
        limiter = RateLimiter(rate=3, clock=clock, sleep=clock.sleep)
        clock.now += 60.0

        assert limiter.available_tokens == 3.0
        for _ in range(3):
            limiter.take()
        assert limiter.take() > 0

    def test_reset(self, clock):
        """Test reset refills the bucket."""
        limiter = RateLimiter(rate=2, clock=clock, sleep=clock.sleep)
        limiter.take()
        limiter.take()

        limiter.reset()

        assert limiter.available_tokens == 2.0
        assert limiter.take() == 0.0

    def test_concurrent_takes_admit_rate_without_waiting(self):
        """Test concurrent callers share one bucket."""
        limiter = RateLimiter(rate=50, per=60.0)
        waits = []
        lock = threading.Lock()

        def worker():
            waited = limiter.take()
            with lock:
                waits.append(waited)

        threads = [threading.Thread(target=worker) for _ in range(50)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(waits) == 50
        assert all(w == 0.0 for w in waits)
        assert limiter.available_tokens < 1.0
