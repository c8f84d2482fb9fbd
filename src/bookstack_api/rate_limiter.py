"""Token bucket rate limiter shared by every request a client sends.

Example:
    >>> limiter = RateLimiter(rate=180)  # 180 requests per second
    >>> limiter.take()  # Blocks if the bucket is empty
    0.0
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable


class RateLimiter:
    """Thread-safe token bucket.

    The bucket holds at most ``rate`` tokens and refills continuously at
    ``rate / per`` tokens per second. It starts full, so up to ``rate``
    calls are admitted immediately and the next one waits for a refill.

    Attributes:
        rate: Tokens admitted per interval (bucket capacity)
        per: Interval length in seconds
    """

    def __init__(
        self,
        rate: int = 180,
        per: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the limiter.

        Args:
            rate: Requests admitted per interval (must be positive)
            per: Interval length in seconds (default: 1.0)
            clock: Monotonic time source, replaceable in tests
            sleep: Sleep function, replaceable in tests
        """
        if rate <= 0:
            raise ValueError(f"rate must be positive, got {rate}")
        if per <= 0:
            raise ValueError(f"per must be positive, got {per}")

        self.rate = rate
        self.per = per
        self._clock = clock
        self._sleep = sleep
        self._tokens = float(rate)
        self._last_update = clock()
        self._lock = threading.Lock()

    @property
    def fill_rate(self) -> float:
        """Tokens added per second."""
        return self.rate / self.per

    def _refill(self, now: float) -> None:
        elapsed = max(0.0, now - self._last_update)
        self._tokens = min(float(self.rate), self._tokens + elapsed * self.fill_rate)
        self._last_update = now

    def take(self) -> float:
        """Take one token, blocking until one is available.

        Holding the lock while sleeping queues concurrent callers in order.

        Returns:
            Time waited in seconds
        """
        with self._lock:
            self._refill(self._clock())

            wait_time = 0.0
            if self._tokens < 1:
                wait_time = (1 - self._tokens) / self.fill_rate
                self._sleep(wait_time)
                self._refill(self._clock())

            self._tokens -= 1
            return wait_time

    def reset(self) -> None:
        """Refill the bucket to capacity."""
        with self._lock:
            self._tokens = float(self.rate)
            self._last_update = self._clock()

    @property
    def available_tokens(self) -> float:
        """Current available tokens (approximate)."""
        elapsed = max(0.0, self._clock() - self._last_update)
        return min(float(self.rate), self._tokens + elapsed * self.fill_rate)


__all__ = ["RateLimiter"]
