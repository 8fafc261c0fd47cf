# utils/rate_limit.py
import logging
import math
import threading
import time
from collections import deque

import requests

from config import Config

logger = logging.getLogger(__name__)


class RateLimiter:
    """Sliding-window limiter: at most max_requests in any trailing window.

    Times are in seconds. clock and sleep are injectable so the window
    accounting can be driven by a fake clock in tests.
    """

    def __init__(self, max_requests=15, window=30.0, margin=0.1, clock=time.monotonic, sleep=time.sleep):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window <= 0:
            raise ValueError("window must be positive")
        self.max_requests = max_requests
        self.window = window
        self.margin = margin
        self._clock = clock
        self._sleep = sleep
        self._timestamps = deque()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, **kwargs):
        return cls(
            max_requests=Config.RATE_LIMIT_REQUESTS,
            window=Config.RATE_LIMIT_WINDOW_MS / 1000.0,
            margin=Config.RATE_LIMIT_MARGIN_MS / 1000.0,
            **kwargs
        )

    def _prune(self, now):
        while self._timestamps and now - self._timestamps[0] >= self.window:
            self._timestamps.popleft()

    def wait_time(self, now):
        """Seconds the next request must wait at `now` (0 if it may go)."""
        self._prune(now)
        if len(self._timestamps) < self.max_requests:
            return 0.0
        return self.window - (now - self._timestamps[0]) + self.margin

    def acquire(self):
        """Block until a request may be issued, then record it.

        Returns the number of seconds spent waiting.
        """
        with self._lock:
            delay = self.wait_time(self._clock())
            if delay > 0:
                logger.info(f"Rate limit reached, waiting {math.ceil(delay)}s...")
                self._sleep(delay)
            self._timestamps.append(self._clock())
            return max(delay, 0.0)

    @property
    def in_window(self):
        with self._lock:
            self._prune(self._clock())
            return len(self._timestamps)


class RateLimitedClient:
    """requests.Session wrapper that passes every GET through a RateLimiter."""

    def __init__(self, limiter=None, session=None, timeout=None):
        self.limiter = limiter or RateLimiter.from_config()
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else Config.BIBLE_API_TIMEOUT

    def request(self, url):
        self.limiter.acquire()
        logger.debug(f"GET {url}")
        return self.session.get(url, timeout=self.timeout)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
