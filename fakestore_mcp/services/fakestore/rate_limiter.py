import logging
import time
from collections import deque
from typing import Callable, Deque

from fakestore_mcp.services.fakestore.errors import RateLimitError

logger = logging.getLogger(__name__)


class RequestRateLimiter:
    """Soft cap on upstream requests per time window.

    Each send is stamped with the injected clock and forgotten once it is
    older than the window. This is a best-effort counter for one process,
    not a distributed limiter.
    """

    def __init__(self, max_requests: int = 100, window_seconds: float = 60,
                 clock: Callable[[], float] = time.monotonic):
        if max_requests <= 0:
            raise ValueError("max_requests must be > 0")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be > 0")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._sent: Deque[float] = deque()

    def _expire(self, now: float):
        while self._sent and now - self._sent[0] >= self.window_seconds:
            self._sent.popleft()

    @property
    def sent_in_window(self) -> int:
        """Requests counted against the current window"""
        self._expire(self._clock())
        return len(self._sent)

    def acquire(self):
        """Count one outgoing request or raise RateLimitError"""
        now = self._clock()
        self._expire(now)
        if len(self._sent) >= self.max_requests:
            logger.warning(f"Rate limit reached: {len(self._sent)} requests in {self.window_seconds}s")
            raise RateLimitError(
                f"Rate limit exceeded: at most {self.max_requests} requests "
                f"per {self.window_seconds:g} seconds"
            )
        self._sent.append(now)

    def reset(self):
        self._sent.clear()
