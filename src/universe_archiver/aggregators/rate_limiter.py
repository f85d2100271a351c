"""Pacing of network calls."""

import logging
import threading
from abc import ABC, abstractmethod
from time import monotonic, sleep

logger = logging.getLogger(__name__)

DEFAULT_MIN_INTERVAL = 1.0


class RateLimiter(ABC):
    """Decides when the next network call may begin."""

    @abstractmethod
    def acquire(self) -> None:
        """Block until the next call is allowed."""
        pass


class MinIntervalRateLimiter(RateLimiter):
    """Spaces successive calls by at least ``min_interval`` seconds.

    The first call never waits. The limiter is shared by reference by every
    caller of one run and is guarded by a lock, so calls stay serialized even
    when they come from several threads.
    """

    def __init__(self, min_interval: float = DEFAULT_MIN_INTERVAL):
        if min_interval < 0:
            raise ValueError("min_interval must not be negative")
        self.min_interval = min_interval
        self._last_call: float | None = None
        self._lock = threading.Lock()

    def acquire(self) -> None:
        with self._lock:
            if self._last_call is not None:
                remaining = self.min_interval - (monotonic() - self._last_call)
                if remaining > 0:
                    logger.debug(f"Waiting {remaining:.2f}s before next request")
                    sleep(remaining)
            self._last_call = monotonic()


class NullRateLimiter(RateLimiter):
    """Never waits. Used when no remote calls are made."""

    def acquire(self) -> None:
        return None
