import math
import threading
import time
from collections.abc import Callable

from narrato.config.settings import Settings
from narrato.rate_limiting.exceptions import RateLimitedError


class FixedWindowRateLimiter:
    """Process-wide fixed-window admission gate for generative rewrite calls.

    Up to ``capacity`` acquires are granted per window of ``window_seconds``.
    The window restarts on the first acquire at or after its reset time, so a
    full burst is allowed right after a reset. One instance is shared by every
    request in the process. Each acquire runs under a single lock.
    """

    def __init__(
        self,
        capacity: int = 10,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self._capacity = capacity
        self._window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._count = 0
        self._window_reset_at = clock() + window_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "FixedWindowRateLimiter":
        return cls(
            capacity=settings.rate_limit_capacity,
            window_seconds=settings.rate_limit_window_seconds,
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    @property
    def window_reset_at(self) -> float:
        with self._lock:
            return self._window_reset_at

    def try_acquire(self) -> None:
        """Take one unit of budget.

        Raises:
            RateLimitedError: with the whole seconds left until the window resets.
        """
        with self._lock:
            now = self._clock()
            if now >= self._window_reset_at:
                self._count = 0
                self._window_reset_at = now + self._window_seconds
            if self._count >= self._capacity:
                raise RateLimitedError(math.ceil(self._window_reset_at - now))
            self._count += 1
