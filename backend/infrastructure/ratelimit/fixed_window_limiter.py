"""
In-memory fixed-window rate limiter.

Counts requests per client key inside a fixed time window. One instance
owns its counter store; it is created by the app factory and injected in
the middleware, so tests can build their own or call ``reset()``.
NOT shared across processes (use Redis or similar for that).
"""

import logging
import math
import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Dict, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of a single hit against the limiter."""

    allowed: bool
    limit: int
    remaining: int
    reset_after_s: int


class FixedWindowRateLimiter:
    """Fixed-window request counter keyed by client address.

    The window for a key starts on its first request; once
    ``window_seconds`` have elapsed the next hit opens a new window.
    Expired windows of other keys are swept at most once per window.
    """

    def __init__(
        self,
        max_requests: int = 100,
        window_seconds: float = 15 * 60,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests <= 0:
            raise ValueError(f"max_requests must be positive, got {max_requests}")
        if window_seconds <= 0:
            raise ValueError(
                f"window_seconds must be positive, got {window_seconds}"
            )
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        # Storage: key -> (window_start, hits)
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._lock = Lock()
        self._last_sweep = clock()

    def hit(self, key: str) -> RateLimitDecision:
        """Record a request for ``key`` and decide whether to admit it.

        Rejected requests are still counted.

        Args:
            key: Client identifier (usually the remote address)

        Returns:
            RateLimitDecision for this request
        """
        now = self._clock()
        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._sweep_expired(now)
            start, hits = self._windows.get(key, (now, 0))
            if now - start >= self.window_seconds:
                start, hits = now, 0
            hits += 1
            self._windows[key] = (start, hits)

        # elapsed first: (now + window) - now can exceed window in floats
        reset_after = max(0, math.ceil(self.window_seconds - (now - start)))
        allowed = hits <= self.max_requests
        if not allowed:
            logger.debug(f"Rate limit exceeded for key: {key} ({hits} hits)")
        return RateLimitDecision(
            allowed=allowed,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - hits),
            reset_after_s=reset_after,
        )

    def reset(self, key: str = "") -> None:
        """Clear the counter for ``key``, or every counter if key is empty."""
        with self._lock:
            if key:
                self._windows.pop(key, None)
            else:
                self._windows.clear()

    def tracked_keys(self) -> int:
        """Number of keys with an open window."""
        with self._lock:
            return len(self._windows)

    def cleanup_expired(self) -> int:
        """Remove all expired windows.

        Returns:
            Number of expired entries removed
        """
        with self._lock:
            return self._sweep_expired(self._clock())

    def _sweep_expired(self, now: float) -> int:
        self._last_sweep = now
        expired = [
            k
            for k, (start, _) in self._windows.items()
            if now - start >= self.window_seconds
        ]
        for k in expired:
            del self._windows[k]
        return len(expired)
