"""Rate limiting for the HTTP layer."""

from infrastructure.ratelimit.fixed_window_limiter import (
    FixedWindowRateLimiter,
    RateLimitDecision,
)
from infrastructure.ratelimit.middleware import RateLimitMiddleware

__all__ = [
    "FixedWindowRateLimiter",
    "RateLimitDecision",
    "RateLimitMiddleware",
]
