"""Starlette middleware applying the fixed-window rate limiter."""

from typing import Any, Optional

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.ratelimit.fixed_window_limiter import (
    FixedWindowRateLimiter,
    RateLimitDecision,
)

logger = structlog.get_logger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later"


def describe_window(seconds: float) -> str:
    """Human readable window length, e.g. 900 -> "15 minutes".

    Examples:
        >>> describe_window(900)
        '15 minutes'
        >>> describe_window(3600)
        '1 hour'
        >>> describe_window(45)
        '45 seconds'
    """
    total = int(seconds)
    for unit_s, name in ((3600, "hour"), (60, "minute")):
        if total >= unit_s and total % unit_s == 0:
            count = total // unit_s
            return f"{count} {name}" + ("s" if count != 1 else "")
    return f"{total} second" + ("s" if total != 1 else "")


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects clients that exceed the request cap with a 429 JSON body.

    Every response carries the standard ``RateLimit-*`` headers; rejected
    ones also carry ``Retry-After``.

    Examples:
        >>> limiter = FixedWindowRateLimiter(max_requests=100)
        >>> app.add_middleware(RateLimitMiddleware, limiter=limiter)
    """

    def __init__(
        self,
        app: Any,
        limiter: Optional[FixedWindowRateLimiter] = None,
        enabled: bool = True,
    ) -> None:
        super().__init__(app)
        self.limiter = limiter or FixedWindowRateLimiter()
        self.enabled = enabled

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        if not self.enabled:
            return await call_next(request)

        key = self._client_key(request)
        decision = self.limiter.hit(key)

        if not decision.allowed:
            logger.warning(
                "ratelimit.rejected",
                client=key,
                path=request.url.path,
                reset_after_s=decision.reset_after_s,
            )
            response = JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={
                    "success": False,
                    "error": RATE_LIMIT_MESSAGE,
                    "retry_after": describe_window(self.limiter.window_seconds),
                },
            )
            response.headers["Retry-After"] = str(decision.reset_after_s)
            self._apply_headers(response, decision)
            return response

        response = await call_next(request)
        self._apply_headers(response, decision)
        return response

    @staticmethod
    def _apply_headers(response: Any, decision: RateLimitDecision) -> None:
        response.headers["RateLimit-Limit"] = str(decision.limit)
        response.headers["RateLimit-Remaining"] = str(decision.remaining)
        response.headers["RateLimit-Reset"] = str(decision.reset_after_s)

    @staticmethod
    def _client_key(request: Request) -> str:
        if request.client and request.client.host:
            return request.client.host
        return "unknown"
