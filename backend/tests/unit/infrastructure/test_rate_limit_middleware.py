"""Unit tests for RateLimitMiddleware."""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from infrastructure.ratelimit.fixed_window_limiter import FixedWindowRateLimiter
from infrastructure.ratelimit.middleware import (
    RATE_LIMIT_MESSAGE,
    RateLimitMiddleware,
    describe_window,
)


class TestRateLimitMiddleware:
    """Test RateLimitMiddleware implementation."""

    @pytest.fixture
    def limiter(self):
        return FixedWindowRateLimiter(max_requests=2, window_seconds=900)

    @pytest.fixture
    def middleware(self, limiter):
        return RateLimitMiddleware(FastAPI(), limiter=limiter)

    @pytest.fixture
    def mock_request(self):
        request = MagicMock(spec=Request)
        request.client = MagicMock(host="10.0.0.1")
        request.url = MagicMock(path="/calculate")
        return request

    @staticmethod
    async def call_next(req):
        return JSONResponse(content={"message": "success"})

    @pytest.mark.asyncio
    async def test_admitted_request_gets_headers(self, middleware, mock_request):
        response = await middleware.dispatch(mock_request, self.call_next)

        assert response.status_code == 200
        assert response.headers["RateLimit-Limit"] == "2"
        assert response.headers["RateLimit-Remaining"] == "1"
        assert response.headers["RateLimit-Reset"] == "900"

    @pytest.mark.asyncio
    async def test_rejects_after_cap(self, middleware, mock_request):
        await middleware.dispatch(mock_request, self.call_next)
        await middleware.dispatch(mock_request, self.call_next)

        response = await middleware.dispatch(mock_request, self.call_next)

        assert response.status_code == 429
        body = response.body.decode()
        assert RATE_LIMIT_MESSAGE in body
        assert '"retry_after":"15 minutes"' in body
        assert '"success":false' in body
        assert response.headers["Retry-After"] == "900"
        assert response.headers["RateLimit-Remaining"] == "0"

    @pytest.mark.asyncio
    async def test_disabled_middleware_passes_through(self, limiter, mock_request):
        middleware = RateLimitMiddleware(FastAPI(), limiter=limiter, enabled=False)

        for _ in range(5):
            response = await middleware.dispatch(mock_request, self.call_next)

        assert response.status_code == 200
        assert "RateLimit-Limit" not in response.headers
        assert limiter.tracked_keys() == 0

    @pytest.mark.asyncio
    async def test_missing_client_uses_shared_key(self, middleware, limiter, mock_request):
        mock_request.client = None

        await middleware.dispatch(mock_request, self.call_next)

        assert limiter.hit("unknown").remaining == 0

    def test_default_limiter_is_created(self):
        middleware = RateLimitMiddleware(FastAPI())

        assert middleware.limiter.max_requests == 100
        assert middleware.limiter.window_seconds == 900


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (900, "15 minutes"),
        (60, "1 minute"),
        (3600, "1 hour"),
        (7200, "2 hours"),
        (90, "90 seconds"),
        (1, "1 second"),
    ],
)
def test_describe_window(seconds, expected):
    assert describe_window(seconds) == expected
