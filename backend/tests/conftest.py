"""Integration test fixtures.

Builds a fresh application per test through ``create_app`` so every test
gets its own rate-limiter counters. Unit tests in tests/unit/ only use
the fixtures they request and never touch the app.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, cast

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app import create_app
from infrastructure.config import Settings
from infrastructure.ratelimit import FixedWindowRateLimiter


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the local environment."""
    return Settings()


@pytest.fixture
def rate_limiter(settings: Settings) -> FixedWindowRateLimiter:
    return FixedWindowRateLimiter(
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_s,
    )


@pytest.fixture
def test_app(settings: Settings, rate_limiter: FixedWindowRateLimiter) -> FastAPI:
    return create_app(settings=settings, rate_limiter=rate_limiter)


@pytest_asyncio.fixture
async def client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Client HTTP asincrono per test REST.

    Usa httpx.AsyncClient con ASGITransport esplicito e base_url fittizia
    per coerenza nelle richieste relative.
    """
    transport = ASGITransport(app=cast(Any, test_app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
