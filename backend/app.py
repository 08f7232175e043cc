from __future__ import annotations

# Standard library
import time
from contextlib import asynccontextmanager
from typing import Any, Optional

# Third-party
import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from api.calculator import AVAILABLE_ENDPOINTS
from api.calculator import router as calculator_router
from api.schemas import ErrorResponse, NotFoundResponse
from application.energy.orchestrators.energy_orchestrator import (
    EnergyOrchestrator,
)
from infrastructure.config import Settings, load_settings
from infrastructure.logging_setup import configure_logging
from infrastructure.ratelimit import FixedWindowRateLimiter, RateLimitMiddleware

logger = structlog.get_logger("startup")


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    """Log configuration on startup and shutdown; no resources to manage."""
    settings: Settings = app.state.settings
    logger.info(
        "lifespan.ready",
        port=settings.port,
        version=settings.app_version,
        rate_limit_enabled=settings.rate_limit_enabled,
        rate_limit_max_requests=settings.rate_limit_max_requests,
        rate_limit_window_s=settings.rate_limit_window_s,
    )
    yield
    logger.info("lifespan.shutdown")


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unmatched path or method -> 404 with the list of endpoints."""
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=NotFoundResponse(
                error="Endpoint not found",
                available_endpoints=AVAILABLE_ENDPOINTS,
            ).model_dump(),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


def create_app(
    settings: Optional[Settings] = None,
    rate_limiter: Optional[FixedWindowRateLimiter] = None,
    orchestrator: Optional[EnergyOrchestrator] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Runtime settings (read from the environment if None)
        rate_limiter: Limiter instance owning the per-client counters;
            a new one sized from ``settings`` is created if None
        orchestrator: Calculation orchestrator (default services if None)

    Returns:
        Configured FastAPI app
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    limiter = rate_limiter or FixedWindowRateLimiter(
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_s,
    )

    application = FastAPI(
        title="TDEE Calculator API",
        version=settings.app_version,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.started_at = time.monotonic()
    application.state.rate_limiter = limiter
    application.state.orchestrator = orchestrator or EnergyOrchestrator()

    # Last added runs first: CORS wraps the limiter so 429s carry CORS headers
    application.add_middleware(
        RateLimitMiddleware,
        limiter=limiter,
        enabled=settings.rate_limit_enabled,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(
        StarletteHTTPException, _http_exception_handler  # type: ignore[arg-type]
    )
    application.include_router(calculator_router)
    return application


app = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    _settings: Settings = app.state.settings
    uvicorn.run(app, host=_settings.host, port=_settings.port)
