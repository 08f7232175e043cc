"""REST endpoints for BMR/TDEE calculation.

Routes:
    GET  /                 service metadata
    GET  /health           liveness + uptime
    GET  /activity-levels  activity categories and multipliers
    POST /calculate        BMR, TDEE, calorie goals and macros
"""

import time
from datetime import datetime, timezone
from typing import Any

import structlog
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api.schemas import (
    ActivityLevelInfo,
    ActivityLevelsResponse,
    CalculationResponse,
    ErrorResponse,
    HealthResponse,
    ServiceInfoResponse,
    ValidationErrorResponse,
)
from application.energy.orchestrators.energy_orchestrator import (
    EnergyOrchestrator,
)
from domain.energy.core.value_objects.activity_level import ActivityLevel
from domain.energy.validation.input_validator import validate_calculation_input

logger = structlog.get_logger(__name__)

SERVICE_MESSAGE = "TDEE Calculator API - 2025 Edition"

AVAILABLE_ENDPOINTS = ["/", "/calculate", "/activity-levels", "/health"]

ENDPOINT_DESCRIPTIONS = {
    "POST /calculate": "Calculate TDEE with detailed breakdown",
    "GET /activity-levels": "Get activity level options",
    "GET /health": "Health check",
}

FEATURES = [
    "Accurate BMR calculation using Mifflin-St Jeor equation",
    "Detailed calorie goals for weight management",
    "Macro nutrition suggestions",
    "Input validation",
    "CORS enabled",
    "Rate limiting",
]

router = APIRouter(tags=["calculator"])


@router.get("/", response_model=ServiceInfoResponse)
async def service_info(request: Request) -> ServiceInfoResponse:
    return ServiceInfoResponse(
        message=SERVICE_MESSAGE,
        version=request.app.version,
        endpoints=ENDPOINT_DESCRIPTIONS,
        features=FEATURES,
    )


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    started_at = getattr(request.app.state, "started_at", time.monotonic())
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        uptime=round(time.monotonic() - started_at, 3),
    )


@router.get("/activity-levels", response_model=ActivityLevelsResponse)
async def activity_levels() -> ActivityLevelsResponse:
    return ActivityLevelsResponse(
        success=True,
        activity_levels={
            level.value: ActivityLevelInfo(
                multiplier=level.pal_multiplier(),
                description=level.description(),
            )
            for level in ActivityLevel
        },
    )


@router.post(
    "/calculate",
    response_model=CalculationResponse,
    responses={
        400: {"model": ValidationErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def calculate(request: Request) -> Any:
    """Validate the body, then compute BMR, TDEE, goals and macros.

    The body is read manually so that validation failures keep the
    ``{success, errors}`` shape instead of FastAPI's 422 payload.
    """
    try:
        body = await request.json()
    except ValueError:
        # Malformed or empty JSON is treated as an empty object
        body = {}

    validation = validate_calculation_input(body)
    if not validation.is_valid:
        logger.info("calculate.invalid_input", errors=validation.errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ValidationErrorResponse(errors=validation.errors).model_dump(),
        )

    orchestrator: EnergyOrchestrator = request.app.state.orchestrator
    try:
        result = orchestrator.calculate(validation.value)
        payload = CalculationResponse.model_validate(
            {"success": True, "data": result.to_dict()}
        )
    except Exception:
        logger.exception("calculate.failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Internal server error").model_dump(),
        )

    logger.info(
        "calculate.completed",
        bmr=result.bmr,
        tdee=result.tdee,
        activity_level=result.input.activity_level,
    )
    return payload
