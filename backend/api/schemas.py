"""Response models for the calculator REST API."""

from typing import Dict, List, Union

from pydantic import BaseModel, Field

Number = Union[int, float]


class ServiceInfoResponse(BaseModel):
    """Service metadata returned by ``GET /``."""

    message: str
    version: str
    endpoints: Dict[str, str]
    features: List[str]


class HealthResponse(BaseModel):
    """Liveness payload."""

    status: str = "healthy"
    timestamp: str
    uptime: float


class ActivityLevelInfo(BaseModel):
    multiplier: float
    description: str


class ActivityLevelsResponse(BaseModel):
    success: bool = True
    activity_levels: Dict[str, ActivityLevelInfo]


class CalculationInputEcho(BaseModel):
    weight: Number
    height: Number
    age: Number
    gender: str
    activity_level: str


class CalorieGoalsModel(BaseModel):
    extreme_weight_loss: int
    weight_loss: int
    mild_weight_loss: int
    maintenance: int
    mild_weight_gain: int
    weight_gain: int


class MacroSuggestionsModel(BaseModel):
    protein_grams: int
    fat_grams: int
    carb_grams: int


class CalculationData(BaseModel):
    input: CalculationInputEcho
    bmr: int
    tdee: int
    calorie_goals: CalorieGoalsModel
    macro_suggestions: MacroSuggestionsModel


class CalculationResponse(BaseModel):
    success: bool = True
    data: CalculationData


class ValidationErrorResponse(BaseModel):
    success: bool = False
    errors: List[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class NotFoundResponse(ErrorResponse):
    available_endpoints: List[str]
