"""Input validation for energy calculations."""

from .input_validator import (
    AGE_ERROR,
    GENDER_ERROR,
    HEIGHT_ERROR,
    WEIGHT_ERROR,
    ValidationResult,
    validate_calculation_input,
)

__all__ = [
    "ValidationResult",
    "validate_calculation_input",
    "WEIGHT_ERROR",
    "HEIGHT_ERROR",
    "AGE_ERROR",
    "GENDER_ERROR",
]
