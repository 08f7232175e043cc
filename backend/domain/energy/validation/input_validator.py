"""Request body validation for energy calculations.

Checks every field and collects all failures instead of stopping at the
first one. Returns a ``ValidationResult`` rather than raising, so the HTTP
layer can branch on it directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.calculation_input import CalculationInput

WEIGHT_ERROR = "Weight must be between 1-1000 kg"
HEIGHT_ERROR = "Height must be between 1-300 cm"
AGE_ERROR = "Age must be between 1-150 years"
GENDER_ERROR = "Gender must be 'male' or 'female'"

MAX_WEIGHT_KG = 1000
MAX_HEIGHT_CM = 300
MAX_AGE_YEARS = 150

VALID_GENDERS = ("male", "female")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validation: either a normalized input or error messages."""

    value: Optional[CalculationInput] = None
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors and self.value is not None


def validate_calculation_input(body: Any) -> ValidationResult:
    """Validate a raw ``/calculate`` request body.

    Args:
        body: Decoded JSON body. Anything that is not a mapping is treated
            as an empty object.

    Returns:
        ValidationResult with ``value`` set on success, otherwise the
        ordered list of error messages (weight, height, age, gender).
    """
    data: Mapping[str, Any] = body if isinstance(body, Mapping) else {}
    errors: List[str] = []

    weight = _bounded_number(data.get("weight"), MAX_WEIGHT_KG)
    if weight is None:
        errors.append(WEIGHT_ERROR)

    height = _bounded_number(data.get("height"), MAX_HEIGHT_CM)
    if height is None:
        errors.append(HEIGHT_ERROR)

    age = _bounded_number(data.get("age"), MAX_AGE_YEARS)
    if age is None:
        errors.append(AGE_ERROR)

    gender = _gender(data.get("gender"))
    if gender is None:
        errors.append(GENDER_ERROR)

    if errors:
        return ValidationResult(errors=errors)

    # activity_level is not validated; the TDEE step falls back to
    # sedentary for names it does not recognise.
    activity_level = data.get("activity_level")
    if not isinstance(activity_level, str):
        activity_level = ActivityLevel.SEDENTARY.value

    return ValidationResult(
        value=CalculationInput(
            weight=weight,  # type: ignore[arg-type]
            height=height,  # type: ignore[arg-type]
            age=age,  # type: ignore[arg-type]
            gender=gender,  # type: ignore[arg-type]
            activity_level=activity_level,
        )
    )


def _bounded_number(raw: Any, upper: float) -> Optional[Union[int, float]]:
    """Return the number if it lies in (0, upper], else None.

    Accepts JSON numbers and numeric strings (no digit separators);
    booleans, NaN and infinity are rejected.
    """
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, str):
        if "_" in raw:
            return None
        try:
            number: Union[int, float] = float(raw.strip())
        except ValueError:
            return None
    elif isinstance(raw, (int, float)):
        number = raw
    else:
        return None

    # NaN and infinity fail the comparison too
    if not 0 < number <= upper:
        return None
    return number


def _gender(raw: Any) -> Optional[str]:
    if not isinstance(raw, str):
        return None
    normalized = raw.lower()
    return normalized if normalized in VALID_GENDERS else None
