"""CalculationInput value object - validated biometric request data."""

from dataclasses import dataclass
from typing import Any, Dict, Literal, Union

from .activity_level import ActivityLevel

Number = Union[int, float]


@dataclass(frozen=True)
class CalculationInput:
    """Normalized input for a single BMR/TDEE calculation.

    Built by the input validator once every field has passed its bounds
    check. ``__post_init__`` re-asserts the same bounds so an instance can
    never carry out-of-range data into the estimators.

    Attributes:
        weight: Body weight in kilograms (0 < w <= 1000)
        height: Height in centimeters (0 < h <= 300)
        age: Age in years (0 < a <= 150)
        gender: Lowercase 'male' or 'female'
        activity_level: Raw activity category name (resolved by TDEE step)
    """

    weight: Number
    height: Number
    age: Number
    gender: Literal["male", "female"]
    activity_level: str = ActivityLevel.SEDENTARY.value

    def __post_init__(self) -> None:
        """Validate field bounds.

        Raises:
            InvalidCalculationInputError: If any bound is violated
        """
        # Import here to avoid circular dependency
        from ..exceptions.domain_errors import InvalidCalculationInputError

        errors = []
        if not _in_range(self.weight, 1000):
            errors.append(f"weight out of range: {self.weight!r}")
        if not _in_range(self.height, 300):
            errors.append(f"height out of range: {self.height!r}")
        if not _in_range(self.age, 150):
            errors.append(f"age out of range: {self.age!r}")
        if self.gender not in ("male", "female"):
            errors.append(f"gender not recognized: {self.gender!r}")
        if errors:
            raise InvalidCalculationInputError(errors)

    def to_dict(self) -> Dict[str, Any]:
        """Echo representation used in API responses."""
        return {
            "weight": self.weight,
            "height": self.height,
            "age": self.age,
            "gender": self.gender,
            "activity_level": self.activity_level,
        }


def _in_range(value: Number, upper: float) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return 0 < value <= upper
