"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Kept unrounded: rounding happens only when the value is presented.
    The Mifflin-St Jeor formula can go below zero for extreme (but
    in-range) inputs, so no sign constraint is enforced here.

    Attributes:
        value: BMR in kcal/day
    """

    value: float

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"

    def __repr__(self) -> str:
        return f"BMR(value={self.value})"
