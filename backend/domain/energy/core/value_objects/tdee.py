"""TDEE value object - Total Daily Energy Expenditure."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as round(BMR × PAL). Stored already rounded because every
    derived goal and macro is computed from the integer value.

    Attributes:
        value: TDEE in kcal/day
    """

    value: int

    def __str__(self) -> str:
        return f"{self.value} kcal/day"

    def __repr__(self) -> str:
        return f"TDEE(value={self.value})"
