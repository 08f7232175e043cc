"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from typing import Optional


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) used to scale BMR into TDEE.

    - SEDENTARY: Little or no exercise, desk job
    - LIGHTLY_ACTIVE: Light exercise 1-3 days/week
    - MODERATELY_ACTIVE: Moderate exercise 3-5 days/week
    - VERY_ACTIVE: Hard exercise 6-7 days/week
    - EXTRA_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Example:
            >>> ActivityLevel.MODERATELY_ACTIVE.pal_multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHTLY_ACTIVE: 1.375,
            ActivityLevel.MODERATELY_ACTIVE: 1.55,
            ActivityLevel.VERY_ACTIVE: 1.725,
            ActivityLevel.EXTRA_ACTIVE: 1.9,
        }
        return multipliers[self]

    def description(self) -> str:
        """Get human-readable description."""
        descriptions = {
            ActivityLevel.SEDENTARY: "Little or no exercise, desk job",
            ActivityLevel.LIGHTLY_ACTIVE: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATELY_ACTIVE: "Moderate exercise 3-5 days/week",
            ActivityLevel.VERY_ACTIVE: "Hard exercise 6-7 days/week",
            ActivityLevel.EXTRA_ACTIVE: "Very hard exercise + physical job",
        }
        return descriptions[self]

    @classmethod
    def resolve(cls, value: Optional[str]) -> "ActivityLevel":
        """Map a raw category name to a level, falling back to SEDENTARY.

        Lookup is exact: unknown, differently-cased or missing names
        all resolve to SEDENTARY instead of failing.

        Example:
            >>> ActivityLevel.resolve("very_active")
            <ActivityLevel.VERY_ACTIVE: 'very_active'>
            >>> ActivityLevel.resolve("couch_potato")
            <ActivityLevel.SEDENTARY: 'sedentary'>
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.SEDENTARY
