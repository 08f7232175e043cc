"""CalculationResult value object - full output of one calculation."""

from dataclasses import dataclass
from typing import Any, Dict

from .calculation_input import CalculationInput
from .calorie_goals import CalorieGoals
from .macro_suggestions import MacroSuggestions


@dataclass(frozen=True)
class CalculationResult:
    """Result of a BMR/TDEE calculation.

    Attributes:
        input: Normalized input the result was derived from
        bmr: BMR rounded to an integer (presentation value)
        tdee: TDEE in kcal/day
        calorie_goals: Calorie tiers around maintenance
        macro_suggestions: Protein/fat/carbs in grams
    """

    input: CalculationInput
    bmr: int
    tdee: int
    calorie_goals: CalorieGoals
    macro_suggestions: MacroSuggestions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input": self.input.to_dict(),
            "bmr": self.bmr,
            "tdee": self.tdee,
            "calorie_goals": self.calorie_goals.to_dict(),
            "macro_suggestions": self.macro_suggestions.to_dict(),
        }
