"""Value objects for the energy domain."""

from .activity_level import ActivityLevel
from .bmr import BMR
from .calculation_input import CalculationInput
from .calculation_result import CalculationResult
from .calorie_goals import CalorieGoals
from .macro_suggestions import MacroSuggestions
from .tdee import TDEE

__all__ = [
    "ActivityLevel",
    "CalculationInput",
    "BMR",
    "TDEE",
    "CalorieGoals",
    "MacroSuggestions",
    "CalculationResult",
]
