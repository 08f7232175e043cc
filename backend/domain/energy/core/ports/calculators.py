"""Calculator ports - interfaces for BMR/TDEE/goal calculations."""

from abc import ABC, abstractmethod
from typing import Tuple, Union

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmr import BMR
from ..value_objects.calculation_input import CalculationInput
from ..value_objects.calorie_goals import CalorieGoals
from ..value_objects.macro_suggestions import MacroSuggestions
from ..value_objects.tdee import TDEE


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def calculate(self, calculation_input: CalculationInput) -> BMR:
        """Calculate BMR from validated input.

        Args:
            calculation_input: Validated biometric data

        Returns:
            BMR: Unrounded basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(
        self,
        bmr: BMR,
        activity_level: Union[ActivityLevel, str, None],
    ) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Activity category (unknown values are lenient)

        Returns:
            TDEE: Total daily energy expenditure, rounded
        """
        pass


class IGoalCalculator(ABC):
    """Port for calorie goal and macro suggestion derivation."""

    @abstractmethod
    def calculate(
        self,
        tdee: TDEE,
        weight: float,
    ) -> Tuple[CalorieGoals, MacroSuggestions]:
        """Derive calorie tiers and macros.

        Args:
            tdee: Total daily energy expenditure
            weight: Body weight in kg

        Returns:
            Calorie goals and macro suggestions
        """
        pass
