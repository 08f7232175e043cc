"""EnergyOrchestrator - coordinates BMR, TDEE and goal services."""

from typing import Optional

import structlog

from domain.energy.calculation.bmr_service import BMRService
from domain.energy.calculation.goal_service import GoalService
from domain.energy.calculation.rounding import round_half_up
from domain.energy.calculation.tdee_service import TDEEService
from domain.energy.core.ports.calculators import (
    IBMRCalculator,
    IGoalCalculator,
    ITDEECalculator,
)
from domain.energy.core.value_objects.calculation_input import CalculationInput
from domain.energy.core.value_objects.calculation_result import (
    CalculationResult,
)

logger = structlog.get_logger(__name__)


class EnergyOrchestrator:
    """
    Orchestrates calculation services for a single request.

    Flow:
    1. Calculate BMR from validated biometric data
    2. Calculate TDEE from BMR and activity level
    3. Derive calorie goals and macro suggestions from TDEE and weight

    Input must come from the validator; the calculation itself is
    treated as infallible.
    """

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        goal_service: Optional[IGoalCalculator] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._goal_service = goal_service or GoalService()

    def calculate(self, calculation_input: CalculationInput) -> CalculationResult:
        """
        Calculate BMR, TDEE, calorie goals and macros.

        Args:
            calculation_input: Validated request data

        Returns:
            CalculationResult ready to be serialized
        """
        # Step 1: BMR (unrounded)
        bmr = self._bmr_service.calculate(calculation_input)

        # Step 2: TDEE (rounded once, on the final product)
        tdee = self._tdee_service.calculate(
            bmr=bmr,
            activity_level=calculation_input.activity_level,
        )

        # Step 3: goals and macros
        calorie_goals, macro_suggestions = self._goal_service.calculate(
            tdee=tdee,
            weight=calculation_input.weight,
        )

        logger.debug(
            "calculate.steps",
            bmr=bmr.value,
            tdee=tdee.value,
            activity_level=calculation_input.activity_level,
        )

        return CalculationResult(
            input=calculation_input,
            bmr=round_half_up(bmr.value),
            tdee=tdee.value,
            calorie_goals=calorie_goals,
            macro_suggestions=macro_suggestions,
        )
