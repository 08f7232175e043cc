"""Unit tests for EnergyOrchestrator."""

from unittest.mock import MagicMock

import pytest

from application.energy.orchestrators.energy_orchestrator import (
    EnergyOrchestrator,
)
from domain.energy.calculation.bmr_service import BMRService
from domain.energy.calculation.goal_service import GoalService
from domain.energy.calculation.tdee_service import TDEEService
from domain.energy.core.value_objects import (
    BMR,
    TDEE,
    CalculationInput,
    CalculationResult,
)


@pytest.fixture
def orchestrator() -> EnergyOrchestrator:
    """Create orchestrator with real services."""
    return EnergyOrchestrator(
        bmr_service=BMRService(),
        tdee_service=TDEEService(),
        goal_service=GoalService(),
    )


@pytest.fixture
def sample_input() -> CalculationInput:
    return CalculationInput(
        weight=70,
        height=175,
        age=25,
        gender="male",
        activity_level="moderately_active",
    )


def test_calculate_reference_scenario(
    orchestrator: EnergyOrchestrator, sample_input: CalculationInput
) -> None:
    result = orchestrator.calculate(sample_input)

    assert isinstance(result, CalculationResult)
    assert result.bmr == 1674
    assert result.tdee == 2594
    assert result.calorie_goals.maintenance == 2594
    assert result.calorie_goals.weight_loss == 2094
    assert result.macro_suggestions.protein_grams == 154
    assert result.input is sample_input


def test_calculate_is_deterministic(
    orchestrator: EnergyOrchestrator, sample_input: CalculationInput
) -> None:
    assert orchestrator.calculate(sample_input) == orchestrator.calculate(
        sample_input
    )


def test_tdee_uses_unrounded_bmr(orchestrator: EnergyOrchestrator) -> None:
    """TDEE multiplies the raw BMR, not the rounded one shown to the user."""
    data = CalculationInput(
        weight=70, height=175, age=25, gender="male", activity_level="extra_active"
    )

    result = orchestrator.calculate(data)

    # 1673.75 * 1.9 = 3180.125 -> 3180 ; 1674 * 1.9 = 3180.6 -> 3181
    assert result.tdee == 3180


def test_default_services_are_used_when_none_given(sample_input) -> None:
    result = EnergyOrchestrator().calculate(sample_input)

    assert result.tdee == 2594


def test_collaborators_are_called_in_order(sample_input) -> None:
    bmr_service = MagicMock()
    bmr_service.calculate.return_value = BMR(1500.4)
    tdee_service = MagicMock()
    tdee_service.calculate.return_value = TDEE(1800)
    goal_service = GoalService()

    result = EnergyOrchestrator(
        bmr_service=bmr_service,
        tdee_service=tdee_service,
        goal_service=goal_service,
    ).calculate(sample_input)

    bmr_service.calculate.assert_called_once_with(sample_input)
    tdee_service.calculate.assert_called_once_with(
        bmr=BMR(1500.4), activity_level="moderately_active"
    )
    assert result.bmr == 1500
    assert result.calorie_goals.weight_gain == 2300
