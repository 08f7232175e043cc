"""Unit tests for GoalService."""

from domain.energy.calculation.goal_service import GoalService
from domain.energy.core.value_objects import TDEE, CalorieGoals, MacroSuggestions


class TestGoalService:
    """Calorie tiers and macro suggestions derived from TDEE."""

    def setup_method(self):
        self.service = GoalService()

    def test_calorie_goals_tiers(self):
        goals = self.service.calorie_goals(TDEE(2594))

        assert goals == CalorieGoals(
            extreme_weight_loss=1844,
            weight_loss=2094,
            mild_weight_loss=2344,
            maintenance=2594,
            mild_weight_gain=2844,
            weight_gain=3094,
        )

    def test_calorie_goals_order(self):
        goals = self.service.calorie_goals(TDEE(2000)).to_dict()

        assert list(goals) == [
            "extreme_weight_loss",
            "weight_loss",
            "mild_weight_loss",
            "maintenance",
            "mild_weight_gain",
            "weight_gain",
        ]

    def test_maintenance_equals_tdee(self):
        for value in (-500, 0, 1, 1234, 5000):
            assert self.service.calorie_goals(TDEE(value)).maintenance == value

    def test_negative_goals_are_not_floored(self):
        goals = self.service.calorie_goals(TDEE(600))

        assert goals.extreme_weight_loss == -150
        assert goals.weight_loss == 100

    def test_macro_suggestions_reference_scenario(self):
        macros = self.service.macro_suggestions(TDEE(2594), weight=70)

        # protein: 70 * 2.2 = 154
        # fat:     2594 * 0.25 / 9 = 72.06 -> 72
        # carbs:   2594 * 0.45 / 4 = 291.83 -> 292
        assert macros == MacroSuggestions(
            protein_grams=154, fat_grams=72, carb_grams=292
        )

    def test_macro_rounding_is_independent(self):
        """Each macro is rounded on its own quotient."""
        macros = self.service.macro_suggestions(TDEE(2000), weight=82.5)

        assert macros.protein_grams == 182  # 181.5 -> 182
        assert macros.fat_grams == 56  # 55.56 -> 56
        assert macros.carb_grams == 225  # 225.0

    def test_calculate_returns_both(self):
        goals, macros = self.service.calculate(TDEE(2160), weight=80)

        assert goals.maintenance == 2160
        assert macros.protein_grams == 176
        assert macros.total_calories() == 176 * 4 + 243 * 4 + 60 * 9
