"""GoalService - calorie goal tiers and macro suggestions."""

from typing import Tuple

from ..core.ports.calculators import IGoalCalculator
from ..core.value_objects.calorie_goals import CalorieGoals
from ..core.value_objects.macro_suggestions import MacroSuggestions
from ..core.value_objects.tdee import TDEE
from .rounding import round_half_up

PROTEIN_G_PER_KG = 2.2
FAT_CALORIE_SHARE = 0.25
CARB_CALORIE_SHARE = 0.45
KCAL_PER_G_FAT = 9
KCAL_PER_G_CARB = 4


class GoalService(IGoalCalculator):
    """Derive calorie goals and macro suggestions from TDEE.

    Calorie goals (kcal/day):
        extreme_weight_loss: TDEE - 750  (~1.5 lb/week)
        weight_loss:         TDEE - 500  (~1 lb/week)
        mild_weight_loss:    TDEE - 250  (~0.5 lb/week)
        maintenance:         TDEE
        mild_weight_gain:    TDEE + 250  (~0.5 lb/week)
        weight_gain:         TDEE + 500  (~1 lb/week)

    Macros (grams/day):
        protein: weight × 2.2
        fat:     TDEE × 25% / 9
        carbs:   TDEE × 45% / 4

    No floor is applied: a very low TDEE gives negative deficit tiers.
    """

    def calculate(
        self, tdee: TDEE, weight: float
    ) -> Tuple[CalorieGoals, MacroSuggestions]:
        return self.calorie_goals(tdee), self.macro_suggestions(tdee, weight)

    def calorie_goals(self, tdee: TDEE) -> CalorieGoals:
        """Six tiers around maintenance.

        Example:
            >>> GoalService().calorie_goals(TDEE(2594)).weight_loss
            2094
        """
        value = tdee.value
        return CalorieGoals(
            extreme_weight_loss=value - 750,
            weight_loss=value - 500,
            mild_weight_loss=value - 250,
            maintenance=value,
            mild_weight_gain=value + 250,
            weight_gain=value + 500,
        )

    def macro_suggestions(self, tdee: TDEE, weight: float) -> MacroSuggestions:
        """Protein from body weight, fat and carbs from TDEE shares.

        Example:
            >>> split = GoalService().macro_suggestions(TDEE(2594), 70)
            >>> split.protein_grams, split.fat_grams, split.carb_grams
            (154, 72, 292)
        """
        return MacroSuggestions(
            protein_grams=round_half_up(weight * PROTEIN_G_PER_KG),
            fat_grams=round_half_up(tdee.value * FAT_CALORIE_SHARE / KCAL_PER_G_FAT),
            carb_grams=round_half_up(
                tdee.value * CARB_CALORIE_SHARE / KCAL_PER_G_CARB
            ),
        )
