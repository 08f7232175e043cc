"""MacroSuggestions value object - suggested daily macronutrients."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class MacroSuggestions:
    """Macronutrient suggestion in grams per day.

    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g.

    Attributes:
        protein_grams: 2.2 g per kg of body weight
        fat_grams: 25% of TDEE
        carb_grams: 45% of TDEE
    """

    protein_grams: int
    fat_grams: int
    carb_grams: int

    def total_calories(self) -> int:
        """Calories covered by the suggestion (protein×4 + carbs×4 + fat×9)."""
        return self.protein_grams * 4 + self.carb_grams * 4 + self.fat_grams * 9

    def to_dict(self) -> Dict[str, int]:
        return {
            "protein_grams": self.protein_grams,
            "fat_grams": self.fat_grams,
            "carb_grams": self.carb_grams,
        }
