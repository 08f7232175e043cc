"""CalorieGoals value object - daily calorie targets per weight goal."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class CalorieGoals:
    """Six calorie tiers around maintenance, in kcal/day.

    Offsets follow the usual ~7700 kcal/kg rule: 250 kcal/day is about
    0.5 lb per week. Values may be negative for very low TDEE.
    """

    extreme_weight_loss: int
    weight_loss: int
    mild_weight_loss: int
    maintenance: int
    mild_weight_gain: int
    weight_gain: int

    def to_dict(self) -> Dict[str, int]:
        """Ordered mapping, from the steepest deficit to the largest surplus."""
        return {
            "extreme_weight_loss": self.extreme_weight_loss,
            "weight_loss": self.weight_loss,
            "mild_weight_loss": self.mild_weight_loss,
            "maintenance": self.maintenance,
            "mild_weight_gain": self.mild_weight_gain,
            "weight_gain": self.weight_gain,
        }
