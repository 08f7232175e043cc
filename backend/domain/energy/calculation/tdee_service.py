"""TDEEService - Total Daily Energy Expenditure calculation."""

from typing import Union

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE
from .rounding import round_half_up


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = round(BMR × PAL)

    PAL Multipliers:
        - sedentary: 1.2
        - lightly_active: 1.375
        - moderately_active: 1.55
        - very_active: 1.725
        - extra_active: 1.9

    Unknown or missing activity levels use the sedentary multiplier.
    The request validator does not reject them either, so a typo in
    ``activity_level`` silently yields a sedentary TDEE.
    """

    def calculate(
        self,
        bmr: BMR,
        activity_level: Union[ActivityLevel, str, None] = None,
    ) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Example:
            >>> TDEEService().calculate(BMR(1673.75), "moderately_active")
            TDEE(value=2594)
        """
        multiplier = ActivityLevel.resolve(activity_level).pal_multiplier()
        return TDEE(value=round_half_up(bmr.value * multiplier))
