"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.calculation_input import CalculationInput


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    MALE_OFFSET = 5
    FEMALE_OFFSET = -161

    def calculate(self, calculation_input: CalculationInput) -> BMR:
        """Calculate BMR from validated biometric data.

        Example:
            >>> service = BMRService()
            >>> data = CalculationInput(
            ...     weight=70, height=175, age=25, gender="male"
            ... )
            >>> service.calculate(data).value
            1673.75
        """
        return BMR(
            value=self.mifflin_st_jeor(
                weight=calculation_input.weight,
                height=calculation_input.height,
                age=calculation_input.age,
                sex=calculation_input.gender,
            )
        )

    @classmethod
    def mifflin_st_jeor(
        cls, weight: float, height: float, age: float, sex: str
    ) -> float:
        """Raw formula, no rounding.

        Sex is compared case-insensitively; anything but 'male' takes the
        female branch (callers pass validated values only).
        """
        base = 10 * weight + 6.25 * height - 5 * age

        if sex.lower() == "male":
            return base + cls.MALE_OFFSET
        return base + cls.FEMALE_OFFSET
