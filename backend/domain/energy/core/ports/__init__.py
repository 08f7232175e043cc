"""Ports (interfaces) for the energy domain."""

from .calculators import IBMRCalculator, IGoalCalculator, ITDEECalculator

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "IGoalCalculator",
]
