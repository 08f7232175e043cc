"""Calculation services for energy expenditure."""

from .bmr_service import BMRService
from .goal_service import GoalService
from .rounding import round_half_up
from .tdee_service import TDEEService

__all__ = [
    "BMRService",
    "TDEEService",
    "GoalService",
    "round_half_up",
]
