"""Domain exceptions for energy calculations."""

from .domain_errors import EnergyDomainError, InvalidCalculationInputError

__all__ = [
    "EnergyDomainError",
    "InvalidCalculationInputError",
]
