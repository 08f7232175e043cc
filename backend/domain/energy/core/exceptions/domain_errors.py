"""Domain exceptions for energy calculations."""


class EnergyDomainError(Exception):
    """Base exception for energy domain errors."""

    pass


class InvalidCalculationInputError(EnergyDomainError):
    """Raised when a CalculationInput is built from unchecked data."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors
