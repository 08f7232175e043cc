"""Integer rounding used at presentation boundaries."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Unlike builtin ``round`` (banker's rounding, ``round(2.5) == 2``),
    exact halves always move away from zero.

    Example:
        >>> round_half_up(2594.5)
        2595
        >>> round_half_up(72.0555)
        72
    """
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))
