"""One-decimal display rounding."""

from decimal import ROUND_HALF_UP, Decimal

_TENTHS = Decimal("0.1")


def round_tenths(value: float) -> float:
    """Round half away from zero at the tenths digit.

    Works on the shortest repr of the float, so 0.25 rounds to 0.3 even though
    its binary value sits slightly below the midpoint.
    """
    return float(Decimal(repr(float(value))).quantize(_TENTHS, rounding=ROUND_HALF_UP))
