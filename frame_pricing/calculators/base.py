"""
Abstract base class for frame calculators, plus the shared rounding and
area helpers every cost component uses.

Input: FrameOrderLine + CatalogSnapshot
Output: PriceResult
"""

from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")
UNIT = Decimal("1")
SQ_CM_PER_SQ_FT = Decimal("929.0304")   # 30.48 cm × 30.48 cm
CM_PER_M = Decimal("100")
ZERO = Decimal("0")
ZERO_CENTS = Decimal("0.00")


def as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round2(value) -> Decimal:
    """Round half-up to the nearest 0.01."""
    return as_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def round_to_half(value) -> Decimal:
    """Round half-up to the nearest 0.50. The result always ends in .00 or .50."""
    halves = (as_decimal(value) * 2).quantize(UNIT, rounding=ROUND_HALF_UP)
    return (halves / 2).quantize(CENT)


def area_sq_ft(width_cm, height_cm) -> Decimal:
    """Area of one piece in square feet, from centimeters. Not rounded."""
    return as_decimal(width_cm) * as_decimal(height_cm) / SQ_CM_PER_SQ_FT


def perimeter_m(width_cm, height_cm, waste_cm=ZERO) -> Decimal:
    """Frame perimeter in meters, with a fixed cutting allowance added once."""
    return (2 * (as_decimal(width_cm) + as_decimal(height_cm)) + as_decimal(waste_cm)) / CM_PER_M


class BaseCalculator(ABC):
    """All frame-kind calculators inherit from this."""

    @abstractmethod
    def calculate(self, line, snapshot):
        """
        Takes a validated FrameOrderLine and its CatalogSnapshot.
        Returns a PriceResult.
        """
        pass

    # --- Helper methods for all calculators ---

    def round2(self, value) -> Decimal:
        return round2(value)
